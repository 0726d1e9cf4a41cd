from __future__ import annotations

import logging
from typing import Callable

from suimu.domain.models import ParseOutcome
from suimu.domain.result import BoundaryResult, Failure, Success
from suimu.errors import CsvSourceError

_log = logging.getLogger(__name__)


def wrap_outcome(parse: Callable[[], ParseOutcome]) -> BoundaryResult:
    """
    Назначение:
        Обернуть результат парсера в Success/Failure без дополнительной логики.

    Поведение:
        - Success несёт ровно ту последовательность записей, что вернул парсер.
        - CsvSourceError -> Failure(kind, message); исключение наружу не выходит.
    """
    try:
        outcome = parse()
    except CsvSourceError as exc:
        _log.info("CSV read failed kind=%s message=%s", exc.kind.value, exc.message)
        return Failure(kind=exc.kind.value, message=exc.message)
    return Success(records=outcome.records)
