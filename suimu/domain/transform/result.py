from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from suimu.domain.models import RowIssue
from suimu.domain.transform.source_record import SourceRecord

T = TypeVar("T")


@dataclass
class TransformResult(Generic[T]):
    """
    Назначение:
        Результат маппинга одной строки: запись либо список ошибок.
    """

    record: SourceRecord
    row: T | None
    errors: list[RowIssue] = field(default_factory=list)
