from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class SourceRecord:
    """
    Назначение:
        Сырая строка CSV: значения по именам колонок заголовка.
        error заполнен, если строку не удалось токенизировать.
    """

    line_no: int
    record_id: str
    values: Mapping[str, str | None]
    error: str | None = None
