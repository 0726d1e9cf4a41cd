from __future__ import annotations

from typing import Iterable

from suimu.domain.models import REQUIRED_TEXT_FIELDS


def normalizeHeader(fieldnames: Iterable[str | None]) -> list[str]:
    """
    Назначение:
        Тримит имена колонок заголовка; сопоставление идёт по имени, не по позиции.
    """
    return [(name or "").strip() for name in fieldnames]


def missingRequiredColumns(fieldnames: Iterable[str]) -> list[str]:
    present = set(fieldnames)
    return [name for name in REQUIRED_TEXT_FIELDS if name not in present]
