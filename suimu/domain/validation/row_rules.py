from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from suimu.domain.error_codes import ErrorKind
from suimu.domain.models import RowIssue

DECIMAL_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
STATUS_RE = re.compile(r"^\+?\d+$")
STATUS_MAX = 65535

def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""

def parse_decimal(value: str | None) -> float | None:
    """
    Назначение:
        Парсинг десятичного числа без учёта локали ("12.5", "-3", "1e3").

    Выходные данные:
        float | None
            None для пустой, нечисловой или бесконечной ячейки.
    """
    if is_blank(value):
        return None
    text = value.strip()
    if DECIMAL_RE.match(text) is None:
        return None
    parsed = float(text)
    if not math.isfinite(parsed):
        return None
    return parsed

def parse_status(value: str | None) -> int | None:
    """
    Назначение:
        Парсинг кода статуса: целое 0..65535, иначе None.
    """
    if is_blank(value):
        return None
    text = value.strip()
    if STATUS_RE.match(text) is None:
        return None
    parsed = int(text)
    if parsed > STATUS_MAX:
        return None
    return parsed

@dataclass(frozen=True)
class FieldRule:
    """
    Назначение:
        Правило одного поля: берёт ячейку по имени колонки, проверяет и парсит.

    Контракт:
        - apply(values, errors) -> parsed_value | None
        - required: пустая/пробельная ячейка или отсутствующая колонка -> ошибка.
        - parser: None означает "копировать текст как есть".
        - default: значение для отсутствующей колонки/ячейки без парсера.
    """

    name: str
    required: bool = False
    parser: Optional[Callable[[str | None], Any]] = None
    default: Any = None

    def apply(self, values: Mapping[str, str | None], errors: list[RowIssue]) -> Any:
        raw = values.get(self.name)
        if self.required and is_blank(raw):
            errors.append(
                RowIssue(
                    code=ErrorKind.MALFORMED_ROW.value,
                    field=self.name,
                    message=f"{self.name} is required",
                )
            )
            return None
        if self.parser is not None:
            return self.parser(raw)
        if raw is None:
            return self.default
        return raw

FIELD_RULES: tuple[FieldRule, ...] = (
    FieldRule("datetime", required=True),
    FieldRule("video_type", required=True),
    FieldRule("video_id", required=True),
    FieldRule("clip_start", parser=parse_decimal),
    FieldRule("clip_end", parser=parse_decimal),
    FieldRule("status", parser=parse_status),
    FieldRule("title", default=""),
    FieldRule("artist", default=""),
    FieldRule("performer", default=""),
    FieldRule("comment", default=""),
)
