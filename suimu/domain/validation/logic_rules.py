from __future__ import annotations

from datetime import datetime

from suimu.domain.models import MaybeMusic, RowIssue
from suimu.domain.platforms import Platform

LEGACY_DATETIME_FORMAT = "%Y-%m-%dT%H:%M%z"

def parse_datetime(value: str) -> datetime | None:
    """
    Назначение:
        Разбор времени записи: RFC 3339 либо устаревший формат без секунд
        ("2020-01-31T19:58+09:00").
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        parsed = None
    if parsed is not None and parsed.tzinfo is not None:
        return parsed
    try:
        return datetime.strptime(text, LEGACY_DATETIME_FORMAT)
    except ValueError:
        return None

def check_logic(record: MaybeMusic) -> list[RowIssue]:
    # clip_start/clip_end are not validated by the parser; reported here instead.
    if record.clip_start is None or record.clip_end is None:
        return []
    if record.clip_start < record.clip_end:
        return []
    return [
        RowIssue(
            code="CLIP_ORDER",
            field="clip_start",
            message="clip_start is later than clip_end",
        )
    ]

def check_support(record: MaybeMusic) -> list[RowIssue]:
    if Platform.parse(record.video_type) is not None:
        return []
    return [
        RowIssue(
            code="UNSUPPORTED_PLATFORM",
            field="video_type",
            message=f"Platform not supported: {record.video_type}",
        )
    ]

def check_datetime(record: MaybeMusic) -> list[RowIssue]:
    if parse_datetime(record.datetime) is not None:
        return []
    return [
        RowIssue(
            code="INVALID_DATETIME",
            field="datetime",
            message=f"Invalid datetime: {record.datetime}",
        )
    ]

def check_record(record: MaybeMusic) -> list[RowIssue]:
    """
    Назначение:
        Логические проверки записи. Возвращает только предупреждения:
        запись остаётся в результате разбора.
    """
    return [*check_logic(record), *check_support(record), *check_datetime(record)]
