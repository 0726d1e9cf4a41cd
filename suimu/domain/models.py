from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

REQUIRED_TEXT_FIELDS: tuple[str, ...] = ("datetime", "video_type", "video_id")
OPTIONAL_FIELDS: tuple[str, ...] = ("clip_start", "clip_end", "status")


@dataclass(frozen=True)
class MaybeMusic:
    """
    Назначение:
        Кандидат в музыкальный клип: одна валидная строка CSV.

    Инварианты/гарантии:
        - datetime, video_type, video_id непустые.
        - clip_start, clip_end, status либо распарсенное значение, либо None
          (None означает "не указано", а не 0 и не "").
        - Неизменяем после построения.
    """

    datetime: str
    video_type: str
    video_id: str
    clip_start: float | None = None
    clip_end: float | None = None
    status: int | None = None
    title: str = ""
    artist: str = ""
    performer: str = ""
    comment: str = ""

    def __str__(self) -> str:
        if self.video_type:
            video_fmtid = f"{self.video_type}/{self.video_id}"
        else:
            video_fmtid = f"paid, {self.datetime}"
        if not self.title:
            return f"Untitled ({video_fmtid})"
        if not self.artist:
            return f"{self.title} ({video_fmtid})"
        return f"{self.artist} - {self.title} ({video_fmtid})"

    def to_dict(self) -> dict[str, Any]:
        """
        Назначение:
            Представление для передачи через границу вызова.
            Отсутствующие опциональные поля не попадают в словарь.
        """
        data: dict[str, Any] = {
            "datetime": self.datetime,
            "video_type": self.video_type,
            "video_id": self.video_id,
        }
        for name in OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        data["title"] = self.title
        data["artist"] = self.artist
        data["performer"] = self.performer
        data["comment"] = self.comment
        return data


@dataclass
class RowIssue:
    """
    Назначение:
        Диагностическое сообщение по строке (причина пропуска или предупреждение).
    """
    code: str
    field: str | None
    message: str


@dataclass(frozen=True)
class SkippedRow:
    """
    Назначение:
        Строка CSV, исключённая из результата, с причинами.
    """
    line_no: int
    issues: tuple[RowIssue, ...]


@dataclass(frozen=True)
class ParseOutcome:
    """
    Назначение:
        Итог разбора файла: валидные записи в порядке файла + диагностика пропусков.
    """
    records: tuple[MaybeMusic, ...]
    skipped: tuple[SkippedRow, ...] = field(default_factory=tuple)
    rows_total: int = 0
