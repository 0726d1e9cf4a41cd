from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from suimu.domain.error_codes import ErrorKind


@dataclass(eq=False)
class CsvSourceError(Exception):
    """
    Назначение:
        Фатальная ошибка уровня файла: CSV не удалось прочитать целиком.

    Инварианты/гарантии:
        - Не пересекает границу вызова: адаптер превращает её в Failure.
    """

    kind: ErrorKind
    message: str
    path: str | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "message": self.message,
            "path": self.path,
        }


__all__ = ["CsvSourceError"]
