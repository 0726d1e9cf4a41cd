from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from suimu.domain.models import MaybeMusic


@dataclass(frozen=True)
class Success:
    """
    Назначение:
        Успешный результат: записи в порядке строк файла (пустой список тоже успех).
    """

    records: tuple[MaybeMusic, ...]


@dataclass(frozen=True)
class Failure:
    """
    Назначение:
        Ошибка уровня файла. Частичный список записей не прикладывается.
    """

    kind: str
    message: str


BoundaryResult = Union[Success, Failure]


def to_boundary(result: BoundaryResult) -> dict[str, Any]:
    """
    Назначение:
        Сериализация результата в простые данные для передачи через границу процесса.

    Выходные данные:
        dict
            {"ok": True, "object": [...], "message": None}
            {"ok": False, "object": None, "kind": "...", "message": "..."}
    """
    if isinstance(result, Success):
        return {
            "ok": True,
            "object": [record.to_dict() for record in result.records],
            "message": None,
        }
    if isinstance(result, Failure):
        return {
            "ok": False,
            "object": None,
            "kind": result.kind,
            "message": result.message,
        }
    raise TypeError(f"Unsupported result type: {type(result).__name__}")
