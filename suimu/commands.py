from __future__ import annotations

import logging
from typing import Any, Callable, Dict

from suimu.domain.result import Failure, to_boundary
from suimu.usecases.boundary_adapter import wrap_outcome
from suimu.usecases.parse_usecase import parse_maybemusic_csv

INVALID_COMMAND = "InvalidCommand"

_log = logging.getLogger(__name__)


def get_maybemusic_by_csv_path(csvPath: str) -> Dict[str, Any]:
    """
    Назначение:
        Команда границы: CSV по пути -> {ok, object, message}.

    Входные данные:
        csvPath: str
            Путь к CSV-файлу.

    Выходные данные:
        dict
            Успех со списком записей либо ошибка с kind и message.
    """
    return to_boundary(wrap_outcome(lambda: parse_maybemusic_csv(csvPath)))


COMMANDS: Dict[str, Callable[..., Dict[str, Any]]] = {
    "get_maybemusic_by_csv_path": get_maybemusic_by_csv_path,
}


def invoke_command(name: str, args: Dict[str, Any] | None = None) -> Dict[str, Any]:
    """
    Назначение:
        Точка диспетчеризации для хост-процесса: вызов команды по имени
        с именованными аргументами.

    Поведение:
        - Неизвестная команда или неверные аргументы -> Failure с kind=InvalidCommand.
    """
    handler = COMMANDS.get(name)
    if handler is None:
        return to_boundary(Failure(kind=INVALID_COMMAND, message=f"Unknown command: {name}"))
    try:
        return handler(**(args or {}))
    except TypeError as exc:
        _log.info("Invalid arguments for %s: %s", name, exc)
        return to_boundary(Failure(kind=INVALID_COMMAND, message=f"Invalid arguments for {name}: {exc}"))
