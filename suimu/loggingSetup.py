from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

PACKAGE_LOGGER = "suimu"

# module logger -> component shown in the run log
COMPONENTS: dict[str, str] = {
    "suimu.usecases.parse_usecase": "csv",
    "suimu.usecases.boundary_adapter": "boundary",
    "suimu.commands": "boundary",
}

LOG_FORMAT = "%(asctime)s %(levelname)s runId=%(runId)s comp=%(component)s msg=%(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def componentFor(loggerName: str) -> str:
    """
    Назначение:
        Имя компонента для записи лога по имени логгера модуля.
        "suimu.check" -> "check", "suimu.usecases.parse_usecase" -> "csv".
    """
    if loggerName in COMPONENTS:
        return COMPONENTS[loggerName]
    return loggerName.rsplit(".", 1)[-1]


class RunContextFilter(logging.Filter):
    """
    Назначение:
        Проставляет runId и component в записи, пришедшие от логгеров модулей
        (parse_usecase, boundary_adapter), которые про запуск ничего не знают.
    """

    def __init__(self, runId: str):
        super().__init__()
        self.runId = runId

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "runId"):
            record.runId = self.runId
        if not hasattr(record, "component"):
            record.component = componentFor(record.name)
        return True


def mapLogLevel(levelName: str) -> int:
    """
    Назначение:
        Преобразует строковый уровень логирования в logging level.

    Входные данные:
        levelName: str
            ERROR|WARN|INFO|DEBUG
    """
    value = (levelName or "").strip().upper()
    if value == "ERROR":
        return logging.ERROR
    if value in ("WARN", "WARNING"):
        return logging.WARNING
    if value == "INFO":
        return logging.INFO
    if value == "DEBUG":
        return logging.DEBUG
    raise ValueError(f"Unsupported log level: {levelName}")


@contextmanager
def commandLogging(commandName: str, logDir: str, runId: str, logLevel: str) -> Iterator[tuple[logging.Logger, str]]:
    """
    Назначение:
        Лог-файл одного запуска команды: <logDir>/<commandName>_<runId>.log.

    Поведение:
        - Файловый хендлер вешается на логгер пакета "suimu", поэтому туда же
          попадают записи логгеров модулей (разбор CSV, адаптер границы).
        - Возвращает логгер команды "suimu.<commandName>" и путь к файлу.
        - На выходе хендлер снимается и закрывается, уровень пакета восстанавливается.
    """
    level = mapLogLevel(logLevel)
    Path(logDir).mkdir(parents=True, exist_ok=True)
    logFilePath = str(Path(logDir) / f"{commandName}_{runId}.log")

    handler = logging.FileHandler(logFilePath, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
    handler.addFilter(RunContextFilter(runId))

    packageLogger = logging.getLogger(PACKAGE_LOGGER)
    previousLevel = packageLogger.level
    packageLogger.addHandler(handler)
    packageLogger.setLevel(level)
    try:
        yield logging.getLogger(f"{PACKAGE_LOGGER}.{commandName}"), logFilePath
    finally:
        packageLogger.removeHandler(handler)
        packageLogger.setLevel(previousLevel)
        handler.close()


def logEvent(logger: logging.Logger, level: int, runId: str, component: str, message: str) -> None:
    logger.log(level, message, extra={"runId": runId, "component": component})
