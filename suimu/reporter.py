from __future__ import annotations

import json
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Any

from .timeUtils import getNowIso


@dataclass
class ReportMeta:
    """
    Назначение:
        Метаданные отчёта запуска команды.
    """
    run_id: str
    command: str
    started_at: str
    finished_at: str | None = None
    duration_ms: int | None = None
    csv_path: str | None = None
    csv_rows_total: int | None = None
    report_items_limit: int | None = None
    items_truncated: bool = False
    log_file: str | None = None
    report_dir: str | None = None
    config_sources: list[str] = field(default_factory=list)


@dataclass
class ReportSummary:
    """
    Назначение:
        Сводные счётчики проверки CSV.

    Поля:
        records: валидные записи
        skipped: строки, исключённые из результата
        warnings: записи с логическими предупреждениями
        failed: 1, если файл не удалось прочитать
        error: kind/message/path ошибки чтения файла
    """
    records: int = 0
    skipped: int = 0
    warnings: int = 0
    failed: int = 0
    error: dict | None = None


@dataclass
class Report:
    """
    Назначение:
        Корневой объект отчёта.
    """
    meta: ReportMeta
    summary: ReportSummary
    items: list[dict]


def createEmptyReport(runId: str, command: str, configSources: list[str]) -> Report:
    """
    Назначение:
        Создаёт пустой отчёт-скелет для команды.
    """
    meta = ReportMeta(
        run_id=runId,
        command=command,
        started_at=getNowIso(),
        config_sources=configSources or [],
    )
    return Report(meta=meta, summary=ReportSummary(), items=[])


def finalizeReport(report: Report, durationMs: int, logFile: str | None, reportDir: str) -> None:
    report.meta.finished_at = getNowIso()
    report.meta.duration_ms = durationMs
    report.meta.log_file = logFile
    report.meta.report_dir = reportDir


def writeReportJson(report: Report, reportDir: str, fileBaseName: str) -> str:
    """
    Назначение:
        Записывает report.json на диск.

    Входные данные:
        report: Report
        reportDir: str
        fileBaseName: str
            Например: "report_check_<runId>"

    Выходные данные:
        str
            Полный путь к созданному файлу.
    """
    Path(reportDir).mkdir(parents=True, exist_ok=True)
    reportPath = str(Path(reportDir) / f"{fileBaseName}.json")

    data: dict[str, Any] = {
        "meta": asdict(report.meta),
        "summary": asdict(report.summary),
        "items": report.items,
    }
    with open(reportPath, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return reportPath
