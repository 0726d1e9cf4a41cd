from __future__ import annotations

import json
import logging
import time

import typer

from .commands import COMMANDS, invoke_command
from .common.run_id import generate_run_id
from .config import Settings, loadSettings
from .loggingSetup import commandLogging, logEvent, mapLogLevel
from .reporter import createEmptyReport, finalizeReport, writeReportJson
from .timeUtils import getDurationMs
from .usecases.check_usecase import CheckUseCase

app = typer.Typer(no_args_is_help=True, add_completion=False)


def runCheckCommand(ctx: typer.Context, csvPath: str, formatOnly: bool, jsonOutput: bool) -> None:
    """
    Назначение:
        Запуск проверки CSV с логом и отчётом.

    Поведение:
        - Лог команды: <log_dir>/check_<runId>.log (туда же пишут логгеры разбора CSV).
        - report_check_<runId>.json пишется всегда, в том числе при ошибке чтения файла.
        - Сводка и JSON печатаются после закрытия лога.
    """
    runId = ctx.obj["runId"]
    settings: Settings = ctx.obj["settings"]
    sources = ctx.obj["sources"]

    startMonotonic = time.monotonic()
    report = createEmptyReport(runId=runId, command="check", configSources=sources)
    usecase = CheckUseCase(format_only=formatOnly, report_items_limit=settings.report_items_limit)

    with commandLogging("check", settings.log_dir, runId, settings.log_level) as (logger, logFilePath):
        logEvent(logger, logging.INFO, runId, "core", f"Command started csv={csvPath} sources={sources}")
        try:
            exitCode = usecase.run(csv_path=csvPath, logger=logger, run_id=runId, report=report)
        finally:
            finalizeReport(
                report=report,
                durationMs=getDurationMs(startMonotonic, time.monotonic()),
                logFile=logFilePath,
                reportDir=settings.report_dir,
            )
            reportPath = writeReportJson(report, settings.report_dir, f"report_check_{runId}")
            logEvent(logger, logging.INFO, runId, "report", f"Report written: {reportPath}")

    if exitCode == 2:
        error = report.summary.error or {}
        typer.echo(f"ERROR: {error.get('kind')}: {error.get('message')}", err=True)
        raise typer.Exit(code=exitCode)

    typer.echo(f"records={report.summary.records} skipped={report.summary.skipped} warnings={report.summary.warnings}")
    if jsonOutput and usecase.outcome is not None:
        payload = [record.to_dict() for record in usecase.outcome.records]
        typer.echo(json.dumps(payload, ensure_ascii=False))
    raise typer.Exit(code=exitCode)

@app.callback()
def main(
    ctx: typer.Context,
    config: str | None = typer.Option(None, "--config", help="Path to config.yml"),
    runId: str | None = typer.Option(None, "--run-id", help="Run identifier (UUID). If omitted, generated."),
    logLevel: str | None = typer.Option(None, "--log-level", help="Log level: ERROR|WARN|INFO|DEBUG"),
    logDir: str | None = typer.Option(None, "--log-dir", help="Directory for logs."),
    reportDir: str | None = typer.Option(None, "--report-dir", help="Directory for reports."),
    reportItemsLimit: int | None = typer.Option(None, "--report-items-limit", help="Limit report items stored"),
):
    """
    Назначение:
        Глобальная инициализация CLI:
        - генерирует/принимает run_id
        - загружает настройки (CLI > ENV > config > defaults)
        - сохраняет всё в ctx.obj для подкоманд
    """
    if not runId:
        runId = generate_run_id()

    cliOverrides = {
        "log_level": logLevel,
        "log_dir": logDir,
        "report_dir": reportDir,
        "report_items_limit": reportItemsLimit,
    }
    try:
        loaded = loadSettings(config_path=config, cli_overrides=cliOverrides)
        mapLogLevel(loaded.settings.log_level)
    except ValueError as exc:
        typer.echo(f"ERROR: invalid settings: {exc}", err=True)
        raise typer.Exit(code=2)

    ctx.obj = {
        "runId": runId,
        "settings": loaded.settings,
        "sources": loaded.sources_used,
        "configPath": config,
    }

@app.command()
def check(
    ctx: typer.Context,
    csv: str = typer.Argument("suisei-music.csv", help="The CSV file to check"),
    formatOnly: bool = typer.Option(False, "--format-only", help="Only check formats"),
    jsonOutput: bool = typer.Option(False, "--json-output", help="Print parsed records as JSON"),
):
    """Validate a MaybeMusic CSV file."""
    runCheckCommand(ctx, csv, formatOnly, jsonOutput)

@app.command()
def invoke(
    name: str = typer.Argument(..., help=f"Command name: {', '.join(COMMANDS)}"),
    args: str | None = typer.Option(None, "--args", help='Named arguments as JSON, e.g. {"csvPath": "a.csv"}'),
):
    """Call a boundary command and print its result as JSON."""
    try:
        parsed = json.loads(args) if args else {}
    except json.JSONDecodeError as exc:
        typer.echo(f"ERROR: --args is not valid JSON: {exc}", err=True)
        raise typer.Exit(code=2)
    if not isinstance(parsed, dict):
        typer.echo("ERROR: --args must be a JSON object", err=True)
        raise typer.Exit(code=2)

    result = invoke_command(name, parsed)
    typer.echo(json.dumps(result, ensure_ascii=False))
    if not result["ok"]:
        raise typer.Exit(code=1)
