from __future__ import annotations

import logging

from suimu.common.sanitize import truncateText
from suimu.domain.models import ParseOutcome
from suimu.domain.platforms import Platform
from suimu.domain.validation.logic_rules import check_record
from suimu.errors import CsvSourceError
from suimu.loggingSetup import logEvent
from suimu.usecases.parse_usecase import parse_maybemusic_csv


class CheckUseCase:
    """
    Назначение/ответственность:
        Проверка CSV-файла: разбор, пропущенные строки, логические предупреждения.

    Взаимодействия:
        - parse_maybemusic_csv для разбора (пропуск строк без обязательных полей).
        - check_record для предупреждений (порядок clip, площадка, datetime).
        - Результаты пишет в report.items/summary и в лог команды.
    """

    def __init__(self, format_only: bool, report_items_limit: int) -> None:
        self.format_only = format_only
        self.report_items_limit = report_items_limit
        self.outcome: ParseOutcome | None = None

    def _store(self, report, item: dict) -> None:
        if len(report.items) < self.report_items_limit:
            report.items.append(item)
        else:
            report.meta.items_truncated = True

    def run(self, csv_path: str, logger: logging.Logger, run_id: str, report) -> int:
        """
        Выходные данные:
            int
                0 - чисто, 1 - есть пропуски/предупреждения, 2 - файл не прочитан.
        """
        report.meta.csv_path = csv_path
        report.meta.report_items_limit = self.report_items_limit
        try:
            outcome = parse_maybemusic_csv(csv_path)
        except CsvSourceError as exc:
            report.summary.failed = 1
            report.summary.error = exc.to_dict()
            logEvent(logger, logging.ERROR, run_id, "csv", f"CSV validation failed: {exc.message}")
            return 2

        self.outcome = outcome
        report.meta.csv_rows_total = outcome.rows_total
        report.summary.records = len(outcome.records)
        report.summary.skipped = len(outcome.skipped)
        logEvent(
            logger,
            logging.INFO,
            run_id,
            "csv",
            f"CSV successfully validated. {len(outcome.records)} entries found.",
        )

        for skipped in outcome.skipped:
            self._store(
                report,
                {
                    "row_id": f"line:{skipped.line_no}",
                    "line_no": skipped.line_no,
                    "status": "skipped",
                    "errors": [issue.__dict__ for issue in skipped.issues],
                    "warnings": [],
                },
            )
            logEvent(
                logger,
                logging.WARNING,
                run_id,
                "csv",
                f"line {skipped.line_no}: skipped ({'; '.join(i.message for i in skipped.issues)})",
            )

        warning_rows = 0
        if not self.format_only:
            logEvent(logger, logging.INFO, run_id, "check", "Checking entry logic...")
            for record in outcome.records:
                issues = check_record(record)
                if not issues:
                    continue
                warning_rows += 1
                platform = Platform.parse(record.video_type)
                self._store(
                    report,
                    {
                        "row_id": f"{record.video_type}/{record.video_id}",
                        "label": truncateText(str(record), 200),
                        "url": platform.video_url(record.video_id) if platform else None,
                        "status": "warning",
                        "errors": [],
                        "warnings": [issue.__dict__ for issue in issues],
                    },
                )
                for issue in issues:
                    logEvent(logger, logging.WARNING, run_id, "check", f"{record}: {issue.message}")
        report.summary.warnings = warning_rows

        logEvent(
            logger,
            logging.INFO,
            run_id,
            "check",
            f"Check finished. records={len(outcome.records)} skipped={len(outcome.skipped)} warnings={warning_rows}",
        )
        if outcome.skipped or warning_rows:
            return 1
        return 0
