from __future__ import annotations

import csv
import logging
import stat
from pathlib import Path

from suimu.common.sanitize import truncateText
from suimu.domain.error_codes import ErrorKind
from suimu.domain.models import MaybeMusic, ParseOutcome, RowIssue, SkippedRow
from suimu.domain.transform.result import TransformResult
from suimu.domain.transform.source_record import SourceRecord
from suimu.domain.validation.row_rules import FIELD_RULES
from suimu.errors import CsvSourceError
from suimu.infra.sources.csv_reader import CsvRecordSource

_log = logging.getLogger(__name__)


def map_record(record: SourceRecord) -> TransformResult[MaybeMusic]:
    """
    Назначение:
        Построить MaybeMusic из сырой строки по FIELD_RULES.

    Выходные данные:
        TransformResult[MaybeMusic]
            row=None и errors, если строка не токенизирована
            или нет обязательного текстового поля.
    """
    if record.error is not None:
        issue = RowIssue(
            code=ErrorKind.MALFORMED_ROW.value,
            field=None,
            message=f"Unreadable CSV row: {record.error}",
        )
        return TransformResult(record=record, row=None, errors=[issue])
    errors: list[RowIssue] = []
    parsed = {rule.name: rule.apply(record.values, errors) for rule in FIELD_RULES}
    if errors:
        return TransformResult(record=record, row=None, errors=errors)
    return TransformResult(record=record, row=MaybeMusic(**parsed))


def _require_file(csv_path: str) -> None:
    try:
        st = Path(csv_path).stat()
    except OSError as exc:
        kind = ErrorKind.from_os_error(exc)
        if kind is ErrorKind.NOT_FOUND:
            message = f"{csv_path} does not exist"
        else:
            message = f"Failed to access {truncateText(csv_path, 200)}: {exc.strerror or exc}"
        raise CsvSourceError(kind=kind, message=message, path=csv_path) from exc
    except (TypeError, ValueError) as exc:
        # embedded NUL, unencodable path, non-string path
        raise CsvSourceError(
            kind=ErrorKind.NOT_FOUND,
            message=f"Invalid CSV path {csv_path!r}: {exc}",
            path=str(csv_path),
        ) from exc
    if not stat.S_ISREG(st.st_mode):
        raise CsvSourceError(
            kind=ErrorKind.NOT_FOUND,
            message=f"{csv_path} is not a regular file",
            path=csv_path,
        )


def parse_maybemusic_csv(csv_path: str) -> ParseOutcome:
    """
    Назначение:
        Прочитать CSV по пути и построить упорядоченный список MaybeMusic.

    Входные данные:
        csv_path: str
            Путь к CSV (utf-8, первая строка - заголовок).

    Выходные данные:
        ParseOutcome
            records в порядке файла, skipped - строки без обязательных полей
            и строки, которые не удалось токенизировать.

    Поведение:
        - Строки без datetime/video_type/video_id пропускаются, порядок остальных сохраняется.
        - Нечисловые clip_start/clip_end/status становятся None, строка остаётся.
        - Ошибки уровня файла -> CsvSourceError (NOT_FOUND, READ_ERROR, INVALID_HEADER).
        - Состояние между вызовами не хранится.
    """
    if not csv_path:
        raise CsvSourceError(kind=ErrorKind.NOT_FOUND, message="CSV path is empty", path=csv_path)
    _require_file(csv_path)

    records: list[MaybeMusic] = []
    skipped: list[SkippedRow] = []
    rows_total = 0
    try:
        for source_record in CsvRecordSource(csv_path):
            rows_total += 1
            result = map_record(source_record)
            if result.row is None:
                skipped.append(SkippedRow(line_no=source_record.line_no, issues=tuple(result.errors)))
                _log.debug(
                    "Skipped CSV row line=%s reasons=%s video_id=%s",
                    source_record.line_no,
                    ",".join(issue.field or issue.code for issue in result.errors),
                    truncateText(source_record.values.get("video_id"), 80),
                )
                continue
            records.append(result.row)
    except OSError as exc:
        raise CsvSourceError(
            kind=ErrorKind.from_os_error(exc),
            message=f"Failed to read {csv_path}: {exc.strerror or exc}",
            path=csv_path,
        ) from exc
    except UnicodeDecodeError as exc:
        raise CsvSourceError(
            kind=ErrorKind.READ_ERROR,
            message=f"{csv_path} is not valid UTF-8: {exc.reason} at byte {exc.start}",
            path=csv_path,
        ) from exc
    except csv.Error as exc:
        # header row could not be tokenized
        raise CsvSourceError(
            kind=ErrorKind.READ_ERROR,
            message=f"CSV validation failed: {exc}",
            path=csv_path,
        ) from exc

    _log.info(
        "CSV parsed path=%s rows_total=%s records=%s skipped=%s",
        csv_path,
        rows_total,
        len(records),
        len(skipped),
    )
    return ParseOutcome(records=tuple(records), skipped=tuple(skipped), rows_total=rows_total)
