from __future__ import annotations

import csv
from typing import Iterator

from suimu.domain.error_codes import ErrorKind
from suimu.domain.transform.source_record import SourceRecord
from suimu.errors import CsvSourceError
from suimu.infra.sources.csv_utils import missingRequiredColumns, normalizeHeader


class CsvRecordSource:
    """
    Назначение/ответственность:
        CSV-источник с заголовком: читает строки и отдаёт SourceRecord
        со значениями по именам колонок.

    Поведение:
        - Кодировка utf-8 (BOM допускается), стандартные правила кавычек csv.
        - Пустые строки пропускаются; лишние колонки игнорируются.
        - Строка, которую не удалось токенизировать (ячейка длиннее
          csv.field_size_limit()), отдаётся как SourceRecord с error, чтение продолжается.
        - Нет заголовка или нет обязательной колонки -> CsvSourceError(INVALID_HEADER).
        - Ошибки ввода-вывода и декодирования не перехватываются.
    """

    def __init__(self, path: str, delimiter: str = ",") -> None:
        self.path = path
        self.delimiter = delimiter
        self.fieldnames: list[str] = []

    def __iter__(self) -> Iterator[SourceRecord]:
        with open(self.path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f, delimiter=self.delimiter)
            if reader.fieldnames is None:
                raise CsvSourceError(
                    kind=ErrorKind.INVALID_HEADER,
                    message=f"Missing header in CSV: {self.path}",
                    path=self.path,
                )
            reader.fieldnames = normalizeHeader(reader.fieldnames)
            self.fieldnames = list(reader.fieldnames)
            missing = missingRequiredColumns(self.fieldnames)
            if missing:
                raise CsvSourceError(
                    kind=ErrorKind.INVALID_HEADER,
                    message=f"CSV header is missing required columns: {', '.join(missing)}",
                    path=self.path,
                )
            while True:
                try:
                    row = next(reader)
                except StopIteration:
                    return
                except csv.Error as exc:
                    # the tokenizer resets on the next physical line
                    csv_line_no = reader.reader.line_num
                    yield SourceRecord(
                        line_no=csv_line_no,
                        record_id=f"line:{csv_line_no}",
                        values={},
                        error=str(exc),
                    )
                    continue
                # line_num points at the last physical line of the record
                csv_line_no = reader.line_num
                values = {key: value for key, value in row.items() if key is not None}
                yield SourceRecord(
                    line_no=csv_line_no,
                    record_id=f"line:{csv_line_no}",
                    values=values,
                )
