from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """
    Назначение:
        Таксономия ошибок чтения CSV, передаваемая через границу вызова.
    """

    NOT_FOUND = "NotFound"
    READ_ERROR = "ReadError"
    INVALID_HEADER = "InvalidHeader"
    MALFORMED_ROW = "MalformedRow"

    @classmethod
    def from_os_error(cls, exc: OSError) -> "ErrorKind":
        """
        Назначение:
            Подбор кода по типу OSError.
        """
        if isinstance(exc, (FileNotFoundError, IsADirectoryError, NotADirectoryError)):
            return cls.NOT_FOUND
        return cls.READ_ERROR
