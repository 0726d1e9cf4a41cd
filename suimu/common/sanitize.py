def truncateText(value: str | None, limit: int = 500) -> str | None:
    """
    Назначение:
        Ограничивает длину текста ячейки, чтобы не раздувать логи/отчёты.

    Входные данные:
        value: str | None
            Текст для усечения.
        limit: int
            Максимально допустимая длина строки.

    Выходные данные:
        str | None
            Строка, не длиннее limit символов; None, если вход None.
    """
    if value is None:
        return None
    if len(value) <= limit:
        return value
    suffix = "..." if limit > 3 else ""
    head = limit - len(suffix)
    return value[:head] + suffix
