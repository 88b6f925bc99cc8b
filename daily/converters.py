class DateConverter:
    """Path converter for entry identifiers (``YYYY-MM-DD``).

    The value stays a string; entries are looked up by file name, not by
    calendar date.
    """

    regex = r"\d{4}-\d{2}-\d{2}"

    def to_python(self, value: str) -> str:
        return value

    def to_url(self, value: str) -> str:
        return value
