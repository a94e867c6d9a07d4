class TimestampError(Exception):
    """Raised when a timestamp is not a valid RFC 3339 date-time."""

    def __init__(self, value: str, reason: str = "not an RFC 3339 date-time"):
        self.value = value
        super().__init__(f"{value!r}: {reason}")
