class MySentryDecodeError(ValueError):
    """Raised when a MySentry status message cannot be decoded."""
    pass


class MalformedLengthError(MySentryDecodeError):
    pass


class MalformedTrendError(MySentryDecodeError):
    pass


class MalformedPumpDateError(MySentryDecodeError):
    pass


class InvalidPackedDateError(ValueError):
    """Raised when six packed date bytes do not form a valid calendar date."""
    pass
