class ClimateStatsError(Exception):
    """Base class for errors raised by climate_stats."""


class UsageError(ClimateStatsError):
    """No input files were given on the command line."""


class InputUnavailable(ClimateStatsError):
    """A named input file could not be opened."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        msg = f"Cannot open input file: {path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class MalformedRecord(ClimateStatsError):
    """An input line is not a well-formed 9-field observation."""

    def __init__(self, reason: str, line: str = ""):
        self.reason = reason
        self.line = line
        super().__init__(reason)
