"""Exception types for yamlet."""


class YamletError(Exception):
    """Base class for errors raised by yamlet."""


class SourceError(YamletError):
    """Raised when source text cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read '{path}': {reason}")
        self.path = path
        self.reason = reason
