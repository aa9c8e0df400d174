class LoaderError(Exception):
    """Base class for errors raised by the loader."""


class MalformedLineError(LoaderError, ValueError):
    """A dump line has no locatable subject (``<...>``)."""

    def __init__(self, line: str):
        self.line = line
        super().__init__(f"Malformed line, subject not found: {line[:200]!r}")


class ProtocolError(LoaderError, OSError):
    """The update API answered, but reported the request as failed."""
