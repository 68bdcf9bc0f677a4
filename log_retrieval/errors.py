"""Error taxonomy for log file retrieval."""


class LogRetrievalError(Exception):
    """Base class for log retrieval failures."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class NotFoundError(LogRetrievalError):
    """The log file (or log directory) does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Log file not found: {path}", path)


class ReadError(LogRetrievalError):
    """The log file exists but could not be opened or read to completion."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read log file {path}: {reason}", path)
        self.reason = reason


class ParseError(LogRetrievalError):
    """A single log line is not a well-formed JSON object."""

    def __init__(self, reason: str, line: str = ""):
        super().__init__(f"Malformed log line: {reason}")
        self.line = line
