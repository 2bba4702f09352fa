from enum import Enum


class ErrorKind(str, Enum):
    CONFIG = "config"
    TRANSPORT = "transport"
    API_ERROR = "api"
    UNEXPECTED = "unexpected"


class SampleError(Exception):
    """Base class for failures the command-line samples know how to report."""

    kind: ErrorKind = ErrorKind.UNEXPECTED


class ConfigError(SampleError):
    """Raised when the properties resource is missing, unreadable or incomplete."""

    kind = ErrorKind.CONFIG


class TransportError(SampleError):
    """Raised when the request fails before a response is received."""

    kind = ErrorKind.TRANSPORT


class ApiError(SampleError):
    """Raised when the YouTube API answers with a structured error."""

    kind = ErrorKind.API_ERROR

    def __init__(self, code: int, message: str):
        super().__init__(f"{code} : {message}")
        self.code = code
        self.message = message
