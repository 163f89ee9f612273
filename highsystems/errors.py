"""Error taxonomy for High Systems API calls.

Every error raised out of a client call derives from HighSystemsError and
carries the HTTP status (0 when no response was received), a message, and
the sequence number of the call that produced it.
"""


class HighSystemsError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str, status: int = 0, sequence: int | None = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.sequence = sequence

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "status": self.status,
            "message": self.message,
            "sequence": self.sequence,
        }


class ConfigurationError(HighSystemsError):
    """Missing or invalid client configuration."""


class MissingParameter(HighSystemsError):
    """A required path, query or body option was not supplied."""

    def __init__(self, parameter: str, operation: str = "", sequence: int | None = None):
        where = f" for {operation}" if operation else ""
        super().__init__(f"Missing required parameter '{parameter}'{where}", sequence=sequence)
        self.parameter = parameter
        self.operation = operation


class InvalidParameter(HighSystemsError):
    """An option value is outside the closed set the Service accepts."""

    def __init__(self, parameter: str, value, sequence: int | None = None):
        super().__init__(f"Invalid value {value!r} for parameter '{parameter}'", sequence=sequence)
        self.parameter = parameter
        self.value = value


class RateLimitExceeded(HighSystemsError):
    """Raised when the connection limit is saturated and queueing is disabled."""

    def __init__(self, retry_after: float, limit: int, sequence: int | None = None):
        super().__init__(
            f"Connection limit of {limit} exceeded. Retry after {retry_after:.3f}s",
            sequence=sequence,
        )
        self.retry_after = retry_after
        self.limit = limit

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["retry_after"] = self.retry_after
        return data


class TransportError(HighSystemsError):
    """Network, DNS, or timeout failure before a response was received."""


class ServiceError(HighSystemsError):
    """The Service answered with a non-2xx status."""

    def __init__(self, message: str, status: int, sequence: int | None = None, body=None):
        super().__init__(message, status=status, sequence=sequence)
        self.body = body


class ParseError(HighSystemsError):
    """A 2xx response body was not valid JSON."""
