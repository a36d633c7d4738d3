"""Error taxonomy for directory operations."""

from __future__ import annotations


class DirectoryError(Exception):
    """Base class for every error raised by the directory core."""


class DataNotFound(DirectoryError):
    """The authoritative source (or the cache, on fallback) holds no data."""

    def __init__(self, message: str = "Data Not Found") -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DirectoryError):
    """Caller supplied input that cannot be forwarded upstream."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidArgument(InvalidInput):
    pass


class IncompleteData(InvalidInput):
    pass


class InvalidNumericFormat(InvalidInput):
    pass


class UpstreamError(DirectoryError):
    """Failure reported by (or while talking to) the remote directory API."""

    def __init__(self, detail: str, status_code: int | None = None) -> None:
        message = f"{status_code} {detail}" if status_code is not None else detail
        super().__init__(message)
        self.detail = detail
        self.status_code = status_code


class UpstreamClientError(UpstreamError):
    """4xx from the remote directory, rate limiting included."""


class UpstreamServerError(UpstreamError):
    """5xx from the remote directory."""


class UpstreamUnavailable(UpstreamError):
    """The remote directory could not be reached or timed out."""


class UpstreamPayloadError(UpstreamError):
    """The remote directory answered with a body we cannot interpret."""
