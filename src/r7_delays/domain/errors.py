"""Domain errors."""


class UpstreamError(Exception):
    """The upstream transit API could not be reached or returned an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize with a message and the HTTP status code, if one was received."""
        super().__init__(message)
        self.status_code = status_code
