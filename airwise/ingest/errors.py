"""Errors raised by upstream data provider clients."""


class ProviderError(Exception):
    """Raised when a provider returns an error status or error payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
