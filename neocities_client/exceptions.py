from __future__ import annotations


class NeocitiesError(RuntimeError):
    pass


class AuthenticationError(NeocitiesError):
    pass


class TransportError(NeocitiesError):
    """The request could not be sent or no response came back."""


class ApiError(NeocitiesError):
    """The service answered, but reported a failure."""

    def __init__(self, status_code: int, message: str, error_type: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error_type = error_type

    def __str__(self) -> str:
        if self.error_type:
            return f"HTTP {self.status_code} [{self.error_type}]: {self.message}"
        return f"HTTP {self.status_code}: {self.message}"


class ResponseFormatError(ApiError):
    pass
