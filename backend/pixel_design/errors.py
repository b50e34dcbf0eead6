"""Domain-specific exceptions for the pixel design service."""

from typing import Optional


class PixelDesignError(Exception):
    """Base exception for pixel design errors."""


class DesignValidationError(PixelDesignError):
    """Raised when a candidate design is rejected on write."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DesignClientError(PixelDesignError):
    """Raised by the HTTP client when the server answers with a failure status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
