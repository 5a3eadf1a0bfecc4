"""Custom exceptions for DOCX Composer."""

from typing import Optional


class DocxComposerError(Exception):
    """Base exception for DOCX Composer errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ValidationError(DocxComposerError):
    """Exception raised when a model receives an invalid value or child."""

    pass


class ConfigurationError(DocxComposerError):
    """Exception raised for unknown or malformed section settings."""

    pass
