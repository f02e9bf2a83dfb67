from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class FetchError(DomainError):
    """Raised when the feature registry or the documentation corpus cannot be read."""

    def __init__(self, source: str, message: str | None = None):
        self.source = source
        super().__init__(message or f"Failed to load {source}")


class PersistenceError(DomainError):
    """Raised when reading or writing a section's references fails."""

    def __init__(self, section_id: str, operation: str, message: str | None = None):
        self.section_id = section_id
        self.operation = operation
        super().__init__(message or f"{operation} failed for section {section_id}")


class ConcurrencyError(PersistenceError):
    """Raised when a section changed between read and write (version mismatch)."""
