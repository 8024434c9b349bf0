class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class UnsupportedFormatError(ExtractionError):
    """Raised when no decoder is registered for a document's format."""


class CorruptDocumentError(ExtractionError):
    """Raised when a decoder fails on malformed or truncated bytes."""
