from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath


class DocumentFormat(str, Enum):
    """Document formats the extractor can decode."""

    PDF = "pdf"
    DOCX = "docx"
    UNKNOWN = "unknown"


class ErrorKind(str, Enum):
    """Per-file failure tags carried into results."""

    UNSUPPORTED_FORMAT = "unsupported_format"
    CORRUPT = "corrupt"
    EMPTY = "empty"
    PROCESSING_FAILED = "processing_failed"


_PDF_MIME_MARKER = "pdf"
_DOCX_MIME_MARKER = "wordprocessingml"

_EXTENSION_FORMATS: dict[str, DocumentFormat] = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.DOCX,
}


@dataclass(frozen=True)
class UploadedDocument:
    """A file handed to the engine: its name, declared MIME type and bytes."""

    name: str
    data: bytes
    mime_type: str = ""

    @property
    def format(self) -> DocumentFormat:
        """Resolve the format from the MIME type, falling back to the extension.

        Browsers frequently report an empty or generic MIME type for ``.docx``
        uploads, so the extension is consulted whenever the MIME type is not
        conclusive.
        """
        mime = self.mime_type.lower()
        if _PDF_MIME_MARKER in mime:
            return DocumentFormat.PDF
        if _DOCX_MIME_MARKER in mime:
            return DocumentFormat.DOCX
        suffix = PurePath(self.name).suffix.lower()
        return _EXTENSION_FORMATS.get(suffix, DocumentFormat.UNKNOWN)


@dataclass(frozen=True)
class ExtractedText:
    """Plain text decoded from one document.

    ``content`` is always empty when ``error`` is set.
    """

    source_name: str
    content: str = ""
    error: ErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
