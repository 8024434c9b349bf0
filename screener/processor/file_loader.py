import mimetypes
from pathlib import Path

from screener.extraction.models import UploadedDocument
from screener.processor.exceptions import FileReadError

DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def guess_mime_type(path: Path) -> str:
    """Guess a MIME type from the file name; empty when unknown."""
    if path.suffix.lower() == ".docx":
        return DOCX_MIME_TYPE
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or ""


class FileLoader:
    """Reads resume files from disk into UploadedDocument records."""

    def load(self, path: Path) -> UploadedDocument:
        """Read a single file.

        Raises:
            FileNotFoundError: if the file does not exist.
            FileReadError: if the file exists but cannot be read.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        try:
            data = path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read {path}: {exc}") from exc
        return UploadedDocument(name=path.name, data=data, mime_type=guess_mime_type(path))

    def load_directory(self, directory: Path) -> list[UploadedDocument]:
        """Read every regular, non-hidden file in *directory*, sorted by name.

        Files of any type are returned so unsupported ones can be reported
        per file instead of silently skipped.
        """
        if not directory.is_dir():
            raise FileNotFoundError(f"Resume directory not found: {directory}")
        paths = sorted(
            p for p in directory.iterdir() if p.is_file() and not p.name.startswith(".")
        )
        return [self.load(path) for path in paths]
