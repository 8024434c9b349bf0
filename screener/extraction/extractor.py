from collections.abc import Mapping

from screener.extraction.base import BaseTextExtractor
from screener.extraction.exceptions import CorruptDocumentError, UnsupportedFormatError
from screener.extraction.models import DocumentFormat, ErrorKind, ExtractedText, UploadedDocument
from screener.logging.logger import Log


class DocumentTextExtractor:
    """Dispatches a document to the adapter registered for its format.

    Extraction failures never propagate: they come back as an
    :class:`ExtractedText` carrying an error tag and empty content.
    """

    def __init__(
        self,
        adapters: Mapping[DocumentFormat, BaseTextExtractor],
        flag_empty: bool = False,
    ) -> None:
        self._adapters = dict(adapters)
        self._flag_empty = flag_empty

    def extract(self, document: UploadedDocument) -> ExtractedText:
        try:
            content = self.decode(document)
        except UnsupportedFormatError as exc:
            Log.warning(str(exc), document=document.name)
            return ExtractedText(document.name, error=ErrorKind.UNSUPPORTED_FORMAT)
        except CorruptDocumentError as exc:
            Log.error(str(exc), document=document.name)
            return ExtractedText(document.name, error=ErrorKind.CORRUPT)

        if self._flag_empty and not content.strip():
            Log.warning("Document contains no text", document=document.name)
            return ExtractedText(document.name, error=ErrorKind.EMPTY)

        Log.info(f"Extracted {len(content)} chars", document=document.name)
        return ExtractedText(document.name, content=content)

    def decode(self, document: UploadedDocument) -> str:
        """Return the raw decoded text.

        Raises:
            UnsupportedFormatError: if no adapter handles the document's format.
            CorruptDocumentError: if the adapter cannot decode the bytes.
        """
        doc_format = document.format
        adapter = self._adapters.get(doc_format)
        if adapter is None:
            raise UnsupportedFormatError(
                f"Unsupported document format for '{document.name}' "
                f"(mime type '{document.mime_type or 'unknown'}')"
            )
        return adapter.extract(document.data)
