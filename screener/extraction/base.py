from abc import ABC, abstractmethod


class BaseTextExtractor(ABC):
    """Contract for all document decoding adapters."""

    @abstractmethod
    def extract(self, data: bytes) -> str:
        """Extract plain text from raw document bytes.

        Args:
            data: Raw file content.

        Returns:
            Extracted text with page and paragraph breaks collapsed to spaces.

        Raises:
            CorruptDocumentError: if the bytes cannot be decoded.
        """
