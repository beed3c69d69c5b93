from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes) -> list[list[str]]:
        """Split a PDF into pages of text runs.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            One list per page, holding that page's text runs in document order.
            A page without text items yields an empty list.

        Raises:
            PdfExtractionError: if the PDF structure cannot be parsed.
        """
