class ExtractionError(Exception):
    """Base exception for text extraction errors."""


class UnsupportedFormatError(ExtractionError):
    """Raised when the declared media type is neither PDF nor plain text."""


class ExtractionFailedError(ExtractionError):
    """Raised when the file buffer cannot be decoded at all."""


class PdfExtractionError(ExtractionFailedError):
    """Raised when a PDF engine cannot parse the document structure."""


class EmptyExtractionError(ExtractionError):
    """Raised when a file yields no text, e.g. a scanned, image-only PDF."""
