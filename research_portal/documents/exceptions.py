class DocumentError(Exception):
    """Base exception for document lifecycle errors."""


class DocumentNotFoundError(DocumentError):
    """Raised when a document cannot be found in the database."""


class AnalysisInProgressError(DocumentError):
    """Raised when another request is already analyzing the document."""


class DocumentStateError(DocumentError):
    """Raised when a document's status does not allow the requested transition."""
