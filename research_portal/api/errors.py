from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from research_portal.analysis.exceptions import AnalysisConfigurationError, AnalysisInputError
from research_portal.config.settings import Settings
from research_portal.documents.exceptions import (
    AnalysisInProgressError,
    DocumentNotFoundError,
    DocumentStateError,
)
from research_portal.extraction.exceptions import (
    EmptyExtractionError,
    ExtractionFailedError,
    UnsupportedFormatError,
)
from research_portal.logging.logger import Log

# Most specific classes first: the first isinstance match wins.
_STATUS_CODES: list[tuple[type[Exception], int]] = [
    (DocumentNotFoundError, 404),
    (UnsupportedFormatError, 400),
    (EmptyExtractionError, 400),
    (AnalysisInputError, 400),
    (ExtractionFailedError, 422),
    (AnalysisInProgressError, 409),
    (DocumentStateError, 409),
    (AnalysisConfigurationError, 503),
]


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Translate domain errors into JSON error responses."""

    async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
        status_code = next(code for cls, code in _STATUS_CODES if isinstance(exc, cls))
        Log.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")
        if isinstance(exc, DocumentNotFoundError):
            return JSONResponse(status_code=status_code, content={"error": "Document not found"})
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        Log.exception(f"{request.method} {request.url.path} failed: {exc!r}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Something went wrong!",
                "message": str(exc) if settings.is_development else None,
            },
        )

    for exc_class, _code in _STATUS_CODES:
        app.add_exception_handler(exc_class, handle_domain_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
