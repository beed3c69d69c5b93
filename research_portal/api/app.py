"""FastAPI application for document upload and analysis."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from research_portal.api.errors import register_error_handlers
from research_portal.api.routes import router
from research_portal.config.settings import Settings
from research_portal.documents.service import DocumentService


def create_app(settings: Settings, document_service: DocumentService) -> FastAPI:
    """Create the API app around an already-built DocumentService."""
    app = FastAPI(
        title=settings.app_title,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )
    app.state.settings = settings
    app.state.document_service = document_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def handle_http_error(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    register_error_handlers(app, settings)
    app.include_router(router)
    return app
