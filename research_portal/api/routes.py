from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status

from research_portal.api.schemas import (
    AnalysisResponse,
    DocumentResponse,
    HealthResponse,
    UploadResponse,
)
from research_portal.config.settings import Settings
from research_portal.documents.models import UploadedFile
from research_portal.documents.service import DocumentService
from research_portal.extraction.text_extractor import is_supported_upload

router = APIRouter()


def get_document_service(request: Request) -> DocumentService:
    return request.app.state.document_service


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.get("/api/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    return HealthResponse(status="OK", message="Research Portal API is running")


@router.post(
    "/api/documents/upload",
    response_model=UploadResponse,
    status_code=status.HTTP_201_CREATED,
)
def upload_document(
    document: UploadFile | None = File(None),
    service: DocumentService = Depends(get_document_service),
    settings: Settings = Depends(get_settings),
) -> UploadResponse:
    """Accept a PDF or text transcript and store its extracted text."""
    if document is None:
        raise HTTPException(status_code=400, detail="No file uploaded")

    filename = document.filename or ""
    content_type = document.content_type or ""
    if not is_supported_upload(content_type, filename):
        raise HTTPException(status_code=400, detail="Only PDF and text files are allowed")

    data = document.file.read(settings.max_upload_size_bytes + 1)
    if len(data) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_size_bytes} byte limit",
        )

    stored = service.ingest(UploadedFile(filename=filename, content_type=content_type, data=data))
    return UploadResponse(document_id=stored.id, filename=stored.original_name)


@router.post("/api/documents/{document_id}/analyze", response_model=AnalysisResponse)
def analyze_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> AnalysisResponse:
    return AnalysisResponse.from_result(service.request_analysis(document_id))


@router.get("/api/documents/{document_id}", response_model=DocumentResponse)
def get_document(
    document_id: str,
    service: DocumentService = Depends(get_document_service),
) -> DocumentResponse:
    return DocumentResponse.from_document(service.get(document_id))
