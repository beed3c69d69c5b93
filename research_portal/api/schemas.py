"""Response bodies of the documents API."""

from dataclasses import asdict
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from research_portal.analysis.models import AnalysisResult
from research_portal.documents.models import Document, DocumentStatus


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UploadResponse(CamelModel):
    document_id: str
    filename: str


class AnalysisResponse(BaseModel):
    result: dict[str, Any]

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls(result=asdict(result))


class DocumentResponse(CamelModel):
    id: str
    filename: str
    original_name: str
    file_type: str
    file_size: int
    upload_date: datetime | None
    text_content: str | None
    analysis_result: dict[str, Any] | None
    status: DocumentStatus

    @classmethod
    def from_document(cls, document: Document) -> "DocumentResponse":
        return cls(
            id=document.id,
            filename=document.filename,
            original_name=document.original_name,
            file_type=document.file_type,
            file_size=document.file_size,
            upload_date=document.upload_date,
            text_content=document.text_content,
            analysis_result=(
                asdict(document.analysis_result) if document.analysis_result is not None else None
            ),
            status=document.status,
        )


class HealthResponse(BaseModel):
    status: str
    message: str
