from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from research_portal.analysis.models import AnalysisResult


class DocumentStatus(str, Enum):
    """Pipeline stage of a document: uploaded -> processing -> completed | failed."""

    UPLOADED = "uploaded"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class UploadedFile:
    """A file received from a client, held in memory."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class NewDocument:
    """Fields supplied when a document is first persisted."""

    filename: str
    original_name: str
    file_type: str
    file_size: int
    text_content: str


@dataclass
class Document:
    """Domain model for a persisted document (row of the documents table)."""

    id: str
    filename: str
    original_name: str
    file_type: str
    file_size: int
    status: DocumentStatus
    upload_date: datetime | None = None
    text_content: str | None = None
    analysis_result: AnalysisResult | None = None
