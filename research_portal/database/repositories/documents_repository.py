import uuid
from dataclasses import asdict
from typing import Any

from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from research_portal.analysis.models import AnalysisResult
from research_portal.analysis.validator import validate_and_build
from research_portal.database.connection import get_connection
from research_portal.documents.exceptions import DocumentNotFoundError
from research_portal.documents.models import Document, DocumentStatus, NewDocument

_COLUMNS = """
    id, filename, original_name, file_type, file_size, upload_date,
    text_content, analysis_result, status
"""


class DocumentsRepository:
    """Database operations for the documents table."""

    def create(self, new_document: NewDocument) -> Document:
        """Insert a document with status 'uploaded' and return it."""
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"""
                    INSERT INTO documents
                        (filename, original_name, file_type, file_size, text_content, status)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    RETURNING {_COLUMNS}
                    """,
                    (
                        new_document.filename,
                        new_document.original_name,
                        new_document.file_type,
                        new_document.file_size,
                        new_document.text_content,
                        DocumentStatus.UPLOADED.value,
                    ),
                )
                row = cur.fetchone()
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO documents returned no row")
        return self._to_document(row)

    def find_by_id(self, document_id: str) -> Document:
        """Find a document by ID.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        key = self._parse_id(document_id)
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM documents WHERE id = %s",
                    (key,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return self._to_document(row)

    def mark_processing(self, document_id: str) -> bool:
        """Move an 'uploaded' document to 'processing'.

        The status check and update are one statement, so only one of several
        concurrent requests can claim a document.

        Returns:
            True if this call claimed the document, False otherwise.
        """
        key = self._parse_id(document_id)
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE documents
                    SET status = %s
                    WHERE id = %s AND status = %s
                    """,
                    (
                        DocumentStatus.PROCESSING.value,
                        key,
                        DocumentStatus.UPLOADED.value,
                    ),
                )
                claimed = cur.rowcount == 1
            conn.commit()
        return claimed

    def mark_completed(self, document_id: str, analysis_result: AnalysisResult) -> None:
        """Store the analysis result and set status 'completed'.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        key = self._parse_id(document_id)
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE documents
                    SET analysis_result = %s, status = %s
                    WHERE id = %s
                    """,
                    (
                        Jsonb(asdict(analysis_result)),
                        DocumentStatus.COMPLETED.value,
                        key,
                    ),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()

    def mark_failed(self, document_id: str) -> None:
        """Set status 'failed' and clear any analysis result.

        Raises:
            DocumentNotFoundError: if no document with this ID exists.
        """
        key = self._parse_id(document_id)
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    UPDATE documents
                    SET analysis_result = NULL, status = %s
                    WHERE id = %s
                    """,
                    (DocumentStatus.FAILED.value, key),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()

    @staticmethod
    def _parse_id(document_id: str) -> uuid.UUID:
        try:
            return uuid.UUID(str(document_id))
        except ValueError as exc:
            raise DocumentNotFoundError(f"Document {document_id} not found") from exc

    @staticmethod
    def _to_document(row: dict[str, Any]) -> Document:
        raw_result = row["analysis_result"]
        return Document(
            id=str(row["id"]),
            filename=row["filename"],
            original_name=row["original_name"],
            file_type=row["file_type"],
            file_size=row["file_size"],
            upload_date=row["upload_date"],
            text_content=row["text_content"],
            analysis_result=(
                validate_and_build(raw_result, allow_error_sentiment=True)
                if raw_result is not None
                else None
            ),
            status=DocumentStatus(row["status"]),
        )
