from research_portal.analysis.base import BaseAnalyzer
from research_portal.analysis.factory import AnalyzerFactory
from research_portal.analysis.models import AnalysisResult
from research_portal.config.settings import Settings
from research_portal.database.repositories.documents_repository import DocumentsRepository
from research_portal.documents.exceptions import AnalysisInProgressError, DocumentStateError
from research_portal.documents.models import Document, DocumentStatus, NewDocument, UploadedFile
from research_portal.extraction.exceptions import EmptyExtractionError
from research_portal.extraction.factory import build_text_extractor
from research_portal.extraction.text_extractor import TextExtractor
from research_portal.logging.logger import Log


class DocumentService:
    """Drives a document through upload, analysis and persistence.

    Status flow: uploaded -> processing -> completed | failed. Once an analysis
    attempt has started the stored status ends up terminal whatever the
    analyzer does; only a database outage while recording the failure can
    leave a document in processing.
    """

    def __init__(
        self,
        text_extractor: TextExtractor,
        doc_repo: DocumentsRepository,
        analyzer: BaseAnalyzer,
    ) -> None:
        self._text_extractor = text_extractor
        self._doc_repo = doc_repo
        self._analyzer = analyzer

    def ingest(self, upload: UploadedFile) -> Document:
        """Extract text from an upload and persist it as an 'uploaded' document.

        Raises:
            UnsupportedFormatError: if the upload is neither PDF nor plain text.
            ExtractionFailedError: if the file cannot be decoded.
            EmptyExtractionError: if no text was extracted. Nothing is persisted.
        """
        text = self._text_extractor.extract(upload.data, upload.content_type, upload.filename)
        if not text.strip():
            raise EmptyExtractionError(
                "No text could be extracted from the file. "
                "The PDF may be corrupted or image-based."
            )

        document = self._doc_repo.create(
            NewDocument(
                filename=upload.filename,
                original_name=upload.filename,
                file_type=upload.content_type,
                file_size=upload.size,
                text_content=text,
            )
        )
        Log.info(f"Document {document.id} uploaded: '{upload.filename}', {len(text)} chars")
        return document

    def request_analysis(self, document_id: str) -> AnalysisResult:
        """Analyze a document's text and store the result.

        A completed document returns its stored result without a new upstream
        call.

        Raises:
            DocumentNotFoundError: if the document does not exist.
            AnalysisInProgressError: if another request is analyzing it.
            DocumentStateError: if the document failed earlier or has no text.
            AnalysisError: re-raised from the analyzer after marking 'failed'.
        """
        document = self._doc_repo.find_by_id(document_id)

        if document.status is DocumentStatus.COMPLETED and document.analysis_result is not None:
            Log.info(f"Document {document_id} already analyzed, returning stored result")
            return document.analysis_result
        if document.status is DocumentStatus.PROCESSING:
            raise AnalysisInProgressError(f"Document {document_id} is already being analyzed")
        if document.status is DocumentStatus.FAILED:
            raise DocumentStateError(
                f"Analysis of document {document_id} failed earlier; upload it again to retry"
            )
        text = document.text_content or ""
        if not text.strip():
            raise DocumentStateError(f"Document {document_id} has no text content")

        if not self._doc_repo.mark_processing(document_id):
            raise AnalysisInProgressError(f"Document {document_id} is already being analyzed")
        Log.info(f"Document {document_id} marked as processing")

        try:
            result = self._analyzer.analyze(text)
            self._doc_repo.mark_completed(document_id, result)
        except Exception as exc:
            Log.error(f"Analysis of document {document_id} failed: {exc}")
            self._mark_failed(document_id)
            raise

        Log.info(f"Document {document_id} marked as completed")
        return result

    def _mark_failed(self, document_id: str) -> None:
        # Logged, not raised: the caller re-raises the original analysis error.
        try:
            self._doc_repo.mark_failed(document_id)
        except Exception as exc:
            Log.exception(f"Could not mark document {document_id} as failed: {exc}")
            return
        Log.info(f"Document {document_id} marked as failed")

    def get(self, document_id: str) -> Document:
        """Return the stored document.

        Raises:
            DocumentNotFoundError: if the document does not exist.
        """
        return self._doc_repo.find_by_id(document_id)


def build_document_service(settings: Settings) -> DocumentService:
    """Build a DocumentService with all required adapters."""
    return DocumentService(
        text_extractor=build_text_extractor(settings),
        doc_repo=DocumentsRepository(),
        analyzer=AnalyzerFactory.create(settings),
    )
