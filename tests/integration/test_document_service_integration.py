"""End-to-end flow through DocumentService with a real database and PDF engine.

The analyzer uses the offline example provider, so no AI credentials are needed.
"""

import pytest

from research_portal.analysis.exceptions import AnalysisConfigurationError
from research_portal.config.settings import Settings
from research_portal.documents.exceptions import DocumentStateError
from research_portal.documents.models import DocumentStatus, UploadedFile
from research_portal.documents.service import DocumentService, build_document_service
from research_portal.extraction.exceptions import EmptyExtractionError


@pytest.fixture
def service(test_settings: Settings, integration_pool: None) -> DocumentService:
    settings = test_settings.model_copy(
        update={"analysis_provider": "example", "analysis_models": ["example"]}
    )
    return build_document_service(settings)


@pytest.mark.integration
class TestUploadAndAnalyze:
    def test_text_upload_is_analyzed_and_stored(
        self, service: DocumentService, integration_cleanup: list[str]
    ) -> None:
        document = service.ingest(
            UploadedFile(
                filename="call.txt",
                content_type="text/plain",
                data=b"CEO:  Revenue grew\n\n12% this quarter.",
            )
        )
        integration_cleanup.append(document.id)
        assert document.text_content == "CEO: Revenue grew 12% this quarter."

        result = service.request_analysis(document.id)

        stored = service.get(document.id)
        assert stored.status is DocumentStatus.COMPLETED
        assert stored.analysis_result == result

    def test_second_analysis_returns_stored_result(
        self, service: DocumentService, integration_cleanup: list[str]
    ) -> None:
        document = service.ingest(
            UploadedFile(filename="call.txt", content_type="text/plain", data=b"Margins held.")
        )
        integration_cleanup.append(document.id)

        first = service.request_analysis(document.id)
        second = service.request_analysis(document.id)

        assert first == second

    def test_pdf_upload_is_extracted(
        self,
        service: DocumentService,
        integration_cleanup: list[str],
        multi_page_pdf_bytes: bytes,
    ) -> None:
        document = service.ingest(
            UploadedFile(
                filename="call.pdf", content_type="application/pdf", data=multi_page_pdf_bytes
            )
        )
        integration_cleanup.append(document.id)

        assert document.file_size == len(multi_page_pdf_bytes)
        assert "Page one content" in (document.text_content or "")
        assert "Page two content" in (document.text_content or "")

    def test_blank_pdf_is_not_persisted(
        self, service: DocumentService, empty_pdf_bytes: bytes
    ) -> None:
        with pytest.raises(EmptyExtractionError):
            service.ingest(
                UploadedFile(
                    filename="scan.pdf", content_type="application/pdf", data=empty_pdf_bytes
                )
            )


@pytest.mark.integration
class TestFailedAnalysis:
    def test_failed_document_cannot_be_reanalyzed(
        self,
        test_settings: Settings,
        integration_pool: None,
        integration_cleanup: list[str],
    ) -> None:
        settings = test_settings.model_copy(
            update={"analysis_provider": "openrouter", "openrouter_api_key": ""}
        )
        service = build_document_service(settings)
        document = service.ingest(
            UploadedFile(filename="call.txt", content_type="text/plain", data=b"Guidance raised.")
        )
        integration_cleanup.append(document.id)

        with pytest.raises(AnalysisConfigurationError):
            service.request_analysis(document.id)
        assert service.get(document.id).status is DocumentStatus.FAILED

        with pytest.raises(DocumentStateError):
            service.request_analysis(document.id)
