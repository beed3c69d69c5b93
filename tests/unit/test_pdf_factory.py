from unittest.mock import patch

import pytest

from research_portal.extraction.factory import PdfExtractorFactory, build_text_extractor
from research_portal.extraction.pdfplumber_adapter import PdfPlumberAdapter
from research_portal.extraction.pymupdf_adapter import PyMuPdfAdapter
from research_portal.extraction.text_extractor import TextExtractor


def _make_settings(pdf_engine: str):  # type: ignore[no-untyped-def]
    """Create a minimal Settings-like object with only pdf_engine."""
    with patch("research_portal.config.settings.Settings") as mock_cls:
        settings = mock_cls.return_value
        settings.pdf_engine = pdf_engine
        return settings


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pdfplumber"))
        assert isinstance(adapter, PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("pymupdf"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        adapter = PdfExtractorFactory.create(_make_settings("PyMuPDF"))
        assert isinstance(adapter, PyMuPdfAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create(_make_settings("pdf2json"))


class TestBuildTextExtractor:
    def test_builds_extractor_with_configured_engine(self, sample_pdf_bytes: bytes) -> None:
        extractor = build_text_extractor(_make_settings("pymupdf"))
        assert isinstance(extractor, TextExtractor)
        assert extractor.extract(sample_pdf_bytes, "application/pdf", "a.pdf") == "Hello PDF World"
