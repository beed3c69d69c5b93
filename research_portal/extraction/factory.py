from research_portal.config.settings import Settings
from research_portal.extraction.base import BasePdfExtractor
from research_portal.extraction.pdfplumber_adapter import PdfPlumberAdapter
from research_portal.extraction.pymupdf_adapter import PyMuPdfAdapter
from research_portal.extraction.text_extractor import TextExtractor


class PdfExtractorFactory:
    """Creates the PDF engine adapter selected by settings."""

    ADAPTERS: dict[str, type[BasePdfExtractor]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


def build_text_extractor(settings: Settings) -> TextExtractor:
    """Build a TextExtractor backed by the configured PDF engine."""
    return TextExtractor(pdf_extractor=PdfExtractorFactory.create(settings))
