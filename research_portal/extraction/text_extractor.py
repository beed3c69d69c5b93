"""Turns uploaded PDF and plain-text transcripts into one normalized string.

PDF output is flattened: runs are joined with single spaces, pages with a
newline, and the final whitespace collapse removes both. The result carries no
page or line structure.
"""

import re
from urllib.parse import unquote

from research_portal.extraction.base import BasePdfExtractor
from research_portal.extraction.exceptions import ExtractionFailedError, UnsupportedFormatError
from research_portal.logging.logger import Log

PDF_MIME_TYPE = "application/pdf"
TEXT_MIME_TYPE = "text/plain"

_PAGE_BREAK = "\n"
_WHITESPACE_RE = re.compile(r"\s+")
_MALFORMED_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_plain_text(mime_type: str, filename: str) -> bool:
    return mime_type == TEXT_MIME_TYPE or filename.lower().endswith(".txt")


def is_supported_upload(mime_type: str, filename: str) -> bool:
    """Return True if the upload is a PDF or a plain-text transcript."""
    return mime_type == PDF_MIME_TYPE or is_plain_text(mime_type, filename)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def decode_text_run(run: str) -> str:
    """Decode a percent-encoded text run, falling back to the raw run.

    A stray '%' or an escape sequence that is not valid UTF-8 leaves the run
    untouched.
    """
    if "%" not in run or _MALFORMED_ESCAPE_RE.search(run):
        return run
    try:
        return unquote(run, errors="strict")
    except UnicodeDecodeError:
        return run


class TextExtractor:
    """Extracts normalized plain text from PDF and text uploads."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._pdf_extractor = pdf_extractor

    def extract(self, buffer: bytes, mime_type: str, filename: str) -> str:
        """Extract normalized text from a raw upload buffer.

        Args:
            buffer: File content as uploaded.
            mime_type: Declared media type of the upload.
            filename: Original filename, used to recognize '.txt' uploads.

        Returns:
            Whitespace-normalized text. May be empty, e.g. for image-only PDFs.

        Raises:
            UnsupportedFormatError: if the upload is neither PDF nor plain text.
            ExtractionFailedError: if the buffer cannot be decoded.
        """
        Log.info(f"Extracting text from '{filename}' ({mime_type}, {len(buffer)} bytes)")

        if mime_type == PDF_MIME_TYPE:
            raw_text = self._extract_pdf(buffer)
        elif is_plain_text(mime_type, filename):
            raw_text = self._extract_plain_text(buffer)
        else:
            raise UnsupportedFormatError(
                f"Unsupported file type: {mime_type}. Only PDF and TXT are allowed."
            )

        text = normalize_whitespace(raw_text)
        if not text:
            Log.warning(f"No text extracted from '{filename}'")
        Log.info(f"Extracted {len(text)} chars from '{filename}'")
        return text

    def _extract_pdf(self, buffer: bytes) -> str:
        pages = self._pdf_extractor.extract_pages(buffer)
        Log.debug(f"PDF has {len(pages)} pages")

        parts: list[str] = []
        for page_number, runs in enumerate(pages, start=1):
            if not runs:
                Log.warning(f"Page {page_number} has no text items")
            for run in runs:
                parts.append(decode_text_run(run))
                parts.append(" ")
            parts.append(_PAGE_BREAK)
        return "".join(parts)

    @staticmethod
    def _extract_plain_text(buffer: bytes) -> str:
        try:
            return buffer.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionFailedError(f"Text parsing failed: {exc}") from exc
