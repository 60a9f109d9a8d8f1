"""
Per-format text extractors and environment helpers.
"""

import io
from typing import Optional

from docx import Document
from PyPDF2 import PdfReader
from logger import logger, setup_logger

from ..core import ExtractionFailure

class PlainTextProcessor:
    """Decodes plain-text uploads."""

    @staticmethod
    def extract_text(payload: bytes) -> str:
        """
        Decode a UTF-8 payload.

        Args:
            payload: Raw file bytes.

        Returns:
            The decoded text, without a leading byte-order mark.
        """
        try:
            return payload.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ExtractionFailure(f"content is not valid UTF-8 text ({e.reason} at byte {e.start})") from e

class PDFProcessor:
    """Handles PDF text extraction."""

    @staticmethod
    def extract_text(payload: bytes) -> str:
        """
        Extract text from an in-memory PDF.

        Args:
            payload: Raw PDF bytes.

        Returns:
            Page texts joined by newlines.
        """
        try:
            reader = PdfReader(io.BytesIO(payload))
        except Exception as e:
            raise ExtractionFailure(f"unreadable PDF: {e}") from e

        if reader.is_encrypted:
            # Owner-password-only files open with an empty user password
            try:
                unlocked = reader.decrypt("")
            except Exception as e:
                raise ExtractionFailure(f"password-protected PDF: {e}") from e
            if not unlocked:
                raise ExtractionFailure("password-protected PDF")

        pages = []
        try:
            for page in reader.pages:
                pages.append(page.extract_text() or "")
        except Exception as e:
            raise ExtractionFailure(f"corrupted PDF content: {e}") from e

        logger.debug(f"Extracted {len(pages)} PDF pages")
        return "\n".join(pages)

class DocxProcessor:
    """Handles Word (.docx) text extraction."""

    @staticmethod
    def extract_text(payload: bytes) -> str:
        """Extract paragraph and table text from an in-memory .docx file."""
        try:
            document = Document(io.BytesIO(payload))
        except Exception as e:
            raise ExtractionFailure(f"unreadable Word document: {e}") from e

        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text for cell in row.cells if cell.text]
                if cells:
                    lines.append("\t".join(cells))
        return "\n".join(lines)

class EnvironmentManager:
    """Manages environment variables and configuration loading."""

    @staticmethod
    def load_environment(dotenv_path: Optional[str] = None) -> bool:
        """Load environment variables from a .env file. Returns True if one was found."""
        from dotenv import load_dotenv
        loaded = load_dotenv(dotenv_path)
        if loaded:
            # LOG_LEVEL and LOG_FILE may come from the .env file
            setup_logger()
            logger.info("Environment variables loaded from .env")
        else:
            logger.debug("No .env file found; using process environment")
        return loaded
