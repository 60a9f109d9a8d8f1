"""
Upload normalization: data URI parsing, format detection and extractor dispatch.
"""

import base64
import binascii
import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from ..core import (
    AssistantConfig, BaseComponent, ExtractionFailure, MalformedEnvelope, UnsupportedFormat
)
from ..utils import DocxProcessor, PDFProcessor, PlainTextProcessor

class SupportedFormat(str, Enum):
    """MIME types accepted for upload."""
    PLAIN_TEXT = "text/plain"
    PDF = "application/pdf"
    DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

    @classmethod
    def from_tag(cls, format_tag: str) -> 'SupportedFormat':
        try:
            return cls(format_tag.strip().lower())
        except ValueError:
            raise UnsupportedFormat(format_tag) from None

EXTENSION_FORMATS = {
    ".txt": SupportedFormat.PLAIN_TEXT,
    ".md": SupportedFormat.PLAIN_TEXT,
    ".pdf": SupportedFormat.PDF,
    ".docx": SupportedFormat.DOCX,
}

@dataclass(frozen=True)
class EncodedBlob:
    """A format tag and the raw bytes it describes."""
    format: str
    payload: bytes

def parse_data_uri(data_uri: str) -> EncodedBlob:
    """
    Split a ``data:<mimetype>;base64,<body>`` URI into its format tag and bytes.

    Raises:
        MalformedEnvelope: if the header is missing or unparseable, or the
            body is not valid base64.
    """
    if not isinstance(data_uri, str):
        raise MalformedEnvelope("Invalid data URI: expected a string")

    header, sep, body = data_uri.partition(",")
    if not sep or not header:
        raise MalformedEnvelope("Invalid data URI: missing header")

    if header[:5].lower() != "data:":
        raise MalformedEnvelope("Invalid data URI: header must start with 'data:'")

    mime_type, *params = header[5:].split(";")
    mime_type = mime_type.strip().lower()
    if not mime_type:
        raise MalformedEnvelope("Invalid data URI: missing MIME type")
    if "base64" not in (p.strip().lower() for p in params):
        raise MalformedEnvelope("Invalid data URI: body must be base64 encoded")

    try:
        payload = base64.b64decode("".join(body.split()), validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedEnvelope(f"Invalid data URI: undecodable body ({e})") from e

    return EncodedBlob(format=mime_type, payload=payload)

def encode_data_uri(format_tag: str, payload: bytes) -> str:
    """Build a base64 data URI for the given format and bytes."""
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{format_tag};base64,{encoded}"

def blob_from_file(path: str) -> EncodedBlob:
    """Read a local file into a blob, taking its format from the extension."""
    extension = os.path.splitext(path)[1].lower()
    file_format = EXTENSION_FORMATS.get(extension)
    if file_format is None:
        raise UnsupportedFormat(extension or os.path.basename(path))

    with open(path, "rb") as f:
        return EncodedBlob(format=file_format.value, payload=f.read())

class ExtractionDispatcher(BaseComponent):
    """Routes a blob to the extractor matching its format."""

    def __init__(self, config: Optional[AssistantConfig] = None):
        super().__init__(config or AssistantConfig())
        self._extractors: Dict[SupportedFormat, Callable[[bytes], str]] = {
            SupportedFormat.PLAIN_TEXT: PlainTextProcessor.extract_text,
            SupportedFormat.PDF: PDFProcessor.extract_text,
            SupportedFormat.DOCX: DocxProcessor.extract_text,
        }

    def extract(self, blob: EncodedBlob) -> str:
        """
        Extract plain text from a blob.

        Raises:
            UnsupportedFormat: if the blob's format is not supported.
            ExtractionFailure: if the decoder rejects the content.
        """
        try:
            file_format = SupportedFormat.from_tag(blob.format)
        except UnsupportedFormat as e:
            self._log_error("Format detection", e)
            raise

        self._log_operation("Extracting text", f"format={file_format.value}, bytes={len(blob.payload)}")
        try:
            text = self._extractors[file_format](blob.payload)
        except ExtractionFailure as e:
            self._log_error("Text extraction", e)
            raise

        if not text.strip():
            self.logger.warning(f"No text found in {file_format.value} upload; it may be scanned or empty")
        self._log_operation("Text extracted", f"characters={len(text)}")
        return text

    def extract_data_uri(self, data_uri: str) -> str:
        """Parse a data URI and extract its text."""
        try:
            blob = parse_data_uri(data_uri)
        except MalformedEnvelope as e:
            self._log_error("Data URI parsing", e)
            raise
        return self.extract(blob)

__all__ = [
    "SupportedFormat",
    "EXTENSION_FORMATS",
    "EncodedBlob",
    "parse_data_uri",
    "encode_data_uri",
    "blob_from_file",
    "ExtractionDispatcher",
]
