import io
import json

import pytest
from docx import Document
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from study_assistant import AssistantConfig

PDF_TEXT = "Photosynthesis converts light energy into chemical energy"
DOCX_PARAGRAPHS = ["Mitochondria", "The mitochondria is the powerhouse of the cell."]
PLAIN_TEXT = "Newton's first law: an object stays at rest unless acted on by a force."

STUDY_MATERIALS_RESPONSE = {
    "summary": "Plants turn sunlight into sugar through photosynthesis.",
    "keyConcepts": ["Photosynthesis", "Chlorophyll", "Glucose"],
    "flashcards": [
        {"question": "What does photosynthesis produce?", "answer": "Glucose and oxygen."},
        {"question": "Which pigment absorbs light?", "answer": "Chlorophyll."},
    ],
}

def build_pdf(text: str) -> bytes:
    """Assemble a one-page PDF showing ``text`` with a correct xref table."""
    content = f"BT /F1 24 Tf 72 720 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, 1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (len(objects) + 1, xref_offset)
    return bytes(out)

def build_docx(paragraphs) -> bytes:
    document = Document()
    for paragraph in paragraphs:
        document.add_paragraph(paragraph)
    buffer = io.BytesIO()
    document.save(buffer)
    return buffer.getvalue()

class ExplodingChatModel(FakeListChatModel):
    """Chat model whose every request fails like a timed-out service."""

    def _call(self, *args, **kwargs):
        raise TimeoutError("deadline exceeded")

@pytest.fixture
def config():
    return AssistantConfig(provider="gemini", model_name="test-model", gemini_api_key="test-key")

@pytest.fixture
def pdf_bytes():
    return build_pdf(PDF_TEXT)

@pytest.fixture
def docx_bytes():
    return build_docx(DOCX_PARAGRAPHS)

@pytest.fixture
def study_llm():
    return FakeListChatModel(responses=[json.dumps(STUDY_MATERIALS_RESPONSE)])

@pytest.fixture
def exploding_llm():
    return ExplodingChatModel(responses=["unused"])
