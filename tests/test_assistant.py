import json
from unittest.mock import patch

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

from study_assistant import (
    AssistantConfig,
    EmptyContentError,
    ExtractionFailure,
    StudyAssistant,
    SupportedFormat,
    UnsupportedFormat,
    encode_data_uri,
)
from conftest import DOCX_PARAGRAPHS, PDF_TEXT, STUDY_MATERIALS_RESPONSE

class TestStudyAssistant:
    def test_extracts_without_credentials(self, pdf_bytes):
        assistant = StudyAssistant(AssistantConfig())
        text = assistant.extract_text(encode_data_uri(SupportedFormat.PDF.value, pdf_bytes))
        assert text.strip() == PDF_TEXT

    def test_extract_text_from_file(self, tmp_path, docx_bytes):
        path = tmp_path / "chapter.docx"
        path.write_bytes(docx_bytes)
        text = StudyAssistant(AssistantConfig()).extract_text_from_file(str(path))
        assert text.strip() == "\n".join(DOCX_PARAGRAPHS)

    def test_corrupted_upload(self):
        assistant = StudyAssistant(AssistantConfig())
        with pytest.raises(ExtractionFailure):
            assistant.extract_text(encode_data_uri(SupportedFormat.PDF.value, b"%PDF-1.4 broken"))

    def test_unsupported_upload(self):
        assistant = StudyAssistant(AssistantConfig())
        with pytest.raises(UnsupportedFormat):
            assistant.extract_text(encode_data_uri("image/jpeg", b"\xff\xd8\xff"))

    def test_empty_content_rejected_before_provider_is_built(self):
        assistant = StudyAssistant(AssistantConfig())
        with patch("llm_provider.get_provider") as get_provider:
            with pytest.raises(EmptyContentError):
                assistant.generate_study_materials("   ")
        get_provider.assert_not_called()

    def test_generate_study_materials(self, config, study_llm):
        assistant = StudyAssistant(config, llm=study_llm)
        materials = assistant.generate_study_materials("Photosynthesis notes")
        assert materials.model_dump(by_alias=True) == STUDY_MATERIALS_RESPONSE

    def test_shares_one_model_between_flows(self, config):
        llm = FakeListChatModel(responses=[
            json.dumps({"keyConcepts": ["Inertia"]}),
            json.dumps({"flashcards": [{"question": "Q?", "answer": "A."}]}),
        ])
        assistant = StudyAssistant(config, llm=llm)

        assert assistant.extract_key_concepts("Newton").key_concepts == ["Inertia"]
        assert assistant.generate_flashcards("Newton", num_cards=1).flashcards[0].answer == "A."

    def test_model_built_lazily_from_config(self, config, study_llm):
        with patch("llm_provider.get_provider", return_value=study_llm) as get_provider:
            assistant = StudyAssistant(config)
            get_provider.assert_not_called()
            assistant.generate_study_materials("notes")
        get_provider.assert_called_once_with(config)
