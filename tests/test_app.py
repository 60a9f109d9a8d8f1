import json
from unittest.mock import patch

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel

import app
from study_assistant import AssistantConfig, StudyAssistant
from conftest import STUDY_MATERIALS_RESPONSE

def _assistant_with(*responses):
    llm = FakeListChatModel(responses=list(responses))
    return StudyAssistant(AssistantConfig(gemini_api_key="test-key"), llm=llm)

def test_text_input_prints_markdown(capsys):
    assistant = _assistant_with(json.dumps(STUDY_MATERIALS_RESPONSE))
    with patch("app.StudyAssistant", return_value=assistant):
        assert app.main(["--text", "Photosynthesis notes"]) == 0
    out = capsys.readouterr().out
    assert STUDY_MATERIALS_RESPONSE["summary"] in out
    assert "- Chlorophyll" in out

def test_file_input_saves_output(tmp_path, capsys):
    notes = tmp_path / "biology.txt"
    notes.write_text("Plants make food from light.", encoding="utf-8")
    assistant = _assistant_with(json.dumps(STUDY_MATERIALS_RESPONSE))

    with patch("app.StudyAssistant", return_value=assistant):
        assert app.main([str(notes), "--output", str(tmp_path / "out")]) == 0
    assert (tmp_path / "out" / "biology_study_materials.md").exists()

def test_concepts_only(capsys):
    assistant = _assistant_with(json.dumps({"keyConcepts": ["Inertia", "Mass"]}))
    with patch("app.StudyAssistant", return_value=assistant):
        assert app.main(["--text", "Newton", "--concepts-only"]) == 0
    assert capsys.readouterr().out.strip().splitlines()[-1] == "Inertia, Mass"

def test_unsupported_file_exits_with_error(tmp_path, capsys):
    slides = tmp_path / "deck.pptx"
    slides.write_bytes(b"data")
    with patch("app.StudyAssistant", return_value=_assistant_with()):
        assert app.main([str(slides)]) == 1
    assert "Unsupported file type" in capsys.readouterr().err

def test_empty_text_exits_with_error(capsys):
    with patch("app.StudyAssistant", return_value=_assistant_with()):
        assert app.main(["--text", "  "]) == 1
    assert "Input is empty" in capsys.readouterr().err

def test_requires_an_input():
    with pytest.raises(SystemExit):
        app.main([])
