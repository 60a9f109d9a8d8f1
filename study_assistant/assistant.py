"""
Main study assistant that wires extraction and generation together.
"""

from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from prompts import Flashcards, KeyConcepts, StudyMaterials
from .core import AssistantConfig, BaseComponent
from .extraction import ExtractionDispatcher, blob_from_file
from .generation import (
    FlashcardGenerator, KeyConceptExtractor, StudyMaterialGenerator, require_content
)
from .utils import EnvironmentManager

class StudyAssistant(BaseComponent):
    """Turns uploads and pasted text into study materials."""

    def __init__(self, config: Optional[AssistantConfig] = None, llm: Optional[BaseChatModel] = None):
        if config is None:
            EnvironmentManager.load_environment()
            config = AssistantConfig.from_env()

        super().__init__(config)
        self._llm = llm

        self.dispatcher = ExtractionDispatcher(config)
        self._study_generator: Optional[StudyMaterialGenerator] = None
        self._concept_extractor: Optional[KeyConceptExtractor] = None
        self._flashcard_generator: Optional[FlashcardGenerator] = None

        self._log_operation("Study assistant initialized", f"provider={config.provider}, model={config.model_name}")

    @property
    def llm(self) -> BaseChatModel:
        """Shared chat model, created on first generation request."""
        if self._llm is None:
            from llm_provider import get_provider
            self._llm = get_provider(self.config)
        return self._llm

    def extract_text(self, data_uri: str) -> str:
        """Extract text from an uploaded file encoded as a data URI."""
        return self.dispatcher.extract_data_uri(data_uri)

    def extract_text_from_file(self, path: str) -> str:
        """Extract text from a local .txt, .md, .pdf or .docx file."""
        self._log_operation("Reading file", path)
        return self.dispatcher.extract(blob_from_file(path))

    def generate_study_materials(self, content: str) -> StudyMaterials:
        """Generate a summary, key concepts and flashcards for the content."""
        require_content(content)
        if self._study_generator is None:
            self._study_generator = StudyMaterialGenerator(self.config, self.llm)
        return self._study_generator.generate(content)

    def extract_key_concepts(self, content: str) -> KeyConcepts:
        """Extract only the key concepts of the content."""
        require_content(content)
        if self._concept_extractor is None:
            self._concept_extractor = KeyConceptExtractor(self.config, self.llm)
        return self._concept_extractor.extract(content)

    def generate_flashcards(self, content: str, num_cards: int = 10) -> Flashcards:
        """Generate only flashcards for the content."""
        require_content(content)
        if self._flashcard_generator is None:
            self._flashcard_generator = FlashcardGenerator(self.config, self.llm)
        return self._flashcard_generator.generate(content, num_cards)
