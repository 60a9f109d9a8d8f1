"""
Structured generation of study materials through a hosted chat model.

Each generator issues a single request per call: a fixed prompt template is
piped into the chat model and the reply is parsed into a pydantic model.
Any failure along the way surfaces as ``GenerationError``.
"""

import time
from typing import Any, Optional, Type

from langchain_core.exceptions import OutputParserException
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import PydanticOutputParser
from pydantic import BaseModel, ValidationError

from prompts import (
    Flashcards, KeyConcepts, StudyMaterials,
    get_flashcards_prompt, get_key_concepts_prompt, get_study_material_prompt,
)
from ..core import AssistantConfig, BaseComponent, EmptyContentError, GenerationError

def _preview(text: str, limit: int = 300) -> str:
    return text if len(text) <= limit else text[:limit] + "..."

def require_content(content: str) -> str:
    """Reject blank input before any request is made."""
    if not isinstance(content, str) or not content.strip():
        raise EmptyContentError("Input is empty. Please paste text or upload a file.")
    return content

def _message_text(message: Any) -> str:
    """Flatten a chat model reply into plain text."""
    content = getattr(message, "content", message)
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    return content if isinstance(content, str) else str(content)

class StructuredGenerator(BaseComponent):
    """Base class for prompt -> chat model -> pydantic model generators."""

    output_model: Type[BaseModel] = BaseModel
    operation: str = "Generation"

    def __init__(self, config: Optional[AssistantConfig] = None, llm: Optional[BaseChatModel] = None):
        super().__init__(config or AssistantConfig())
        self._llm = llm
        self.prompt = self._build_prompt()
        self.parser = PydanticOutputParser(pydantic_object=self.output_model)

    def _build_prompt(self):
        raise NotImplementedError

    @property
    def llm(self) -> BaseChatModel:
        """The chat model, built from the configuration on first use."""
        if self._llm is None:
            from llm_provider import get_provider
            self._llm = get_provider(self.config)
        return self._llm

    def _invoke(self, **variables) -> BaseModel:
        """Run one request and return the validated output model."""
        chain = self.prompt | self.llm
        self.logger.info("%s started; input preview: %s", self.operation, _preview(str(variables.get("content", ""))))

        t0 = time.perf_counter()
        try:
            reply = chain.invoke(variables)
        except Exception as e:
            self._log_error(self.operation, e)
            raise GenerationError(f"{self.operation} request failed: {e}") from e
        duration = time.perf_counter() - t0

        text = _message_text(reply)
        self.logger.debug("%s reply preview: %s", self.operation, _preview(text))

        try:
            result = self.parser.parse(text)
        except (OutputParserException, ValidationError, ValueError) as e:
            self._log_error(f"{self.operation} response validation", e)
            raise GenerationError(f"{self.operation} returned an invalid response: {e}") from e

        self.logger.info("%s finished in %.2fs", self.operation, duration)
        return result

class StudyMaterialGenerator(StructuredGenerator):
    """Generates a summary, key concepts and flashcards in one request."""

    output_model = StudyMaterials
    operation = "Study material generation"

    def _build_prompt(self):
        return get_study_material_prompt()

    def generate(self, content: str) -> StudyMaterials:
        """
        Generate study materials for the given text.

        Args:
            content: Normalized, non-empty text.

        Returns:
            The validated StudyMaterials returned by the model.

        Raises:
            EmptyContentError: if content is blank; no request is issued.
            GenerationError: if the request fails or the reply has the wrong shape.
        """
        content = require_content(content)
        materials = self._invoke(content=content)
        self._log_operation(
            "Study materials generated",
            f"{len(materials.key_concepts)} concepts, {len(materials.flashcards)} flashcards",
        )
        return materials

class KeyConceptExtractor(StructuredGenerator):
    """Extracts the central concepts of a text."""

    output_model = KeyConcepts
    operation = "Key concept extraction"

    def _build_prompt(self):
        return get_key_concepts_prompt()

    def extract(self, content: str) -> KeyConcepts:
        content = require_content(content)
        concepts = self._invoke(content=content)
        self._log_operation("Key concepts extracted", f"{len(concepts.key_concepts)} found")
        return concepts

class FlashcardGenerator(StructuredGenerator):
    """Turns a text into question/answer flashcards."""

    output_model = Flashcards
    operation = "Flashcard generation"

    def _build_prompt(self):
        return get_flashcards_prompt()

    def generate(self, content: str, num_cards: int = 10) -> Flashcards:
        content = require_content(content)
        if num_cards < 1:
            raise GenerationError(f"num_cards must be positive, got {num_cards}")
        cards = self._invoke(content=content, num_cards=num_cards)
        self._log_operation("Flashcards generated", f"{len(cards.flashcards)} cards")
        return cards

__all__ = [
    "require_content",
    "StructuredGenerator",
    "StudyMaterialGenerator",
    "KeyConceptExtractor",
    "FlashcardGenerator",
]
