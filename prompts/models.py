from typing import List
from pydantic import BaseModel, ConfigDict, Field

class Flashcard(BaseModel):
    """A single question/answer card."""
    model_config = ConfigDict(frozen=True)

    question: str = Field(description="A question testing one key concept")
    answer: str = Field(description="The concise answer to the question")

class StudyMaterials(BaseModel):
    """Summary, key concepts and flashcards generated from one piece of content."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    summary: str = Field(description="A concise summary of the input content")
    key_concepts: List[str] = Field(alias="keyConcepts", description="The key concepts extracted from the content")
    flashcards: List[Flashcard] = Field(description="Generated flashcards, formatted as questions and answers")

class KeyConcepts(BaseModel):
    """Container for extracted key concepts."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    key_concepts: List[str] = Field(alias="keyConcepts", description="The key concepts extracted from the content")

class Flashcards(BaseModel):
    """Container for generated flashcards."""
    model_config = ConfigDict(frozen=True)

    flashcards: List[Flashcard] = Field(description="Generated flashcards, formatted as questions and answers")
