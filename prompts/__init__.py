from .models import Flashcard, Flashcards, KeyConcepts, StudyMaterials
from .study_material import get_study_material_prompt
from .key_concepts import get_key_concepts_prompt
from .flashcards import get_flashcards_prompt

__all__ = [
    'get_study_material_prompt',
    'get_key_concepts_prompt',
    'get_flashcards_prompt',
    'Flashcard',
    'Flashcards',
    'KeyConcepts',
    'StudyMaterials'
]
