"""
Study assistant: turns notes and documents into summaries, key concepts and flashcards.

Uploads (plain text, PDF, Word) are normalized to text locally; the study
materials themselves are generated by a hosted chat model.
"""

from . import core, extraction, generation, utils
from .core import (
    AssistantConfig,
    BaseComponent,
    ConfigurationError,
    EmptyContentError,
    ExtractionFailure,
    GenerationError,
    MalformedEnvelope,
    StudyAssistantError,
    UnsupportedFormat,
)
from .extraction import (
    EncodedBlob,
    ExtractionDispatcher,
    SupportedFormat,
    blob_from_file,
    encode_data_uri,
    parse_data_uri,
)
from .generation import FlashcardGenerator, KeyConceptExtractor, StudyMaterialGenerator
from .utils import DocxProcessor, EnvironmentManager, PDFProcessor, PlainTextProcessor
from .assistant import StudyAssistant

__version__ = "1.0.0"
__all__ = [
    # Main classes
    "StudyAssistant",
    "AssistantConfig",

    # Errors
    "StudyAssistantError",
    "ConfigurationError",
    "MalformedEnvelope",
    "UnsupportedFormat",
    "ExtractionFailure",
    "GenerationError",
    "EmptyContentError",

    # Extraction
    "SupportedFormat",
    "EncodedBlob",
    "parse_data_uri",
    "encode_data_uri",
    "blob_from_file",
    "ExtractionDispatcher",

    # Generation
    "BaseComponent",
    "StudyMaterialGenerator",
    "KeyConceptExtractor",
    "FlashcardGenerator",

    # Utility components
    "PlainTextProcessor",
    "PDFProcessor",
    "DocxProcessor",
    "EnvironmentManager",

    # Submodules
    "core",
    "extraction",
    "generation",
    "utils"
]
