"""
Core configuration, error types and the component base class.
"""

import os
from dataclasses import dataclass
from typing import Optional
from logger import logger

class StudyAssistantError(Exception):
    """Base class for every error surfaced by the study assistant."""

class ConfigurationError(StudyAssistantError):
    """Raised when settings are missing or invalid."""

class MalformedEnvelope(StudyAssistantError):
    """Raised when an uploaded data URI cannot be parsed."""

class UnsupportedFormat(StudyAssistantError):
    """Raised for a format tag outside the supported set."""

    def __init__(self, format_tag: str):
        self.format = format_tag
        super().__init__(f"Unsupported file type: {format_tag}")

class ExtractionFailure(StudyAssistantError):
    """Raised when a decoder rejects the content of an upload."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Text extraction failed: {reason}")

class GenerationError(StudyAssistantError):
    """Raised when the model call fails or returns an invalid shape."""

class EmptyContentError(GenerationError):
    """Raised when blank content reaches a generator."""

@dataclass
class AssistantConfig:
    """Configuration class for the study assistant."""
    provider: str = "gemini"
    model_name: str = "gemini-2.5-flash"
    gemini_api_key: Optional[str] = None
    groq_api_key: Optional[str] = None
    temperature: float = 0.3
    max_tokens: int = 2048
    request_timeout: float = 60.0
    max_retries: int = 0

    @classmethod
    def from_env(cls) -> 'AssistantConfig':
        """Create config from environment variables, falling back to llm_config."""
        try:
            import llm_config as defaults  # type: ignore
        except ImportError:
            defaults = None

        def _get(name: str, default=None):
            value = os.getenv(name)
            if value in (None, ""):
                value = getattr(defaults, name, None) if defaults else None
            if value is None or value == "":
                return default
            return value

        def _number(name: str, cast, default):
            raw = _get(name, default)
            try:
                return cast(raw)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e

        return cls(
            provider=str(_get("PROVIDER", "gemini")).lower(),
            model_name=_get("MODEL_NAME", "gemini-2.5-flash"),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY"),
            groq_api_key=os.getenv("GROQ_API_KEY"),
            temperature=_number("TEMPERATURE", float, 0.3),
            max_tokens=_number("MAX_TOKENS", int, 2048),
            request_timeout=_number("REQUEST_TIMEOUT", float, 60.0),
            max_retries=_number("MAX_RETRIES", int, 0),
        )

    @property
    def api_key(self) -> Optional[str]:
        """API key for the selected provider."""
        if self.provider == "groq":
            return self.groq_api_key
        return self.gemini_api_key

class BaseComponent:
    """Base class for assistant components with common functionality."""

    def __init__(self, config: AssistantConfig):
        self.config = config
        self.logger = logger

    def _log_operation(self, operation: str, details: str = ""):
        """Log operation with consistent formatting."""
        self.logger.info(f"{operation}: {details}")

    def _log_error(self, operation: str, error: Exception):
        """Log error with consistent formatting."""
        self.logger.error(f"{operation} failed: {str(error)}")
