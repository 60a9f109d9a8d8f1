"""
Factory for the hosted chat models used to generate study materials.
"""
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_groq import ChatGroq

from logger import logger
from study_assistant.core import AssistantConfig, ConfigurationError

SUPPORTED_PROVIDERS = ("gemini", "groq")

def get_provider(config: Optional[AssistantConfig] = None) -> BaseChatModel:
    """Build the chat model selected by ``config.provider``."""
    if config is None:
        config = AssistantConfig.from_env()

    provider_name = (config.provider or "").lower()
    if provider_name not in SUPPORTED_PROVIDERS:
        raise ConfigurationError(
            f"Unknown provider: {config.provider}. Supported: {', '.join(SUPPORTED_PROVIDERS)}"
        )

    if not config.api_key:
        env_var = "GROQ_API_KEY" if provider_name == "groq" else "GEMINI_API_KEY"
        raise ConfigurationError(f"{env_var} environment variable not set.")

    logger.info("LLM[%s] using model %s (timeout=%ss, max_retries=%d)",
                provider_name, config.model_name, config.request_timeout, config.max_retries)

    if provider_name == "groq":
        return ChatGroq(
            model=config.model_name,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
            api_key=config.api_key,
        )

    return ChatGoogleGenerativeAI(
        model=config.model_name,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
        timeout=config.request_timeout,
        max_retries=config.max_retries,
        api_key=config.api_key,
    )
