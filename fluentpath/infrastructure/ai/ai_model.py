from functools import lru_cache

from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import Model, OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from fluentpath.config import get_settings
from fluentpath.exceptions import AIDisabledError


def _get_model() -> Model:
    """
    Get Pydantic AI model depending on environment settings.
    """
    settings = get_settings()

    if settings.AI_PROVIDER == "ollama":
        # These assertions are guaranteed by the settings validator
        assert settings.AI_MODEL_NAME is not None
        assert settings.OPENAI_BASE_URL is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
        )

    if settings.AI_PROVIDER == "openai":
        assert settings.AI_MODEL_NAME is not None
        assert settings.OPENAI_API_KEY is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
        )

    if settings.AI_PROVIDER == "anthropic":
        assert settings.AI_MODEL_NAME is not None
        assert settings.ANTHROPIC_API_KEY is not None
        return AnthropicModel(
            model_name=settings.AI_MODEL_NAME,
            provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
        )

    if settings.AI_PROVIDER == "google":
        assert settings.AI_MODEL_NAME is not None
        assert settings.GEMINI_API_KEY is not None
        return GoogleModel(
            model_name=settings.AI_MODEL_NAME,
            provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
        )
    raise AIDisabledError()


@lru_cache
def get_ai_model() -> Model:
    """
    Get cached AI model. The model is only built on first use, so nothing
    provider specific is touched while AI features are disabled.
    """
    return _get_model()
