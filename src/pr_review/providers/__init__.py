from pr_review.config import Settings
from .base import LLMProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider

__all__ = ["LLMProvider", "GeminiProvider", "OpenAIProvider", "get_provider"]


def get_provider(settings: Settings) -> LLMProvider | None:
    """Get the AI provider selected in settings, or None when its key is missing."""
    if settings.ai_provider == "openai" and settings.openai_api_key:
        return OpenAIProvider(api_key=settings.openai_api_key, model=settings.openai_model)
    elif settings.ai_provider == "gemini" and settings.gemini_api_key:
        return GeminiProvider(api_key=settings.gemini_api_key)
    return None
