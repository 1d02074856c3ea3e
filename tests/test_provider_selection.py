# tests/test_provider_selection.py
import pytest
from pr_review.config import Settings
from pr_review.providers import get_provider
from pr_review.providers.base import LLMProvider
from pr_review.providers.gemini import GeminiProvider
from pr_review.providers.openai import OpenAIProvider


def test_provider_is_abstract():
    with pytest.raises(TypeError):
        LLMProvider()


def test_get_provider_openai():
    settings = Settings(openai_api_key="sk-test", openai_model="gpt-4o-mini")
    provider = get_provider(settings)

    assert isinstance(provider, OpenAIProvider)
    assert provider.model == "gpt-4o-mini"


def test_get_provider_gemini():
    settings = Settings(ai_provider="gemini", gemini_api_key="g-test")
    assert isinstance(get_provider(settings), GeminiProvider)


def test_get_provider_without_key_disables_spelling(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    settings = Settings(openai_api_key=None)
    assert get_provider(settings) is None
