import json
import pytest
from unittest.mock import AsyncMock, MagicMock
from pr_review.providers.gemini import GeminiProvider
from pr_review.providers.openai import OpenAIProvider


def _mock_completion(text):
    """Create a mock ChatCompletion response."""
    choice = MagicMock()
    choice.message.content = text
    completion = MagicMock()
    completion.choices = [choice]
    return completion


@pytest.mark.integration
@pytest.mark.asyncio
async def test_gemini_provider_builds_request(httpx_mock):
    httpx_mock.add_response(
        url="https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent?key=test-key",
        json={
            "candidates": [{
                "content": {
                    "parts": [{
                        "text": '[{"identifier": "Shp", "suggestion": "Shop"}]'
                    }]
                }
            }]
        }
    )

    provider = GeminiProvider(api_key="test-key")
    text = await provider.complete("system", "check: Shp", temperature=0.1, max_tokens=500)

    assert text == '[{"identifier": "Shp", "suggestion": "Shop"}]'
    body = json.loads(httpx_mock.get_request().content)
    assert body["systemInstruction"]["parts"][0]["text"] == "system"
    assert body["contents"][0]["parts"][0]["text"] == "check: Shp"
    assert body["generationConfig"] == {"temperature": 0.1, "maxOutputTokens": 500}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openai_provider_sends_system_and_user_messages():
    provider = OpenAIProvider(api_key="test-key", model="gpt-4o")
    provider.client = AsyncMock()
    provider.client.chat.completions.create = AsyncMock(return_value=_mock_completion("[]"))

    text = await provider.complete("system prompt", "user prompt", temperature=0.1, max_tokens=500)

    assert text == "[]"
    call_kwargs = provider.client.chat.completions.create.call_args.kwargs
    assert call_kwargs["model"] == "gpt-4o"
    assert call_kwargs["temperature"] == 0.1
    assert call_kwargs["max_tokens"] == 500
    assert call_kwargs["messages"] == [
        {"role": "system", "content": "system prompt"},
        {"role": "user", "content": "user prompt"},
    ]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_openai_provider_empty_content():
    provider = OpenAIProvider(api_key="test-key")
    provider.client = AsyncMock()
    provider.client.chat.completions.create = AsyncMock(return_value=_mock_completion(None))

    assert await provider.complete("s", "u") == ""
