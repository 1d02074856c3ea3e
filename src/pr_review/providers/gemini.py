import httpx
from .base import LLMProvider


class GeminiProvider(LLMProvider):
    API_URL = "https://generativelanguage.googleapis.com/v1beta/models/gemini-2.5-flash:generateContent"

    def __init__(self, api_key: str):
        self.api_key = api_key

    async def complete(self, system: str, prompt: str, temperature: float = 0.1, max_tokens: int = 500) -> str:
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.API_URL}?key={self.api_key}",
                json={
                    "systemInstruction": {"parts": [{"text": system}]},
                    "contents": [{
                        "parts": [{"text": prompt}]
                    }],
                    "generationConfig": {
                        "temperature": temperature,
                        "maxOutputTokens": max_tokens,
                    },
                },
                timeout=60.0
            )
            response.raise_for_status()

        data = response.json()
        return data["candidates"][0]["content"]["parts"][0]["text"]
