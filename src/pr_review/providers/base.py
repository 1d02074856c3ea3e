from abc import ABC, abstractmethod


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, system: str, prompt: str, temperature: float = 0.1, max_tokens: int = 500) -> str:
        """Send a system + user prompt to the model and return the raw reply text."""
        pass
