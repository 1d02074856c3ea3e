# src/pr_review/review/spelling.py
import json
import re
import logging

from pr_review.models.review import SpellingSuggestion
from pr_review.providers.base import LLMProvider
from .prompts import SPELLING_SYSTEM_PROMPT, build_spelling_prompt


logger = logging.getLogger(__name__)

SPELLING_TEMPERATURE = 0.1
SPELLING_MAX_TOKENS = 500


def parse_spelling_response(text: str, filename: str = "") -> list[SpellingSuggestion]:
    """Parse the model reply into suggestions, dropping anything malformed.

    The reply should be a JSON array of objects with ``identifier`` and
    ``suggestion`` (``reason`` optional). Invalid JSON or a non-array reply
    yields an empty list.
    """
    # Extract JSON from response (may be wrapped in ```json or just ```)
    json_match = re.search(r'```(?:json)?\s*(.*?)\s*```', text, re.DOTALL)
    if json_match:
        text = json_match.group(1)

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Could not parse AI response for {filename}: {e}")
        return []

    if not isinstance(data, list):
        logger.warning(f"AI response for {filename} is not a JSON array")
        return []

    suggestions = []
    for item in data:
        if not isinstance(item, dict):
            continue
        identifier = item.get("identifier")
        suggestion = item.get("suggestion")
        if not identifier or not suggestion:
            continue
        reason = item.get("reason")
        suggestions.append(SpellingSuggestion(
            identifier=str(identifier),
            suggestion=str(suggestion),
            reason=str(reason) if reason else None,
        ))
    return suggestions


class SpellingAdvisor:
    """Ask a text-completion model which identifiers look misspelled.

    Best effort: provider failures and unusable replies are logged and
    reported as "no issues".
    """

    def __init__(self, provider: LLMProvider):
        self.provider = provider

    async def check(self, identifiers: list[str], filename: str) -> list[SpellingSuggestion]:
        if not identifiers:
            return []

        prompt = build_spelling_prompt(identifiers)
        try:
            text = await self.provider.complete(
                SPELLING_SYSTEM_PROMPT,
                prompt,
                temperature=SPELLING_TEMPERATURE,
                max_tokens=SPELLING_MAX_TOKENS,
            )
        except Exception as e:
            logger.warning(f"AI spelling check failed for {filename}: {e}")
            return []

        if not text or not text.strip():
            return []
        return parse_spelling_response(text, filename)
