SPELLING_SYSTEM_PROMPT = (
    "You are a code review assistant that checks for spelling mistakes in variable names, "
    "code identifiers, and string literals. Focus on user-facing text and clear typos. "
    "Respond only with valid JSON."
)


SPELLING_PROMPT = """Please analyze the following code identifiers and string literals for potential spelling mistakes, typos, or naming issues.

Items to check:
{items}

Please respond with a JSON array of issues found, where each issue has:
- "identifier": the misspelled identifier or string
- "suggestion": the suggested correction
- "reason": brief explanation of the issue

Focus on:
- Variable names, function names, and code identifiers
- String literals that appear to be user-facing text or category names
- Clear spelling mistakes and typos

Ignore valid technical terms, abbreviations, or intentional naming conventions.
Respond only with valid JSON, no other text."""


def build_spelling_prompt(identifiers: list[str]) -> str:
    """Build the user prompt listing every candidate on its own line."""
    items = "\n".join(f"- {identifier}" for identifier in identifiers)
    return SPELLING_PROMPT.format(items=items)
