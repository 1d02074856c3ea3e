import re


NAME = r"[a-zA-Z_$][a-zA-Z0-9_$]*"

# Applied in this order; earlier patterns decide the display order.
DECLARATION_PATTERNS = [
    re.compile(rf"(?:const|let|var)\s+({NAME})"),
    re.compile(rf"function\s+({NAME})"),
    re.compile(rf"({NAME})\s*=\s*\([^)]*\)\s*=>"),
    re.compile(rf"class\s+({NAME})"),
    re.compile(rf"interface\s+({NAME})"),
    re.compile(rf"type\s+({NAME})"),
]

STRING_LITERAL_RE = re.compile(r"[\"'`]([^\"'`]+)[\"'`]")
WORDLIKE_RE = re.compile(r"[a-zA-Z\s&]+")

COMMON_ABBREVIATIONS = frozenset({
    "id", "url", "api", "ui", "ux", "db", "http", "https",
    "json", "xml", "css", "html", "js", "ts", "tsx",
})

MAX_IDENTIFIERS = 20


def extract_identifiers(code: str, limit: int = MAX_IDENTIFIERS) -> list[str]:
    """Collect declared names and short word-like string literals from JS/TS source.

    This is a regex scan, not a parser: names inside comments or strings that
    look like declarations are picked up too. The result keeps first-seen
    order, drops short names and common abbreviations, and is capped at
    ``limit`` entries.
    """
    found: dict[str, None] = {}

    for pattern in DECLARATION_PATTERNS:
        for match in pattern.finditer(code):
            found.setdefault(match.group(1))

    for match in STRING_LITERAL_RE.finditer(code):
        text = match.group(1)
        if WORDLIKE_RE.fullmatch(text) and len(text) > 2:
            found.setdefault(text)

    identifiers = [
        name for name in found
        if len(name) > 2 and name.lower() not in COMMON_ABBREVIATIONS
    ]
    return identifiers[:limit]


def find_token_line(content: str, token: str) -> int | None:
    """1-based number of the first line containing ``token`` as a whole word.

    Word boundaries treat ``$`` as part of a name so ``$store`` matches. The
    first hit wins even when it is a usage rather than the declaration.
    """
    pattern = re.compile(rf"(?<![\w$]){re.escape(token)}(?![\w$])")
    for i, line in enumerate(content.split("\n")):
        if pattern.search(line):
            return i + 1
    return None
