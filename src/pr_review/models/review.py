from enum import Enum
from typing import Literal

from pydantic import BaseModel


class FindingKind(str, Enum):
    SIZE = "size"
    DESCRIPTION = "description"
    FILENAME = "filename"
    LARGE_FILE = "large-file"
    DEBUG_STATEMENT = "debug-statement"
    TODO = "todo"
    SPELLING = "spelling"


class ReviewEvent(str, Enum):
    APPROVE = "APPROVE"
    COMMENT = "COMMENT"
    REQUEST_CHANGES = "REQUEST_CHANGES"


class Finding(BaseModel):
    kind: FindingKind
    message: str
    blocking: bool = False
    path: str | None = None
    line: int | None = None


class LineComment(BaseModel):
    path: str
    line: int
    side: Literal["RIGHT"] = "RIGHT"
    body: str


class SpellingSuggestion(BaseModel):
    identifier: str
    suggestion: str
    reason: str | None = None
