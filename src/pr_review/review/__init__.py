from .diff import parse_changed_lines, ChangedLineSet
from .identifiers import extract_identifiers
from .spelling import SpellingAdvisor, parse_spelling_response
from .comments import CommentAssembler
from .engine import ReviewEngine, ReviewOutcome, decide_event

__all__ = [
    "parse_changed_lines",
    "ChangedLineSet",
    "extract_identifiers",
    "SpellingAdvisor",
    "parse_spelling_response",
    "CommentAssembler",
    "ReviewEngine",
    "ReviewOutcome",
    "decide_event",
]
