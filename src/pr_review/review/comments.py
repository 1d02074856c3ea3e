import logging

from pr_review.models.review import FindingKind, LineComment, SpellingSuggestion
from . import messages
from .diff import ChangedLineSet, is_line_changed
from .identifiers import find_token_line


logger = logging.getLogger(__name__)


class CommentAssembler:
    """Collects summary remarks and inline comments for one review pass.

    Inline comments for every kind except spelling are only queued when
    their line is part of the diff; the review API rejects comments on
    lines it cannot place. Spelling comments point at the first line
    mentioning the identifier, which may be a context line.
    """

    def __init__(self, changed_lines: ChangedLineSet):
        self.changed_lines = changed_lines
        self.summary: list[str] = []
        self.line_comments: list[LineComment] = []

    def add_remark(self, text: str) -> None:
        self.summary.append(text)

    def add_line_comment(self, kind: FindingKind, path: str, line: int, **details) -> bool:
        if kind != FindingKind.SPELLING and not is_line_changed(self.changed_lines, path, line):
            logger.info(f"Skipping {kind.value} comment for {path}:{line} - line not in diff")
            return False

        body = messages.render_line_comment(kind, **details)
        self.line_comments.append(LineComment(path=path, line=line, body=body))
        logger.info(f"Added {kind.value} comment for {path}:{line}")
        return True

    def add_spelling(self, path: str, content: str, suggestion: SpellingSuggestion) -> bool:
        """Place a spelling suggestion inline, or as a summary remark when no line mentions it."""
        line = find_token_line(content, suggestion.identifier)
        if line is None:
            logger.info(f"Could not find line number for '{suggestion.identifier}' in {path}")
            self.add_remark(messages.SPELLING_REMARK.format(
                path=path,
                identifier=suggestion.identifier,
                suggestion=suggestion.suggestion,
                reason=suggestion.reason or "spelling issue",
            ))
            return False

        return self.add_line_comment(
            FindingKind.SPELLING,
            path,
            line,
            identifier=suggestion.identifier,
            suggestion=suggestion.suggestion,
            reason=suggestion.reason,
        )
