# src/pr_review/review/checks.py
"""Heuristic checks over pull request metadata and file contents.

Each check is independent and side-effect free. Metadata checks return a
``Finding`` (or None when the check passes); content scanners return the
1-based line numbers that matched so the caller can place inline comments.
Matching is regex based and line oriented, so a pattern inside a string
literal or a multi-line construct is reported the same as real code.
"""
import re

from pr_review.models.config import ReviewConfig
from pr_review.models.github import PullRequest, PullRequestFile
from pr_review.models.review import Finding, FindingKind
from . import messages


DEBUG_STATEMENT_RE = re.compile(r"console\.(log|warn|error|debug)")
TODO_MARKER_RE = re.compile(r"TODO|FIXME|HACK", re.IGNORECASE)

TEST_FILE_MARKERS = (".test.", ".spec.")


def check_pr_size(pr: PullRequest, config: ReviewConfig) -> Finding | None:
    total = pr.total_changes
    values = {"total": total, "additions": pr.additions, "deletions": pr.deletions}

    if total > config.large_pr_lines:
        return Finding(kind=FindingKind.SIZE, message=messages.LARGE_PR.format(**values), blocking=True)
    if total > config.medium_pr_lines:
        return Finding(kind=FindingKind.SIZE, message=messages.MEDIUM_PR.format(**values))
    return None


def check_description(pr: PullRequest, config: ReviewConfig) -> Finding | None:
    body = (pr.body or "").strip()
    if len(body) < config.min_description_length:
        return Finding(kind=FindingKind.DESCRIPTION, message=messages.SHORT_DESCRIPTION, blocking=True)
    return None


def check_filenames(files: list[PullRequestFile], config: ReviewConfig) -> Finding | None:
    suspicious = [
        f.filename for f in files
        if any(pattern in f.filename for pattern in config.suspicious_name_patterns)
    ]
    if not suspicious:
        return None
    listing = messages.bullet_list([f"`{name}`" for name in suspicious])
    return Finding(kind=FindingKind.FILENAME, message=messages.SUSPICIOUS_FILES.format(files=listing))


def large_files(files: list[PullRequestFile], config: ReviewConfig) -> list[PullRequestFile]:
    return [f for f in files if f.changes > config.large_file_changes]


def check_large_files(files: list[PullRequestFile], config: ReviewConfig) -> Finding | None:
    matches = large_files(files, config)
    if not matches:
        return None
    listing = messages.bullet_list([f"`{f.filename}` ({f.changes} changes)" for f in matches])
    return Finding(kind=FindingKind.LARGE_FILE, message=messages.LARGE_FILES.format(files=listing))


def run_metadata_checks(pr: PullRequest, files: list[PullRequestFile], config: ReviewConfig) -> list[Finding]:
    """Run every PR-level check, in a fixed order, and collect what they report."""
    results = [
        check_pr_size(pr, config),
        check_description(pr, config),
        check_filenames(files, config),
        check_large_files(files, config),
    ]
    return [finding for finding in results if finding is not None]


def is_script_file(filename: str, config: ReviewConfig | None = None) -> bool:
    extensions = (config or ReviewConfig()).script_extensions
    return filename.endswith(tuple(extensions))


def is_test_file(filename: str) -> bool:
    return any(marker in filename for marker in TEST_FILE_MARKERS)


def _matching_lines(pattern: re.Pattern, content: str) -> list[int]:
    return [i + 1 for i, line in enumerate(content.split("\n")) if pattern.search(line)]


def find_debug_statements(filename: str, content: str, config: ReviewConfig | None = None) -> list[int]:
    """Lines with console logging calls, for non-test script files only."""
    if not is_script_file(filename, config) or is_test_file(filename):
        return []
    return _matching_lines(DEBUG_STATEMENT_RE, content)


def find_todo_markers(content: str) -> list[int]:
    return _matching_lines(TODO_MARKER_RE, content)
