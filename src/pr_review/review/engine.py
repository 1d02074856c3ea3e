# src/pr_review/review/engine.py
import yaml
import logging
from dataclasses import dataclass

from pr_review.models.config import ReviewConfig
from pr_review.models.github import PullRequestFile
from pr_review.models.review import FindingKind, LineComment, ReviewEvent
from pr_review.platforms.base import GitPlatform
from . import messages
from .checks import find_debug_statements, find_todo_markers, is_script_file, large_files, run_metadata_checks
from .comments import CommentAssembler
from .diff import parse_changed_lines
from .identifiers import extract_identifiers
from .spelling import SpellingAdvisor


logger = logging.getLogger(__name__)

SCANNED_STATUSES = ("added", "modified")


@dataclass
class ReviewOutcome:
    """Result of running one review pass on a pull request."""
    event: ReviewEvent
    body: str
    summary_count: int
    line_comment_count: int
    posted: bool


def decide_event(summary: list[str], line_comments: list[LineComment], blocking: bool) -> ReviewEvent:
    if summary or line_comments:
        return ReviewEvent.REQUEST_CHANGES if blocking else ReviewEvent.COMMENT
    if blocking:
        return ReviewEvent.COMMENT
    return ReviewEvent.APPROVE


def build_review_body(summary: list[str], line_comments: list[LineComment], blocking: bool) -> str:
    if summary:
        text = "\n\n".join(summary)
    elif line_comments:
        text = messages.INLINE_BLOCKING if blocking else messages.INLINE_ONLY
    elif blocking:
        text = messages.OUTSIDE_DIFF_ONLY
    else:
        text = messages.ALL_CHECKS_PASSED
    return f"{messages.REVIEW_HEADER}\n\n{text}"


class ReviewEngine:
    def __init__(
        self,
        github: GitPlatform,
        advisor: SpellingAdvisor | None = None,
        config_path: str = ".pr-review.yaml",
        dry_run: bool = False,
    ):
        self.github = github
        self.advisor = advisor
        self.config_path = config_path
        self.dry_run = dry_run

    async def review_pr(self, repository: str, pr_number: int) -> ReviewOutcome:
        """Run every check on a pull request and post a single review."""
        logger.info(f"Reviewing PR #{pr_number} in {repository}...")

        pr = await self.github.get_pull_request(repository, pr_number)
        files = await self.github.list_pull_request_files(repository, pr_number)
        diff = await self.github.get_pull_request_diff(repository, pr_number)

        changed_lines = parse_changed_lines(diff)
        logger.info(f"Diff analysis: {len(changed_lines)} files with changed lines")
        for path, lines in changed_lines.items():
            logger.debug(f"  {path}: {len(lines)} changed lines")

        config = await self._load_config(repository, pr.head.sha)
        assembler = CommentAssembler(changed_lines)
        blocking = False

        for finding in run_metadata_checks(pr, files, config):
            assembler.add_remark(finding.message)
            blocking = blocking or finding.blocking

        if config.large_file_inline:
            for file in large_files(files, config):
                lines = changed_lines.get(file.filename)
                if lines:
                    assembler.add_line_comment(
                        FindingKind.LARGE_FILE, file.filename, min(lines), changes=file.changes
                    )

        logger.info(f"Analyzing {len(files)} changed files...")
        for file in files[:config.max_scanned_files]:
            logger.info(f"Processing file: {file.filename} ({file.status})")
            if file.status not in SCANNED_STATUSES:
                continue
            try:
                content = await self.github.get_file_content(repository, file.filename, pr.head.sha)
                if content is None:
                    continue
                if self._scan_content(file, content, config, assembler):
                    blocking = True
                await self._check_spelling(file, content, config, assembler)
            except Exception as e:
                logger.warning(f"Could not analyze content of {file.filename}: {e}")

        return await self._submit(repository, pr_number, assembler, blocking)

    async def report_failure(self, repository: str, pr_number: int, error: Exception) -> None:
        """Best-effort COMMENT review describing why the pass failed."""
        body = messages.REVIEW_ERROR.format(error=error)
        if self.dry_run:
            logger.info(f"[dry-run] would post failure review: {body}")
            return
        try:
            await self.github.create_review(repository, pr_number, ReviewEvent.COMMENT, body)
        except Exception as e:
            logger.error(f"Failed to post failure review: {e}")

    def _scan_content(
        self,
        file: PullRequestFile,
        content: str,
        config: ReviewConfig,
        assembler: CommentAssembler,
    ) -> bool:
        """Debug and TODO scan; returns True when a TODO marker was found."""
        for line in find_debug_statements(file.filename, content, config):
            assembler.add_line_comment(FindingKind.DEBUG_STATEMENT, file.filename, line)

        todo_lines = find_todo_markers(content)
        for line in todo_lines:
            assembler.add_line_comment(FindingKind.TODO, file.filename, line)
        return bool(todo_lines)

    async def _check_spelling(
        self,
        file: PullRequestFile,
        content: str,
        config: ReviewConfig,
        assembler: CommentAssembler,
    ) -> None:
        if self.advisor and config.spelling_check and is_script_file(file.filename, config):
            identifiers = extract_identifiers(content, limit=config.max_identifiers)
            preview = ", ".join(identifiers[:10])
            logger.info(f"Checking spelling in {file.filename}: {len(identifiers)} identifiers ({preview})")

            suggestions = await self.advisor.check(identifiers, file.filename)
            if suggestions:
                logger.info(f"Found {len(suggestions)} spelling issues in {file.filename}")
            for suggestion in suggestions:
                assembler.add_spelling(file.filename, content, suggestion)

    async def _submit(
        self,
        repository: str,
        pr_number: int,
        assembler: CommentAssembler,
        blocking: bool,
    ) -> ReviewOutcome:
        event = decide_event(assembler.summary, assembler.line_comments, blocking)
        body = build_review_body(assembler.summary, assembler.line_comments, blocking)
        logger.info(
            f"Review summary: {len(assembler.summary)} summary comments, "
            f"{len(assembler.line_comments)} file comments -> {event.value}"
        )

        if self.dry_run:
            for comment in assembler.line_comments:
                logger.info(f"[dry-run] {comment.path}:{comment.line} - {comment.body[:50]}...")
            logger.info(f"[dry-run] review body:\n{body}")
        else:
            await self.github.create_review(
                repository,
                pr_number,
                event,
                body,
                comments=assembler.line_comments,
            )
            logger.info(f"Posted {event.value} review on PR #{pr_number}")

        return ReviewOutcome(
            event=event,
            body=body,
            summary_count=len(assembler.summary),
            line_comment_count=len(assembler.line_comments),
            posted=not self.dry_run,
        )

    async def _load_config(self, repository: str, ref: str) -> ReviewConfig:
        """Load the review config file from the repo or use defaults."""
        yaml_content = await self.github.get_repo_config(repository, self.config_path, ref)
        if yaml_content is None:
            return ReviewConfig()

        try:
            data = yaml.safe_load(yaml_content) or {}
            return ReviewConfig(**data)
        except Exception as e:
            logger.warning(f"Invalid {self.config_path}: {e}")
            return ReviewConfig()
