import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path

import uvicorn
from pydantic import ValidationError

from pr_review.config import Settings
from pr_review.main import build_engine, parse_github_pr_url
from pr_review.providers import get_provider
from pr_review.review.engine import ReviewEngine
from pr_review.review.identifiers import extract_identifiers, find_token_line
from pr_review.review.spelling import SpellingAdvisor


logger = logging.getLogger("pr_review")

ENV_VARS = [
    ("GITHUB_TOKEN", "github_token", True, True),
    ("REPOSITORY", "repository", True, False),
    ("PR_NUMBER", "pr_number", True, False),
    ("OPENAI_API_KEY", "openai_api_key", False, True),
    ("GEMINI_API_KEY", "gemini_api_key", False, True),
    ("AI_PROVIDER", "ai_provider", False, False),
]

ACTIONS_VARS = ["GITHUB_ACTIONS", "GITHUB_EVENT_NAME", "GITHUB_WORKFLOW"]


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _mask(value: str) -> str:
    return f"{value[:4]}..." if len(value) > 4 else "***"


async def review_once(engine: ReviewEngine, repository: str, pr_number: int) -> int:
    """Run one review pass; on failure post the error review and return 1."""
    try:
        outcome = await engine.review_pr(repository, pr_number)
    except Exception as e:
        logger.exception(f"Error during PR review: {e}")
        await engine.report_failure(repository, pr_number, e)
        return 1

    logger.info(
        f"Review complete: {outcome.event.value} with {outcome.summary_count} summary "
        f"and {outcome.line_comment_count} inline comments"
    )
    return 0


def cmd_review(args: argparse.Namespace, settings: Settings) -> int:
    repository = args.repository or settings.repository
    pr_number = args.pr_number or settings.pr_number
    if args.url:
        try:
            repository, pr_number = parse_github_pr_url(args.url)
        except ValueError as e:
            print(str(e), file=sys.stderr)
            return 1

    missing = settings.missing_required(("github_token",))
    if not repository:
        missing.append("REPOSITORY")
    if not pr_number:
        missing.append("PR_NUMBER")
    if missing:
        print("Missing required environment variables:", file=sys.stderr)
        for name in missing:
            print(f"   - {name}", file=sys.stderr)
        return 1

    engine = build_engine(settings, dry_run=args.dry_run)
    return asyncio.run(review_once(engine, repository, pr_number))


def cmd_check_env(args: argparse.Namespace, settings: Settings) -> int:
    print("Environment variables:")
    missing = False
    for env_name, field, required, secret in ENV_VARS:
        value = getattr(settings, field)
        if value not in (None, ""):
            shown = _mask(str(value)) if secret else str(value)
            print(f"  [ok] {env_name}: {shown}")
        else:
            label = "NOT SET" if required else "not set (optional)"
            print(f"  [{'!!' if required else '--'}] {env_name}: {label}")
            missing = missing or required

    provider = get_provider(settings)
    print(f"\nSpelling checks: {'enabled (' + settings.ai_provider + ')' if provider else 'disabled'}")

    print("\nGitHub Actions environment:")
    for name in ACTIONS_VARS:
        print(f"  {name}: {os.environ.get(name, 'not set')}")

    return 1 if missing else 0


def cmd_spellcheck(args: argparse.Namespace, settings: Settings) -> int:
    path = Path(args.path)
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        print(f"Cannot read {path}: {e}", file=sys.stderr)
        return 1

    identifiers = extract_identifiers(content)
    print(f"Found {len(identifiers)} identifiers:")
    for identifier in identifiers:
        print(f"  - {identifier}")

    if not args.ai:
        return 0

    provider = get_provider(settings)
    if provider is None:
        print("No AI provider configured (set OPENAI_API_KEY or GEMINI_API_KEY)", file=sys.stderr)
        return 1

    suggestions = asyncio.run(SpellingAdvisor(provider).check(identifiers, str(path)))
    print(f"\nFound {len(suggestions)} spelling issues:")
    for suggestion in suggestions:
        line = find_token_line(content, suggestion.identifier)
        where = f"line {line}" if line else "line not found"
        reason = f" ({suggestion.reason})" if suggestion.reason else ""
        print(f"  {suggestion.identifier} -> {suggestion.suggestion}{reason} [{where}]")
    return 0


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    uvicorn.run("pr_review.main:app", host=args.host, port=args.port, log_level=settings.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pr-review", description="Automated GitHub pull request review")
    parser.set_defaults(func=cmd_review, repository=None, pr_number=None, url=None, dry_run=False)
    sub = parser.add_subparsers(dest="command")

    p_review = sub.add_parser("review", help="Review a pull request and post the result (default)")
    p_review.add_argument("--repository", help="owner/repo (defaults to $REPOSITORY)")
    p_review.add_argument("--pr-number", type=int, help="Pull request number (defaults to $PR_NUMBER)")
    p_review.add_argument("--url", help="Pull request URL, e.g. https://github.com/owner/repo/pull/1")
    p_review.add_argument("--dry-run", action="store_true", help="Log the review instead of posting it")
    p_review.set_defaults(func=cmd_review)

    p_env = sub.add_parser("check-env", help="Report which settings are configured")
    p_env.set_defaults(func=cmd_check_env)

    p_spell = sub.add_parser("spellcheck", help="Extract identifiers from a local file")
    p_spell.add_argument("path")
    p_spell.add_argument("--ai", action="store_true", help="Ask the AI provider for spelling suggestions")
    p_spell.set_defaults(func=cmd_spellcheck)

    p_serve = sub.add_parser("serve", help="Run the webhook / API server")
    p_serve.add_argument("--host", default="0.0.0.0")
    p_serve.add_argument("--port", type=int, default=8000)
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    _configure_logging(settings)
    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
