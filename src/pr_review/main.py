# src/pr_review/main.py
import hashlib
import hmac
import json
import re
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI, Header, HTTPException, BackgroundTasks, Request
from pydantic import BaseModel, model_validator

from pr_review.config import Settings
from pr_review.models.github import GitHubPullRequestEvent
from pr_review.platforms.github import GitHubClient
from pr_review.providers import get_provider
from pr_review.review.engine import ReviewEngine
from pr_review.review.spelling import SpellingAdvisor


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REVIEW_ACTIONS = ("opened", "reopened", "synchronize", "ready_for_review")


@lru_cache
def get_settings() -> Settings:
    return Settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("PR Review service starting...")
    yield
    logger.info("PR Review service shutting down...")


app = FastAPI(title="PR Review", lifespan=lifespan)


class WebhookResponse(BaseModel):
    status: str
    message: str | None = None


class ReviewRequest(BaseModel):
    url: str | None = None
    repository: str | None = None
    pr_number: int | None = None

    @model_validator(mode="after")
    def check_params(self):
        if not self.url and not (self.repository and self.pr_number):
            raise ValueError("Either url or repository+pr_number required")
        return self


class ReviewResponse(BaseModel):
    status: str
    repository: str | None = None
    pr_number: int | None = None
    event: str | None = None
    comments_posted: int | None = None
    error: str | None = None


def parse_github_pr_url(url: str) -> tuple[str, int]:
    """Parse GitHub PR URL -> (owner/repo, pr_number)."""
    match = re.match(r"https?://[^/]+/([^/]+/[^/]+)/pull/(\d+)", url)
    if not match:
        raise ValueError(f"Invalid GitHub PR URL: {url}")
    return match.group(1), int(match.group(2))


def verify_signature(secret: str, body: bytes, signature: str | None) -> bool:
    """Check a ``sha256=<hex>`` webhook signature against the raw request body."""
    if not signature or not signature.startswith("sha256="):
        return False
    expected = hmac.new(secret.encode(), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(expected, signature.removeprefix("sha256="))


def build_engine(settings: Settings, dry_run: bool = False) -> ReviewEngine:
    """Wire the GitHub client and the optional spelling advisor from settings."""
    github = GitHubClient(token=settings.github_token, api_url=settings.github_api_url)
    provider = get_provider(settings)
    if provider:
        logger.info(f"AI provider '{settings.ai_provider}' initialized for spelling checks.")
    else:
        logger.info("AI provider not configured. Skipping spelling checks.")
    advisor = SpellingAdvisor(provider) if provider else None
    return ReviewEngine(
        github=github,
        advisor=advisor,
        config_path=settings.review_config_path,
        dry_run=dry_run,
    )


@app.get("/health")
async def health():
    return {"status": "ok", "version": "0.1.0"}


@app.post("/webhook/github", response_model=WebhookResponse)
async def github_webhook(
    request: Request,
    background_tasks: BackgroundTasks,
    x_github_event: str = Header(...),
    x_hub_signature_256: str | None = Header(None),
):
    settings = get_settings()
    body = await request.body()

    # Verify webhook signature
    if not settings.github_webhook_secret or not verify_signature(
        settings.github_webhook_secret, body, x_hub_signature_256
    ):
        raise HTTPException(status_code=401, detail="Invalid webhook signature")

    if x_github_event == "ping":
        return WebhookResponse(status="ok", message="pong")

    if x_github_event == "pull_request":
        event = GitHubPullRequestEvent(**json.loads(body))
        if event.action in REVIEW_ACTIONS:
            background_tasks.add_task(
                run_review,
                repository=event.repository.full_name,
                pr_number=event.number,
            )
            return WebhookResponse(status="accepted", message="Review scheduled")

    return WebhookResponse(status="ignored", message="Event not relevant")


@app.post("/api/review", response_model=ReviewResponse)
async def trigger_review(request: ReviewRequest):
    """Manually trigger a review for a pull request."""
    settings = get_settings()
    if not settings.github_token:
        return ReviewResponse(status="error", error="GITHUB_TOKEN is not configured")

    try:
        if request.url:
            repository, pr_number = parse_github_pr_url(request.url)
        else:
            repository = request.repository
            pr_number = request.pr_number
    except ValueError as e:
        return ReviewResponse(status="error", error=str(e))

    engine = build_engine(settings)
    try:
        outcome = await engine.review_pr(repository, pr_number)
    except Exception as e:
        logger.exception(f"Review failed: {e}")
        await engine.report_failure(repository, pr_number, e)
        return ReviewResponse(status="error", repository=repository, pr_number=pr_number, error=str(e))

    return ReviewResponse(
        status="completed",
        repository=repository,
        pr_number=pr_number,
        event=outcome.event.value,
        comments_posted=outcome.line_comment_count,
    )


async def run_review(repository: str, pr_number: int):
    """Background task to run the review."""
    settings = get_settings()
    engine = build_engine(settings)

    try:
        await engine.review_pr(repository, pr_number)
        logger.info(f"Review completed for PR #{pr_number}")
    except Exception as e:
        logger.exception(f"Review failed for PR #{pr_number}: {e}")
        await engine.report_failure(repository, pr_number, e)
