# src/pr_review/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


REQUIRED_FOR_REVIEW = ("github_token", "repository", "pr_number")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    # GitHub
    github_token: str | None = None
    github_api_url: str = "https://api.github.com"
    github_webhook_secret: str | None = None
    repository: str | None = None
    pr_number: int | None = None

    # AI providers
    ai_provider: str = "openai"
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    gemini_api_key: str | None = None

    # Defaults
    review_config_path: str = ".pr-review.yaml"
    log_level: str = "INFO"

    def missing_required(self, names: tuple[str, ...] = REQUIRED_FOR_REVIEW) -> list[str]:
        """Environment variable names of required settings that are unset."""
        return [name.upper() for name in names if getattr(self, name) in (None, "")]
