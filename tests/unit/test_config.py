# tests/unit/test_config.py
import pytest
from pr_review.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("GITHUB_TOKEN", "REPOSITORY", "PR_NUMBER", "OPENAI_API_KEY", "AI_PROVIDER"):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.unit
def test_settings_loads_from_env(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("REPOSITORY", "octo/shop")
    monkeypatch.setenv("PR_NUMBER", "14")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    settings = Settings()

    assert settings.github_token == "test-token"
    assert settings.repository == "octo/shop"
    assert settings.pr_number == 14
    assert settings.openai_api_key == "sk-test"


@pytest.mark.unit
def test_settings_defaults():
    settings = Settings(github_token="x")
    assert settings.ai_provider == "openai"
    assert settings.openai_model == "gpt-4o"
    assert settings.github_api_url == "https://api.github.com"
    assert settings.review_config_path == ".pr-review.yaml"


@pytest.mark.unit
def test_empty_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("PR_NUMBER", "")
    monkeypatch.setenv("OPENAI_API_KEY", "")

    settings = Settings()

    assert settings.pr_number is None
    assert settings.openai_api_key is None


@pytest.mark.unit
def test_missing_required_lists_env_names():
    settings = Settings(repository="octo/shop")
    assert settings.missing_required() == ["GITHUB_TOKEN", "PR_NUMBER"]


@pytest.mark.unit
def test_openai_key_is_not_required():
    settings = Settings(github_token="t", repository="octo/shop", pr_number=3)
    assert settings.missing_required() == []
