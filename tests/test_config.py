"""
Tests for settings resolution.
"""

from gitwrap.core.config import Settings


def test_service_token_takes_priority(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "service")
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "personal")
    assert Settings(_env_file=None).github_auth_token == "service"


def test_personal_token_is_fallback(monkeypatch):
    monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "personal")
    assert Settings(_env_file=None).github_auth_token == "personal"


def test_no_token():
    assert Settings(_env_file=None).github_auth_token == ""


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.github_api_base == "https://api.github.com"
    assert settings.github_user_agent == "GitWrap"
    assert settings.default_year == 2025
    assert settings.commit_fetch_concurrency == 10
