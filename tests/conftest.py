"""
Pytest configuration for GitWrap tests.

Provides an in-memory GitHub provider so aggregation and API tests never
touch the network, plus builders for raw GitHub payloads.
"""

import asyncio
from typing import Any

import pytest

from gitwrap.core.config import Settings
from gitwrap.core.http import ExternalAPIError
from gitwrap.providers.github import GitHubProvider


@pytest.fixture(autouse=True)
def _isolate_github_env(monkeypatch):
    """Keep real tokens from the developer's shell out of the tests."""
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_PERSONAL_ACCESS_TOKEN", raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, github_token="test-token", default_year=2025)


def make_repo(
    name: str,
    pushed_at: str | None = "2025-06-01T12:00:00Z",
    language: str | None = "Python",
    stars: int = 0,
    owner: str = "octocat",
) -> dict[str, Any]:
    """Raw ``/users/{u}/repos`` item."""
    return {
        "name": name,
        "full_name": f"{owner}/{name}",
        "language": language,
        "stargazers_count": stars,
        "pushed_at": pushed_at,
        "private": False,
    }


def make_profile(login: str = "octocat", name: str | None = "The Octocat") -> dict[str, Any]:
    """Raw ``/users/{u}`` payload."""
    return {
        "login": login,
        "id": 583231,
        "name": name,
        "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
        "bio": "GitHub mascot",
        "followers": 20,
        "following": 9,
        "public_repos": 8,
        "company": "@github",
    }


class FakeGitHub(GitHubProvider):
    """In-memory GitHubProvider that records every call."""

    def __init__(
        self,
        profile: dict[str, Any] | None = None,
        repos: list[dict[str, Any]] | None = None,
        commits: dict[str, list[dict[str, Any]]] | None = None,
        pull_requests: list[dict[str, Any]] | None = None,
        issues: list[dict[str, Any]] | None = None,
        token: str = "test-token",
    ):
        self.profile = profile if profile is not None else make_profile()
        self.repos = repos or []
        self.commits = commits or {}
        self.pull_requests = pull_requests or []
        self.issues = issues or []
        self.token = token
        self.calls: list[tuple[str, Any]] = []
        # name -> ExternalAPIError to raise instead of answering
        self.failures: dict[str, ExternalAPIError] = {}
        # full_name -> seconds to wait before answering list_commits
        self.commit_delays: dict[str, float] = {}
        self.profile_delay = 0.0

    def fail(self, key: str, status_code: int | None = 500) -> None:
        self.failures[key] = ExternalAPIError(f"HTTP {status_code}", status_code=status_code)

    def _maybe_fail(self, key: str) -> None:
        if key in self.failures:
            raise self.failures[key]

    def is_configured(self) -> bool:
        return bool(self.token)

    async def get_user(self, username: str) -> dict[str, Any]:
        self.calls.append(("get_user", username))
        if self.profile_delay:
            await asyncio.sleep(self.profile_delay)
        self._maybe_fail("user")
        return self.profile

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        self.calls.append(("list_repositories", username))
        self._maybe_fail("repos")
        return self.repos

    async def list_commits(self, full_name: str, author: str, since: str, until: str) -> list[dict[str, Any]]:
        self.calls.append(("list_commits", (full_name, author, since, until)))
        if full_name in self.commit_delays:
            await asyncio.sleep(self.commit_delays[full_name])
        self._maybe_fail(full_name)
        return self.commits.get(full_name, [])

    async def search_issues(self, query: str) -> list[dict[str, Any]]:
        self.calls.append(("search_issues", query))
        if "type:pr" in query:
            self._maybe_fail("prs")
            return self.pull_requests
        self._maybe_fail("issues")
        return self.issues

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def fake_github() -> FakeGitHub:
    return FakeGitHub()
