"""
GitHub REST/Search API client.

Wraps the five read-only endpoints the year-in-review aggregation needs.
Each method issues exactly one request for one page; nothing is paginated
or retried.

Usage:
    async with GitHubClient(token="ghp_...") as github:
        profile = await github.get_user("octocat")
        repos = await github.list_repositories("octocat")
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import httpx

from ..core.config import Settings, get_settings
from ..core.http import BaseApiClient, ExternalAPIError
from ..core.types import PAGE_SIZE, is_valid_login

logger = logging.getLogger(__name__)


class GitHubProvider(ABC):
    """Capability the aggregator needs from GitHub.

    GitHubClient is the HTTP implementation; tests inject in-memory fakes.
    """

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether a credential is available."""
        ...

    @abstractmethod
    async def get_user(self, username: str) -> dict[str, Any]:
        """Fetch the user profile."""
        ...

    @abstractmethod
    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        """List the user's repositories, most recently updated first."""
        ...

    @abstractmethod
    async def list_commits(
        self,
        full_name: str,
        author: str,
        since: str,
        until: str,
    ) -> list[dict[str, Any]]:
        """List commits by ``author`` in ``full_name`` between ``since`` and ``until``."""
        ...

    @abstractmethod
    async def search_issues(self, query: str) -> list[dict[str, Any]]:
        """Run an issue/PR search and return its items."""
        ...


class GitHubClient(BaseApiClient, GitHubProvider):
    """
    GitHub API client.

    Every request carries the bearer token, the versioned JSON media type
    and a fixed User-Agent.
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub token. If None, uses the token resolved by settings
                   (GITHUB_TOKEN, then GITHUB_PERSONAL_ACCESS_TOKEN).
            settings: Settings instance, defaults to get_settings().
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        settings = settings or get_settings()
        self.token = (token if token is not None else settings.github_auth_token).strip()

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.github_api_version,
            "User-Agent": settings.github_user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        super().__init__(
            base_url=settings.github_api_base,
            headers=headers,
            timeout=settings.github_timeout,
            transport=transport,
        )

    def is_configured(self) -> bool:
        """Check if a token is configured."""
        return bool(self.token)

    async def get_user(self, username: str) -> dict[str, Any]:
        data = await self._get(_user_path(username))
        if not isinstance(data, dict):
            raise ExternalAPIError(
                f"Unexpected profile payload for {username}",
                code="INVALID_RESPONSE",
            )
        return data

    async def list_repositories(self, username: str) -> list[dict[str, Any]]:
        data = await self._get(
            _user_path(username, "repos"),
            params={"sort": "updated", "per_page": PAGE_SIZE},
        )
        return _as_list(data, f"repositories of {username}")

    async def list_commits(
        self,
        full_name: str,
        author: str,
        since: str,
        until: str,
    ) -> list[dict[str, Any]]:
        data = await self._get(
            f"/repos/{full_name}/commits",
            params={
                "since": since,
                "until": until,
                "author": author,
                "per_page": PAGE_SIZE,
            },
        )
        return _as_list(data, f"commits of {full_name}")

    async def search_issues(self, query: str) -> list[dict[str, Any]]:
        data = await self._get(
            "/search/issues",
            params={"q": query, "per_page": PAGE_SIZE},
        )
        if not isinstance(data, dict):
            return []
        # A search response without items is an empty result, not an error
        return data.get("items") or []


def _user_path(username: str, *parts: str) -> str:
    # A login never contains "/" or "..", so the path stays under /users/
    if not is_valid_login(username):
        raise ExternalAPIError(f"Invalid GitHub login: {username!r}", code="INVALID_LOGIN")
    return "/".join(("", "users", username, *parts))


def _as_list(data: Any, what: str) -> list[dict[str, Any]]:
    if not isinstance(data, list):
        raise ExternalAPIError(f"Expected a list of {what}", code="INVALID_RESPONSE")
    return data
