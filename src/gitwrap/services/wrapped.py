"""
Year-in-review service.

Sequences the GitHub calls for one user and hands the results to the pure
reducer in ``aggregators.wrapped``:

1. Profile (fatal: 404 -> ActorNotFound, otherwise ProviderError)
2. Repository list (fatal)
3. Commits for the first 10 repositories active in the year (concurrent,
   each failure skipped and logged)
4. PR and issue searches (each failure skipped and logged)
"""

import asyncio
import logging

from ..aggregators.wrapped import (
    build_summary,
    filter_active_repositories,
    parse_repositories,
)
from ..core.config import Settings, get_settings
from ..core.errors import (
    ActorNotFound,
    InvalidYear,
    MissingUsername,
    PartialFetchFailure,
    ProviderError,
    Unauthenticated,
)
from ..core.http import ExternalAPIError
from ..core.models import CommitFetch, RepositorySnapshot, StatsSummary
from ..core.types import ActivityWindow, MAX_COMMIT_REPOS, is_valid_login, is_valid_year
from ..providers.github import GitHubClient, GitHubProvider

logger = logging.getLogger(__name__)


class StatsAggregator:
    """
    Builds a StatsSummary for one user and year.

    The GitHub capability is injected, so the same orchestration runs
    against the HTTP client in production and a fake in tests.
    """

    def __init__(
        self,
        github: GitHubProvider,
        settings: Settings | None = None,
    ):
        self._github = github
        self._settings = settings or get_settings()

    async def aggregate(self, username: str | None, year: int | None = None) -> StatsSummary:
        """
        Build the year-in-review summary.

        Validation happens before any network call.

        Raises:
            MissingUsername: username empty or whitespace
            InvalidYear: year outside [MIN_YEAR, current year + 1]
            Unauthenticated: no GitHub token configured
            ActorNotFound: username is not a valid GitHub login, or the
                profile lookup returned 404
            ProviderError: profile or repository call failed, or deadline passed
        """
        username = (username or "").strip()
        if not username:
            raise MissingUsername()
        if year is None:
            year = self._settings.default_year
        if not is_valid_year(year):
            raise InvalidYear()
        if not self._github.is_configured():
            raise Unauthenticated()
        # The login is interpolated into request paths and search qualifiers
        if not is_valid_login(username):
            logger.info(f"Rejected malformed GitHub login {username!r}")
            raise ActorNotFound(username)

        window = ActivityWindow.for_year(year)

        try:
            return await asyncio.wait_for(
                self._aggregate(username, window),
                timeout=self._settings.request_deadline,
            )
        except asyncio.TimeoutError as e:
            logger.error(
                f"Aggregation for {username} exceeded {self._settings.request_deadline}s deadline"
            )
            raise ProviderError("Request deadline exceeded") from e

    async def _aggregate(self, username: str, window: ActivityWindow) -> StatsSummary:
        profile = await self._fetch_profile(username)

        try:
            raw_repos = await self._github.list_repositories(username)
        except ExternalAPIError as e:
            logger.error(f"Error fetching repositories for {username}: {e.message}")
            raise ProviderError(f"Repository list failed: {e.message}", e.status_code) from e

        active = filter_active_repositories(parse_repositories(raw_repos), window)
        commit_fetches = await self._fetch_commits(active[:MAX_COMMIT_REPOS], username, window)

        failures: list[PartialFetchFailure] = []
        pull_requests = await self._search(
            f"author:{username} type:pr created:{window.search_range}", "pull requests", failures
        )
        issues = await self._search(
            f"author:{username} type:issue created:{window.search_range}", "issues", failures
        )

        return build_summary(
            profile=profile,
            active_repos=active,
            commit_fetches=commit_fetches,
            pull_requests=pull_requests,
            issues=issues,
            window=window,
            failures=failures,
        )

    async def _fetch_profile(self, username: str) -> dict:
        try:
            return await self._github.get_user(username)
        except ExternalAPIError as e:
            if e.is_not_found:
                logger.info(f"GitHub user {username} not found")
                raise ActorNotFound(username) from e
            logger.error(f"GitHub API error fetching profile {username}: {e.message}")
            raise ProviderError(f"GitHub API error: {e.status_code}", e.status_code) from e

    async def _fetch_commits(
        self,
        repos: list[RepositorySnapshot],
        username: str,
        window: ActivityWindow,
    ) -> list[CommitFetch]:
        """Fan out one commit fetch per repository; results keep repository order."""
        semaphore = asyncio.Semaphore(self._settings.commit_fetch_concurrency)

        async def fetch_one(repo: RepositorySnapshot) -> CommitFetch:
            async with semaphore:
                try:
                    commits = await self._github.list_commits(
                        repo.full_name,
                        author=username,
                        since=window.since,
                        until=window.until,
                    )
                except ExternalAPIError as e:
                    logger.warning(f"Error fetching commits for {repo.full_name}: {e.message}")
                    return CommitFetch.failed(
                        repo.full_name,
                        PartialFetchFailure(
                            source=f"commits:{repo.full_name}",
                            reason=e.message,
                            status_code=e.status_code,
                        ),
                    )
                return CommitFetch.succeeded(repo.full_name, commits)

        # gather returns results in argument order, not completion order
        return list(await asyncio.gather(*(fetch_one(repo) for repo in repos)))

    async def _search(
        self,
        query: str,
        label: str,
        failures: list[PartialFetchFailure],
    ) -> list[dict]:
        try:
            return await self._github.search_issues(query)
        except ExternalAPIError as e:
            logger.warning(f"Error searching {label} ({query}): {e.message}")
            failures.append(
                PartialFetchFailure(source=f"search:{label}", reason=e.message, status_code=e.status_code)
            )
            return []


# Singleton instance
_github_client: GitHubClient | None = None


def get_github_client() -> GitHubClient:
    """Get or create the shared GitHub client."""
    global _github_client
    if _github_client is None:
        _github_client = GitHubClient()
    return _github_client


async def close_github_client() -> None:
    """Close the shared GitHub client. Called at app shutdown."""
    global _github_client
    if _github_client is not None:
        await _github_client.close()
        _github_client = None


def get_stats_aggregator() -> StatsAggregator:
    """Build an aggregator around the shared GitHub client."""
    return StatsAggregator(get_github_client())
