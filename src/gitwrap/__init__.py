"""
GitWrap

Year-in-review statistics for a GitHub user: profile, repositories active in
the year, commits, pull requests, issues, top languages and most starred
repositories, aggregated from the public GitHub REST and Search APIs.

Usage:
    from gitwrap import GitHubClient, StatsAggregator

    async with GitHubClient(token="ghp_...") as github:
        summary = await StatsAggregator(github).aggregate("octocat", 2025)
        print(summary.to_payload())
"""

from .core.errors import (
    ActorNotFound,
    InvalidYear,
    MissingUsername,
    PartialFetchFailure,
    ProviderError,
    Unauthenticated,
    WrappedError,
)
from .core.models import Actor, RepositorySnapshot, StatsSummary, WrappedStats
from .core.types import ActivityWindow
from .providers.github import GitHubClient, GitHubProvider
from .services.wrapped import StatsAggregator

__version__ = "1.0.0"

__all__ = [
    # Aggregation
    "StatsAggregator",
    "ActivityWindow",
    # Provider
    "GitHubClient",
    "GitHubProvider",
    # Models
    "Actor",
    "RepositorySnapshot",
    "StatsSummary",
    "WrappedStats",
    # Errors
    "WrappedError",
    "MissingUsername",
    "InvalidYear",
    "Unauthenticated",
    "ActorNotFound",
    "ProviderError",
    "PartialFetchFailure",
]
