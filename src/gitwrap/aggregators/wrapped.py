"""
Year-in-review statistics aggregator.

Reduces the raw collections fetched from GitHub (profile, repositories,
per-repository commit results, PR and issue search items) into a
StatsSummary.

Design: Pure functions with no I/O. The orchestration layer decides what
to fetch; everything here is deterministic for a given provider snapshot.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, Sequence

from ..core.errors import PartialFetchFailure
from ..core.models import (
    Actor,
    CommitFetch,
    RepositorySnapshot,
    StatsSummary,
    TopRepository,
    WrappedStats,
)
from ..core.types import ActivityWindow, TOP_N

logger = logging.getLogger(__name__)


def parse_repositories(raw: Iterable[dict[str, Any]]) -> list[RepositorySnapshot]:
    return [RepositorySnapshot.model_validate(repo) for repo in raw]


def filter_active_repositories(
    repos: Sequence[RepositorySnapshot],
    window: ActivityWindow,
) -> list[RepositorySnapshot]:
    """Repositories last pushed inside ``window``, in provider order."""
    return [repo for repo in repos if window.contains(repo.pushed_at)]


def count_commits(fetches: Iterable[CommitFetch]) -> int:
    """Best-effort commit total: failed repositories contribute nothing.

    The result is a lower bound whenever any fetch failed.
    """
    return sum(len(fetch.commits) for fetch in fetches if fetch.ok)


def collect_failures(fetches: Iterable[CommitFetch]) -> list[PartialFetchFailure]:
    return [fetch.error for fetch in fetches if not fetch.ok]


def is_merged(pull_request: dict[str, Any]) -> bool:
    """Closed AND carrying a merge timestamp; closed-unmerged does not count.

    Search results nest the timestamp under ``pull_request``; the pulls API
    puts it at the top level. Either is accepted.
    """
    if pull_request.get("state") != "closed":
        return False
    if pull_request.get("merged_at"):
        return True
    nested = pull_request.get("pull_request") or {}
    return bool(nested.get("merged_at"))


def count_merged_pull_requests(pull_requests: Iterable[dict[str, Any]]) -> int:
    return sum(1 for pr in pull_requests if is_merged(pr))


def count_closed_issues(issues: Iterable[dict[str, Any]]) -> int:
    return sum(1 for issue in issues if issue.get("state") == "closed")


def rank_languages(repos: Iterable[RepositorySnapshot], limit: int = TOP_N) -> list[str]:
    """
    Most frequent primary languages across ``repos``.

    One unit per repository with a language. Counter keeps first-seen order
    and sorted() is stable, so equal tallies stay in first-seen order.

    Example:
        Go, Go, Rust, TypeScript, TypeScript, TypeScript
        -> ["TypeScript", "Go", "Rust"]
    """
    tally = Counter(repo.language for repo in repos if repo.language)
    ranked = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    return [language for language, _ in ranked[:limit]]


def rank_repositories(repos: Iterable[RepositorySnapshot], limit: int = TOP_N) -> list[TopRepository]:
    """Most starred repositories, stable for equal star counts."""
    ranked = sorted(repos, key=lambda repo: repo.stargazers_count, reverse=True)
    return [
        TopRepository(name=repo.name, stars=repo.stargazers_count, language=repo.language)
        for repo in ranked[:limit]
    ]


def build_summary(
    profile: dict[str, Any],
    active_repos: Sequence[RepositorySnapshot],
    commit_fetches: Sequence[CommitFetch],
    pull_requests: Sequence[dict[str, Any]],
    issues: Sequence[dict[str, Any]],
    window: ActivityWindow,
    failures: Sequence[PartialFetchFailure] = (),
) -> StatsSummary:
    """
    Reduce fetched collections into the immutable summary.

    Args:
        profile: Raw ``/users/{username}`` payload
        active_repos: Repositories already filtered to ``window``
        commit_fetches: Per-repository commit results, in repository order
        pull_requests: PR search items
        issues: Issue search items
        window: The year being summarized
        failures: Non-fatal failures from calls other than the commit fan-out

    Returns:
        StatsSummary for ``window.year``
    """
    stats = WrappedStats(
        total_commits=count_commits(commit_fetches),
        total_prs=len(pull_requests),
        merged_prs=count_merged_pull_requests(pull_requests),
        total_issues=len(issues),
        closed_issues=count_closed_issues(issues),
        repos_active=len(active_repos),
        top_languages=rank_languages(active_repos),
        top_repos=rank_repositories(active_repos),
    )

    all_failures = [*collect_failures(commit_fetches), *failures]
    if all_failures:
        logger.info(
            f"Summary for {profile.get('login')} ({window.year}) built with "
            f"{len(all_failures)} skipped source(s)"
        )

    return StatsSummary(
        year=window.year,
        user=Actor.model_validate(profile),
        stats=stats,
        partial_failures=all_failures,
    )
