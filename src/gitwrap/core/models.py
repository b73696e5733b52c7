"""
Pydantic models for GitWrap entities.

These models are used for:
- Validating the raw GitHub payloads the aggregation consumes
- The immutable summary handed back to the API layer
- API response serialization (camelCase keys on the stats block)
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import PartialFetchFailure
from .types import parse_timestamp


# =============================================================================
# Provider Entities
# =============================================================================


class Actor(BaseModel):
    """The GitHub user being profiled."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    login: str
    name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0

    @model_validator(mode="before")
    @classmethod
    def _default_name(cls, data: Any) -> Any:
        # Display name falls back to the login when null
        if isinstance(data, dict) and data.get("name") is None:
            data = {**data, "name": data.get("login")}
        return data


class RepositorySnapshot(BaseModel):
    """One repository as listed by the provider at fetch time."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str
    full_name: str
    language: Optional[str] = None
    stargazers_count: int = 0
    pushed_at: Optional[datetime] = None

    @field_validator("pushed_at", mode="before")
    @classmethod
    def _parse_pushed_at(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_timestamp(value)
        return value


class CommitFetch(BaseModel):
    """Outcome of fetching one repository's commits: commits or an error, never both."""

    model_config = ConfigDict(frozen=True)

    repository: str
    commits: Optional[list[dict[str, Any]]] = None
    error: Optional[PartialFetchFailure] = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "CommitFetch":
        if (self.commits is None) == (self.error is None):
            raise ValueError("CommitFetch needs exactly one of commits or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def succeeded(cls, repository: str, commits: list[dict[str, Any]]) -> "CommitFetch":
        return cls(repository=repository, commits=commits)

    @classmethod
    def failed(cls, repository: str, failure: PartialFetchFailure) -> "CommitFetch":
        return cls(repository=repository, error=failure)


# =============================================================================
# Summary
# =============================================================================


class TopRepository(BaseModel):
    """Repository entry in the most-starred ranking."""

    model_config = ConfigDict(frozen=True)

    name: str
    stars: int
    language: Optional[str] = None


class WrappedStats(BaseModel):
    """Year-in-review counts, serialized with the camelCase keys the card reads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_commits: int = Field(default=0, ge=0, alias="totalCommits")
    total_prs: int = Field(default=0, ge=0, alias="totalPRs")
    merged_prs: int = Field(default=0, ge=0, alias="mergedPRs")
    total_issues: int = Field(default=0, ge=0, alias="totalIssues")
    closed_issues: int = Field(default=0, ge=0, alias="closedIssues")
    repos_active: int = Field(default=0, ge=0, alias="reposActive")
    top_languages: list[str] = Field(default_factory=list, max_length=5, alias="topLanguages")
    top_repos: list[TopRepository] = Field(default_factory=list, max_length=5, alias="topRepos")

    @model_validator(mode="after")
    def _subsets(self) -> "WrappedStats":
        if self.merged_prs > self.total_prs:
            raise ValueError("mergedPRs cannot exceed totalPRs")
        if self.closed_issues > self.total_issues:
            raise ValueError("closedIssues cannot exceed totalIssues")
        return self


class StatsSummary(BaseModel):
    """Aggregation output. Built once per request and never mutated."""

    model_config = ConfigDict(frozen=True)

    year: int
    user: Actor
    stats: WrappedStats
    partial_failures: list[PartialFetchFailure] = Field(default_factory=list, exclude=True)

    def to_payload(self) -> dict[str, Any]:
        """The ``{user, stats}`` document returned by ``/api/github``."""
        return {
            "user": self.user.model_dump(),
            "stats": self.stats.model_dump(by_alias=True),
        }


class CardHighlights(BaseModel):
    """Display badges derived from a summary for the shareable card."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    year: int
    rank: str
    power_level: str = Field(alias="powerLevel")
    power_level_emoji: str = Field(alias="powerLevelEmoji")
    total_stars: int = Field(alias="totalStars")
    top_language: str = Field(alias="topLanguage")
