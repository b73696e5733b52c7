"""Outbound data providers."""

from .github import GitHubClient, GitHubProvider

__all__ = ["GitHubClient", "GitHubProvider"]
