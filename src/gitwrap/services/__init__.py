"""
Services module for GitWrap.

This module provides business logic services:
- wrapped: Year-in-review aggregation over the GitHub API
- card: Display highlights derived from a summary

Usage:
    from gitwrap.services import get_stats_aggregator

    summary = await get_stats_aggregator().aggregate("octocat", 2025)
"""

from .card import build_highlights
from .wrapped import (
    StatsAggregator,
    close_github_client,
    get_github_client,
    get_stats_aggregator,
)

__all__ = [
    "StatsAggregator",
    "build_highlights",
    "close_github_client",
    "get_github_client",
    "get_stats_aggregator",
]
