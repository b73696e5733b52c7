"""
Statistics aggregators.

These aggregators handle the conversion from raw GitHub responses to the
year-in-review summary. They never perform I/O.
"""

from .wrapped import (
    build_summary,
    count_commits,
    filter_active_repositories,
    parse_repositories,
    rank_languages,
    rank_repositories,
)

__all__ = [
    "build_summary",
    "count_commits",
    "filter_active_repositories",
    "parse_repositories",
    "rank_languages",
    "rank_repositories",
]
