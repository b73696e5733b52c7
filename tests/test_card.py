"""
Tests for card highlight derivation.
"""

import pytest

from conftest import make_profile
from gitwrap.core.models import Actor, StatsSummary, TopRepository, WrappedStats
from gitwrap.services.card import build_highlights, commit_rank, power_level


@pytest.mark.parametrize(
    "commits, expected",
    [
        (0, "Top 80%"),
        (49, "Top 80%"),
        (50, "Top 50%"),
        (200, "Top 20%"),
        (500, "Top 5%"),
        (999, "Top 5%"),
        (1000, "Top 2%"),
        (2000, "Top 1%"),
        (5000, "Top 0.5%"),
    ],
)
def test_commit_rank(commits, expected):
    assert commit_rank(commits) == expected


@pytest.mark.parametrize(
    "commits, expected",
    [
        (0, "Rookie"),
        (100, "Adventurer"),
        (500, "Ninja"),
        (1000, "Elite Class"),
        (2000, "Sage Mode"),
        (4000, "Super Saiyan"),
        (8999, "Super Saiyan"),
        (9000, "God Mode"),
    ],
)
def test_power_level(commits, expected):
    assert power_level(commits)[0] == expected


def _summary(**stats):
    return StatsSummary(
        year=2025,
        user=Actor.model_validate(make_profile()),
        stats=WrappedStats(**stats),
    )


def test_highlights():
    summary = _summary(
        total_commits=1234,
        top_languages=["Rust", "Go"],
        top_repos=[
            TopRepository(name="a", stars=10, language="Rust"),
            TopRepository(name="b", stars=5, language=None),
        ],
    )
    card = build_highlights(summary)
    assert card.rank == "Top 2%"
    assert card.power_level == "Elite Class"
    assert card.power_level_emoji == "⚡"
    assert card.total_stars == 15
    assert card.top_language == "Rust"
    assert card.year == 2025


def test_highlights_without_languages():
    card = build_highlights(_summary())
    assert card.top_language == "N/A"
    assert card.total_stars == 0
