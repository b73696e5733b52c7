"""
Card highlights derived from a year-in-review summary.

The shareable card shows a percentile-style rank and a "power level"
badge, both bucketed on the commit total.
"""

from ..core.models import CardHighlights, StatsSummary

# (minimum commits, label), highest threshold first
RANK_TIERS: list[tuple[int, str]] = [
    (5000, "Top 0.5%"),
    (2000, "Top 1%"),
    (1000, "Top 2%"),
    (500, "Top 5%"),
    (200, "Top 20%"),
    (50, "Top 50%"),
    (0, "Top 80%"),
]

POWER_LEVELS: list[tuple[int, str, str]] = [
    (9000, "God Mode", "🪐"),
    (4000, "Super Saiyan", "🔥💥"),
    (2000, "Sage Mode", "🌀"),
    (1000, "Elite Class", "⚡"),
    (500, "Ninja", "🌪️"),
    (100, "Adventurer", "🛡️"),
    (0, "Rookie", "🌱"),
]


def commit_rank(commits: int) -> str:
    for minimum, label in RANK_TIERS:
        if commits >= minimum:
            return label
    return RANK_TIERS[-1][1]


def power_level(commits: int) -> tuple[str, str]:
    """Return (label, emoji) for a commit total."""
    for minimum, label, emoji in POWER_LEVELS:
        if commits >= minimum:
            return label, emoji
    return POWER_LEVELS[-1][1], POWER_LEVELS[-1][2]


def build_highlights(summary: StatsSummary) -> CardHighlights:
    stats = summary.stats
    level, emoji = power_level(stats.total_commits)
    return CardHighlights(
        year=summary.year,
        rank=commit_rank(stats.total_commits),
        power_level=level,
        power_level_emoji=emoji,
        total_stars=sum(repo.stars for repo in stats.top_repos),
        top_language=stats.top_languages[0] if stats.top_languages else "N/A",
    )
