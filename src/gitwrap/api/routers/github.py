"""
GitHub router - serves year-in-review data for the wrapped card.

Endpoints:
- GET /api/github?username=&year= - {user, stats} summary
- GET /api/github/card?username=&year= - summary plus card highlights

Errors follow the {"error": message} shape:
- 400 Username is required / Invalid year
- 404 User not found
- 500 GitHub token not configured / Failed to fetch GitHub data
"""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Query

from ...core.errors import (
    ActorNotFound,
    InvalidYear,
    MissingUsername,
    ProviderError,
    Unauthenticated,
)
from ...core.models import StatsSummary
from ...services.card import build_highlights
from ...services.wrapped import StatsAggregator
from ..dependencies import AggregatorDependency
from ..errors import ConfigurationError, NotFoundError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()

UsernameQuery = Annotated[str | None, Query(description="GitHub login to summarize")]
YearQuery = Annotated[int | None, Query(description="Calendar year (defaults to the configured year)")]


@router.get("")
async def get_wrapped(
    aggregator: AggregatorDependency,
    username: UsernameQuery = None,
    year: YearQuery = None,
) -> dict[str, Any]:
    """
    Get the year-in-review summary for a GitHub user.

    Example:
        GET /api/github?username=octocat
        GET /api/github?username=octocat&year=2024
    """
    summary = await _summarize(aggregator, username, year)
    return summary.to_payload()


@router.get("/card")
async def get_wrapped_card(
    aggregator: AggregatorDependency,
    username: UsernameQuery = None,
    year: YearQuery = None,
) -> dict[str, Any]:
    """Get the summary together with the badges shown on the shareable card."""
    summary = await _summarize(aggregator, username, year)
    payload = summary.to_payload()
    payload["card"] = build_highlights(summary).model_dump(by_alias=True)
    return payload


async def _summarize(
    aggregator: StatsAggregator,
    username: str | None,
    year: int | None,
) -> StatsSummary:
    """Run the aggregation and translate domain errors to API errors."""
    try:
        return await aggregator.aggregate(username, year)
    except (MissingUsername, InvalidYear) as e:
        raise ValidationError(e.message)
    except Unauthenticated as e:
        logger.error("GitHub token not configured")
        raise ConfigurationError(e.message)
    except ActorNotFound as e:
        raise NotFoundError(e.message)
    except ProviderError as e:
        logger.error(f"Error fetching GitHub data for {username}: {e.message}")
        raise UpstreamError()
    except Exception as e:
        logger.error(f"Error fetching GitHub data for {username}: {e}", exc_info=True)
        raise UpstreamError()
