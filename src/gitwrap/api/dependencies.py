"""
Dependency injection for API endpoints.

Routes receive a StatsAggregator through FastAPI's dependency system so
tests can swap in one backed by a fake GitHub provider:

    app.dependency_overrides[get_aggregator] = lambda: StatsAggregator(fake)
"""

from typing import Annotated

from fastapi import Depends

from ..services.wrapped import StatsAggregator, get_stats_aggregator


def get_aggregator() -> StatsAggregator:
    """Dependency that provides the year-in-review aggregator."""
    return get_stats_aggregator()


AggregatorDependency = Annotated[StatsAggregator, Depends(get_aggregator)]
