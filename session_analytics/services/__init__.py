"""Analytics calculators and the service that combines them."""

from .analytics_service import (  # noqa: F401
    AnalyticsService,
    compute_analytics_snapshot,
    get_analytics_service,
)
