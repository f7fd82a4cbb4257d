"""Analytics aggregation for the demo session dashboard."""

from .services.analytics_service import compute_analytics_snapshot  # noqa: F401
