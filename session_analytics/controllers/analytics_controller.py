"""Controllers for analytics endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from ..models.analytics import AnalyticsSnapshot
from ..models.analytics_request import AnalyticsRequest
from ..services.analytics_service import AnalyticsService, get_analytics_service
from ..utils.error_handler import AnalyticsError

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.post("/snapshot", response_model=AnalyticsSnapshot)
async def snapshot_endpoint(
    request: AnalyticsRequest,
    service: AnalyticsService = Depends(get_analytics_service),
) -> AnalyticsSnapshot:
    """Compute dashboard analytics for the posted sessions and users.

    Both collections may be sent as plain arrays or wrapped in a
    paginated ``{"data": [...]}`` envelope.  The response uses the
    camelCase keys the dashboard expects.
    """
    try:
        logger.info(
            "Received snapshot request: sessions={} users={}",
            len(request.sessions),
            len(request.users),
        )
        return service.compute_snapshot(request.sessions, request.users, request.now)
    except AnalyticsError as exc:
        logger.error("AnalyticsError: {}", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    except Exception as exc:
        logger.exception("Unhandled exception during snapshot computation")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc
