"""
Analytics API endpoints for TalentScope.

This module provides the interview trend analytics used by the analytics
dashboard: interviews per day, per status, per type and completion rate
per type over a week, month or quarter.
"""
from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.config import get_settings
from app.dependencies import get_dashboard_service
from app.exceptions import CollaboratorError, InvalidInputError
from app.models.analytics_models import AnalyticsRequest, InterviewAnalytics, TimeWindow
from app.services.analytics_aggregator import build_interview_analytics
from app.services.dashboard_service import DashboardService
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/analytics", tags=["analytics"])


@router.post("/interviews/aggregate", response_model=InterviewAnalytics)
async def aggregate_interviews(request: AnalyticsRequest):
    """
    Aggregate supplied interview records.

    Accepts behavioral-origin and coding records (or a mixed list tagged
    by ``kind``) and returns every chart series for the window.
    """
    settings = get_settings()
    behavioral, coding = request.split_records()
    window = TimeWindow.parse(request.window or settings.DEFAULT_TIME_WINDOW)
    try:
        return build_interview_analytics(behavioral, coding, window, request.today, settings.local_timezone)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        ) from e


@router.get("/interviews", response_model=InterviewAnalytics)
async def get_interview_analytics(
    user_id: str = Query(..., description="User whose interviews are analysed"),
    window: Optional[str] = Query(None, description="week, month or quarter"),
    today: Optional[date] = Query(None, description="Override for the last day of the window"),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """
    Get interview analytics.

    Fetches the interviews the user created within the window and returns
    interviews by day, status and type plus completion rate by type.
    """
    try:
        return await dashboard_service.get_interview_analytics(user_id, window, today)
    except CollaboratorError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Interview data is temporarily unavailable, please retry"
        ) from e
    except Exception as e:
        logger.error(f"Error getting interview analytics for user {user_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to get interview analytics: {str(e)}"
        ) from e
