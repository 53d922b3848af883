"""
Dashboard API endpoints for TalentScope.

This module provides the interview-results dashboard: scored results,
top candidates and headline stats for a company, and the candidate
approval workflow.
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.dependencies import get_dashboard_service
from app.exceptions import ApprovalActionError, CollaboratorError, InvalidInputError
from app.models.analytics_models import InterviewType
from app.models.approval_models import ApprovalOutcome, ApprovalRequest
from app.models.scoring_models import ResultsDashboard
from app.services.dashboard_service import DashboardService
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/results", response_model=ResultsDashboard)
async def get_results_dashboard(
    company_id: str = Query(..., description="Company whose results are shown"),
    interview_type: Optional[InterviewType] = Query(None, description="Only results of this interview type"),
    limit: Optional[int] = Query(None, description="Size of the top results list", ge=1, le=100),
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """
    Get the interview results dashboard.

    Returns every completed result with freshly computed time efficiency
    and composite score, the top results and the dashboard stats.
    """
    try:
        return await dashboard_service.get_results_dashboard(company_id, interview_type, limit)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        ) from e
    except CollaboratorError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to fetch interview results, please retry"
        ) from e
    except Exception as e:
        logger.error(f"Error getting results dashboard for company {company_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to get results dashboard: {str(e)}"
        ) from e


@router.post("/candidates/{candidate_id}/approval", response_model=ApprovalOutcome)
async def submit_approval_action(
    candidate_id: str,
    request: ApprovalRequest,
    dashboard_service: DashboardService = Depends(get_dashboard_service)
):
    """
    Apply an approval action to a candidate.

    Supported actions: approve, reject, next_round, schedule_interview,
    send_feedback and request_documents.
    """
    try:
        return await dashboard_service.submit_approval(candidate_id, request)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        ) from e
    except ApprovalActionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to process approval action"
        ) from e
    except Exception as e:
        logger.error(f"Error processing approval for candidate {candidate_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to process approval action: {str(e)}"
        ) from e
