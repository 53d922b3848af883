"""
Dependency injection utilities for the TalentScope application.
"""

from fastapi import Depends
from app.services.dashboard_service import DashboardService
from app.services.interview_data_client import InterviewDataClient
from app.services.scoring_service import ResultsScoringService
from app.utils.logger import get_logger

logger = get_logger(__name__)

def get_interview_data_client() -> InterviewDataClient:
    """Client for the external interview data service."""
    return InterviewDataClient()

def get_scoring_service() -> ResultsScoringService:
    """Results scoring service configured from settings."""
    return ResultsScoringService()

def get_dashboard_service(
    client: InterviewDataClient = Depends(get_interview_data_client),
    scoring_service: ResultsScoringService = Depends(get_scoring_service)
) -> DashboardService:
    """Dependency to get dashboard service."""
    return DashboardService(client, scoring_service=scoring_service)
