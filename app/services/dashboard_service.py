"""
Dashboard Service for TalentScope.

This service provides dashboard-specific data for the API endpoints: it
fetches records from the interview data service, then hands them to the
pure scoring and aggregation functions.
"""
from datetime import date, tzinfo
from typing import List, Optional, Union
from app.config import get_settings
from app.models.analytics_models import InterviewAnalytics, InterviewType, TimeWindow
from app.models.approval_models import ApprovalOutcome, ApprovalRequest
from app.models.scoring_models import InterviewResult, ResultsDashboard
from app.services.analytics_aggregator import build_interview_analytics
from app.services.approval_service import ApprovalService
from app.services.interview_data_client import InterviewDataClient
from app.services.scoring_service import ResultsScoringService
from app.utils.logger import get_logger

logger = get_logger(__name__)


class DashboardService:
    """Service for dashboard data aggregation and formatting."""

    def __init__(
        self,
        client: InterviewDataClient,
        scoring_service: Optional[ResultsScoringService] = None,
        approval_service: Optional[ApprovalService] = None,
        tz: Optional[tzinfo] = None
    ):
        settings = get_settings()
        self.client = client
        self.scoring_service = scoring_service or ResultsScoringService()
        self.approval_service = approval_service or ApprovalService(client)
        self.tz = tz if tz is not None else settings.local_timezone
        self.default_window = TimeWindow.parse(settings.DEFAULT_TIME_WINDOW)
        self.top_results_limit = settings.TOP_RESULTS_LIMIT

    async def get_interview_analytics(
        self,
        user_id: str,
        window: Union[TimeWindow, str, None] = None,
        today: Optional[date] = None
    ) -> InterviewAnalytics:
        """Get trend analytics for the interviews a user created within the window."""
        window = TimeWindow.parse(window) if window else self.default_window
        try:
            behavioral, coding = await self.client.fetch_interview_records(user_id, window, today, self.tz)
            return build_interview_analytics(behavioral, coding, window, today, self.tz)
        except Exception as e:
            logger.error(f"Error getting interview analytics for user {user_id}: {e}")
            raise

    def build_results_dashboard(
        self,
        company_id: str,
        results: List[InterviewResult],
        interview_type: Optional[InterviewType] = None,
        limit: Optional[int] = None
    ) -> ResultsDashboard:
        """Score, filter and rank already fetched results."""
        scored = self.scoring_service.score_results(results)
        scored = self.scoring_service.filter_by_type(scored, interview_type)

        return ResultsDashboard(
            company_id=company_id,
            interview_type=interview_type,
            results=scored,
            top_results=self.scoring_service.rank_results(scored, limit or self.top_results_limit),
            stats=self.scoring_service.calculate_dashboard_stats(scored)
        )

    async def get_results_dashboard(
        self,
        company_id: str,
        interview_type: Optional[InterviewType] = None,
        limit: Optional[int] = None
    ) -> ResultsDashboard:
        """Get scored interview results, top candidates and stats for a company."""
        try:
            results = await self.client.fetch_interview_results(company_id)
            return self.build_results_dashboard(company_id, results, interview_type, limit)
        except Exception as e:
            logger.error(f"Error getting results dashboard for company {company_id}: {e}")
            raise

    async def submit_approval(self, candidate_id: str, request: ApprovalRequest) -> ApprovalOutcome:
        """Apply an approval action to a candidate."""
        try:
            return await self.approval_service.submit(candidate_id, request)
        except Exception as e:
            logger.error(f"Error submitting approval for candidate {candidate_id}: {e}")
            raise
