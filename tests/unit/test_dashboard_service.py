"""
Unit tests for Dashboard Service.

Tests the dashboard service orchestration with a mocked interview data client.
"""
import pytest
from datetime import date, timezone
from app.exceptions import RecordsFetchError
from app.models.analytics_models import InterviewType, TimeWindow
from app.models.approval_models import ApprovalAction, ApprovalRequest, ApprovalStatus
from app.services.dashboard_service import DashboardService
from app.services.scoring_service import ResultsScoringService


class TestDashboardService:
    """Test cases for DashboardService."""

    @pytest.fixture
    def service(self, mock_data_client):
        return DashboardService(
            mock_data_client,
            scoring_service=ResultsScoringService(max_interview_seconds=600, strict=False),
            tz=timezone.utc
        )

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_interview_analytics(self, service, mock_data_client, behavioral_records, coding_records, today):
        """Test analytics are built from fetched records."""
        mock_data_client.fetch_interview_records.return_value = (behavioral_records, coding_records)

        analytics = await service.get_interview_analytics("user-1", "week", today)

        mock_data_client.fetch_interview_records.assert_awaited_once_with("user-1", TimeWindow.WEEK, today, timezone.utc)
        assert analytics.total_interviews == 4
        assert analytics.end_date == today
        assert {b.label: b.value for b in analytics.completion_rate_by_type}["Behavioral"] == 67

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_interview_analytics_default_window(self, service, mock_data_client, today):
        """Test a missing window uses the configured default."""
        analytics = await service.get_interview_analytics("user-1", None, today)
        assert analytics.window == TimeWindow.WEEK
        assert len(analytics.interviews_by_day) == 7

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_interview_analytics_fetch_failure(self, service, mock_data_client, today):
        """Test fetch failures propagate unchanged."""
        mock_data_client.fetch_interview_records.side_effect = RecordsFetchError("Interview data service returned 503")
        with pytest.raises(RecordsFetchError):
            await service.get_interview_analytics("user-1", "month", today)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_results_dashboard(self, service, mock_data_client, sample_results):
        """Test results are scored, ranked and summarised."""
        mock_data_client.fetch_interview_results.return_value = sample_results

        dashboard = await service.get_results_dashboard("company-1")

        mock_data_client.fetch_interview_results.assert_awaited_once_with("company-1")
        assert dashboard.company_id == "company-1"
        assert [r.interview.id for r in dashboard.results] == [1, 2, 3]
        assert [r.interview.id for r in dashboard.top_results] == [2, 1, 3]
        assert dashboard.stats.total_interviews == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_results_dashboard_type_filter_and_limit(self, service, mock_data_client, sample_results):
        """Test type filter applies to results, ranking and stats."""
        mock_data_client.fetch_interview_results.return_value = sample_results

        dashboard = await service.get_results_dashboard("company-1", InterviewType.MCQ, limit=1)

        assert dashboard.interview_type == InterviewType.MCQ
        assert [r.interview.id for r in dashboard.results] == [3]
        assert len(dashboard.top_results) == 1
        assert dashboard.stats.total_candidates == 1

    @pytest.mark.unit
    def test_build_results_dashboard_empty(self, service):
        """Test an empty result set."""
        dashboard = service.build_results_dashboard("company-1", [])
        assert dashboard.results == []
        assert dashboard.top_results == []
        assert dashboard.stats.total_interviews == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_submit_approval(self, service, mock_data_client):
        """Test approval actions go through the approval service."""
        outcome = await service.submit_approval("cand-1", ApprovalRequest(action=ApprovalAction.REQUEST_DOCUMENTS))

        mock_data_client.submit_approval.assert_awaited_once()
        assert outcome.approval_status == ApprovalStatus.DOCUMENTS_REQUESTED
        assert outcome.message == "Document request sent to candidate!"
