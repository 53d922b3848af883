"""
Unit tests for analytics, scoring and approval models.
"""
import pytest
from datetime import date
from pydantic import ValidationError
from app.models.analytics_models import (
    AnalyticsRequest, BehavioralInterviewRecord, CodingInterviewRecord, TimeWindow
)
from app.models.approval_models import ApprovalRequest
from app.models.scoring_models import InterviewResult, ScoreResultsRequest


class TestTimeWindow:
    """Tests for TimeWindow."""

    @pytest.mark.unit
    def test_days(self):
        """Test window lengths."""
        assert TimeWindow.WEEK.days == 7
        assert TimeWindow.MONTH.days == 30
        assert TimeWindow.QUARTER.days == 90

    @pytest.mark.unit
    def test_parse(self):
        """Test parsing with fallback to a week."""
        assert TimeWindow.parse("Month") == TimeWindow.MONTH
        assert TimeWindow.parse(TimeWindow.QUARTER) == TimeWindow.QUARTER
        assert TimeWindow.parse("fortnight") == TimeWindow.WEEK
        assert TimeWindow.parse(None) == TimeWindow.WEEK


class TestInterviewRecords:
    """Tests for interview record models."""

    @pytest.mark.unit
    def test_camel_case_input(self):
        """Test records accept the camelCase wire format."""
        record = BehavioralInterviewRecord.model_validate({
            "id": 3,
            "createdAt": "2024-03-05T10:00:00",
            "interviewStatus": "completed",
            "interviewType": "combo"
        })
        assert record.kind == "behavioral"
        assert record.interview_type == "combo"

    @pytest.mark.unit
    def test_records_are_immutable(self):
        """Test records cannot be modified after validation."""
        record = CodingInterviewRecord.model_validate({"id": 1, "createdAt": "2024-03-05T10:00:00"})
        with pytest.raises(ValidationError):
            record.interview_status = "completed"

    @pytest.mark.unit
    def test_created_at_required(self):
        """Test records without a creation timestamp are rejected."""
        with pytest.raises(ValidationError):
            CodingInterviewRecord.model_validate({"id": 1})


class TestAnalyticsRequest:
    """Tests for AnalyticsRequest."""

    @pytest.mark.unit
    def test_split_records(self):
        """Test mixed records are split by kind and merged with per-origin lists."""
        request = AnalyticsRequest.model_validate({
            "behavioralRecords": [{"id": 1, "createdAt": "2024-03-05T10:00:00"}],
            "records": [
                {"kind": "coding", "id": 2, "createdAt": "2024-03-05T11:00:00"},
                {"kind": "behavioral", "id": 3, "createdAt": "2024-03-05T12:00:00", "interviewType": "mcq"},
            ],
            "window": "month",
            "today": "2024-03-10"
        })

        behavioral, coding = request.split_records()

        assert [r.id for r in behavioral] == [1, 3]
        assert [r.id for r in coding] == [2]
        assert isinstance(coding[0], CodingInterviewRecord)
        assert request.today == date(2024, 3, 10)

    @pytest.mark.unit
    def test_unknown_kind_rejected(self):
        """Test records with an unknown kind are rejected."""
        with pytest.raises(ValidationError):
            AnalyticsRequest.model_validate({"records": [{"kind": "panel", "id": 1, "createdAt": "2024-03-05T10:00:00"}]})


class TestScoringModels:
    """Tests for scoring request and result models."""

    @pytest.mark.unit
    def test_result_defaults(self):
        """Test missing result fields fall back to defaults."""
        result = InterviewResult.model_validate({"interview": {"id": 1}})
        assert result.interview.candidate_name == "Unknown Candidate"
        assert result.interview.job_position == "Interview"
        assert result.summary.performance_metrics.accuracy == 0.0
        assert result.approval_status is None

    @pytest.mark.unit
    def test_limit_bounds(self):
        """Test the top results limit is bounded."""
        with pytest.raises(ValidationError):
            ScoreResultsRequest(limit=0)
        with pytest.raises(ValidationError):
            ScoreResultsRequest(limit=101)

    @pytest.mark.unit
    def test_unknown_approval_action_rejected(self):
        """Test unsupported approval actions are rejected."""
        with pytest.raises(ValidationError):
            ApprovalRequest.model_validate({"action": "hire"})
