# Models package for Pydantic schemas

from .analytics_models import (
    InterviewStatus, InterviewType, TimeWindow, BehavioralInterviewRecord,
    CodingInterviewRecord, InterviewAnalytics
)
from .approval_models import ApprovalAction, ApprovalStatus, ApprovalRequest, ApprovalOutcome
from .scoring_models import InterviewResult, ScoredResult, ResultsDashboard, ScoreBand

__all__ = [
    "InterviewStatus", "InterviewType", "TimeWindow", "BehavioralInterviewRecord",
    "CodingInterviewRecord", "InterviewAnalytics", "ApprovalAction", "ApprovalStatus",
    "ApprovalRequest", "ApprovalOutcome", "InterviewResult", "ScoredResult",
    "ResultsDashboard", "ScoreBand"
]
