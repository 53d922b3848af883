"""
Interview Result Scoring Models

This module defines Pydantic models for the interview-results dashboard:
the result records supplied by the results service, the derived
performance metrics, and the scored and summarised views built from them.
"""
from typing import List, Optional, Union
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from app.models.analytics_models import InterviewType
from app.models.approval_models import ApprovalStatus


class ScoreBand(str, Enum):
    """Display tier of a composite score."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class PerformanceMetrics(BaseModel):
    """Per-interview performance metrics.

    ``accuracy`` and ``completion_rate`` come from the result computation
    step; ``time_efficiency`` and ``average_rating`` are recomputed by the
    scoring service every time a result is scored.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    accuracy: float = Field(0.0, description="Accuracy on a 0-10 scale")
    completion_rate: float = Field(0.0, description="Answered questions percentage (0-100)")
    time_efficiency: float = Field(0.0, description="Unused time budget percentage (0-100)")
    average_rating: float = Field(0.0, description="Composite score on a 0-5 scale")


class InterviewSummary(BaseModel):
    """Aggregate numbers for one completed interview."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_questions: int = Field(0, ge=0, description="Questions asked")
    total_answered: int = Field(0, ge=0, description="Questions answered")
    total_time_spent: float = Field(0.0, description="Elapsed interview time in seconds")
    average_time_per_question: float = Field(0.0, description="Seconds per question")
    performance_metrics: PerformanceMetrics = Field(default_factory=PerformanceMetrics)


class InterviewInfo(BaseModel):
    """Identity of the interview and candidate behind a result."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Union[int, str] = Field(..., description="Interview history identifier")
    candidate_name: str = Field("Unknown Candidate", description="Candidate display name")
    candidate_email: Optional[str] = Field(None, description="Candidate e-mail")
    candidate_id: Optional[str] = Field(None, description="Candidate identifier used by the approval endpoint")
    campaign_id: Optional[str] = Field(None, description="Job campaign identifier")
    job_position: str = Field("Interview", description="Job title")
    interview_type: Optional[InterviewType] = Field(None, description="Interview format")
    completed_at: Optional[datetime] = Field(None, description="Completion timestamp")
    duration: float = Field(0.0, description="Interview duration in seconds")

    @field_validator("interview_type", mode="before")
    @classmethod
    def normalize_interview_type(cls, value):
        """Match types case-insensitively; unknown or legacy types become None."""
        if isinstance(value, InterviewType) or value is None:
            return value
        if isinstance(value, str):
            try:
                return InterviewType(value.strip().lower())
            except ValueError:
                return None
        return None


class InterviewResult(BaseModel):
    """Completed interview result as returned by the results service."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    interview: InterviewInfo
    summary: InterviewSummary = Field(default_factory=InterviewSummary)
    approval_status: Optional[ApprovalStatus] = Field(None, description="Current review status")


class ScoredResult(InterviewResult):
    """Interview result with freshly derived metrics and composite score."""
    approval_status: ApprovalStatus = Field(ApprovalStatus.PENDING, description="Current review status")
    composite_score: float = Field(..., description="Weighted composite score (0-100)")
    score_band: ScoreBand = Field(..., description="Display tier of the composite score")


class DashboardStats(BaseModel):
    """Headline numbers of the results dashboard."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_interviews: int = Field(0, ge=0, description="Number of scored results")
    average_score: float = Field(0.0, description="Mean composite score (0-100)")
    completion_rate: float = Field(0.0, description="Mean completion rate (0-100)")
    total_candidates: int = Field(0, ge=0, description="Distinct candidate names")


class ResultsDashboard(BaseModel):
    """Scored results, rankings and stats for one company."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    company_id: Optional[str] = Field(None, description="Company the results belong to")
    interview_type: Optional[InterviewType] = Field(None, description="Type filter applied to the results")
    results: List[ScoredResult] = Field(default_factory=list)
    top_results: List[ScoredResult] = Field(default_factory=list, description="Highest composite scores first")
    stats: DashboardStats = Field(default_factory=DashboardStats)


class TimeEfficiencyRequest(BaseModel):
    """Request body for the time-efficiency calculator."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    actual_seconds: float = Field(..., description="Elapsed interview time in seconds")
    max_seconds: Optional[float] = Field(None, description="Time budget; defaults to the configured budget")


class CompositeScoreRequest(BaseModel):
    """Request body for the composite score calculator."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    accuracy: float = Field(..., description="Accuracy on a 0-10 scale")
    time_efficiency: float = Field(..., description="Time efficiency (0-100)")
    completion_rate: float = Field(..., description="Completion rate (0-100)")
    strict: Optional[bool] = Field(None, description="Reject out-of-range input; defaults to configuration")


class ScoreResponse(BaseModel):
    """A single computed score."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score: float = Field(..., description="Computed value (0-100)")
    average_rating: Optional[float] = Field(None, description="Composite on a 0-5 scale")
    score_band: Optional[ScoreBand] = Field(None, description="Display tier")


class ScoreResultsRequest(BaseModel):
    """Batch of results to score without fetching them."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    results: List[InterviewResult] = Field(default_factory=list)
    limit: int = Field(10, ge=1, le=100, description="Size of the top results list")
