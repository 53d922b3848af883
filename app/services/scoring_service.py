"""
Results Scoring Service for TalentScope.

Scores completed interview results for the results dashboard: derives
time efficiency and the composite score for every candidate, ranks and
filters the scored results and computes the dashboard headline stats.
"""
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from app.config import get_settings
from app.models.analytics_models import InterviewType
from app.models.approval_models import ApprovalStatus
from app.models.scoring_models import DashboardStats, InterviewResult, ScoredResult
from app.utils.scoring_utils import (
    average_rating, calculate_score_band, composite_score, time_efficiency
)
from app.utils.logger import get_logger

logger = get_logger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _completed_at_key(result: ScoredResult) -> datetime:
    completed_at = result.interview.completed_at
    if completed_at is None:
        return _OLDEST
    if completed_at.tzinfo is None:
        return completed_at.replace(tzinfo=timezone.utc)
    return completed_at


class ResultsScoringService:
    """Service for scoring and summarising interview results."""

    def __init__(self, max_interview_seconds: Optional[float] = None, strict: Optional[bool] = None):
        settings = get_settings()
        self.max_interview_seconds = max_interview_seconds or settings.MAX_INTERVIEW_TIME_SECONDS
        self.strict = settings.STRICT_SCORE_VALIDATION if strict is None else strict

    def score_result(self, result: InterviewResult) -> ScoredResult:
        """
        Score one interview result.

        Time efficiency and average rating are always recomputed from the
        elapsed time, accuracy and completion rate; values supplied with
        the result are ignored.
        """
        metrics = result.summary.performance_metrics
        efficiency = time_efficiency(
            result.summary.total_time_spent,
            self.max_interview_seconds,
            strict=self.strict
        )
        score = composite_score(
            metrics.accuracy,
            efficiency,
            metrics.completion_rate,
            strict=self.strict
        )

        derived_metrics = metrics.model_copy(update={
            "time_efficiency": efficiency,
            "average_rating": average_rating(score),
        })
        summary = result.summary.model_copy(update={"performance_metrics": derived_metrics})

        return ScoredResult(
            interview=result.interview,
            summary=summary,
            approval_status=result.approval_status or ApprovalStatus.PENDING,
            composite_score=score,
            score_band=calculate_score_band(score)
        )

    def score_results(self, results: Iterable[InterviewResult]) -> List[ScoredResult]:
        """Score every result, keeping the input order."""
        scored = [self.score_result(result) for result in results]
        logger.debug(f"Scored {len(scored)} interview results")
        return scored

    def rank_results(self, scored: Iterable[ScoredResult], limit: Optional[int] = None) -> List[ScoredResult]:
        """Highest composite score first; ties go to the most recently completed interview."""
        ranked = sorted(
            scored,
            key=lambda result: (result.composite_score, _completed_at_key(result)),
            reverse=True
        )
        return ranked[:limit] if limit is not None else ranked

    def filter_by_type(
        self,
        scored: Iterable[ScoredResult],
        interview_type: Optional[InterviewType]
    ) -> List[ScoredResult]:
        """Keep only results of one interview type; no type keeps everything."""
        if interview_type is None:
            return list(scored)
        return [result for result in scored if result.interview.interview_type == interview_type]

    def calculate_dashboard_stats(self, scored: List[ScoredResult]) -> DashboardStats:
        """Headline numbers for the results dashboard."""
        if not scored:
            return DashboardStats()

        total = len(scored)
        mean_rating = sum(r.summary.performance_metrics.average_rating for r in scored) / total
        mean_completion = sum(r.summary.performance_metrics.completion_rate for r in scored) / total

        return DashboardStats(
            total_interviews=total,
            average_score=mean_rating * 20,
            completion_rate=mean_completion,
            total_candidates=len({r.interview.candidate_name for r in scored})
        )
