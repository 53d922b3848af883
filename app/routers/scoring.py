"""
Scoring API endpoints for TalentScope.

Stateless calculators behind the interview-results dashboard: time
efficiency, composite score, and scoring a batch of supplied results.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from app.config import get_settings
from app.dependencies import get_scoring_service
from app.exceptions import InvalidInputError
from app.models.scoring_models import (
    CompositeScoreRequest, ResultsDashboard, ScoreResponse, ScoreResultsRequest,
    TimeEfficiencyRequest
)
from app.services.scoring_service import ResultsScoringService
from app.utils.scoring_utils import (
    average_rating, calculate_score_band, composite_score, time_efficiency
)
from app.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/scoring", tags=["scoring"])


@router.post("/time-efficiency", response_model=ScoreResponse)
async def calculate_time_efficiency(request: TimeEfficiencyRequest):
    """
    Calculate time efficiency.

    Returns the percentage of the time budget left unused; overruns score 0.
    """
    settings = get_settings()
    max_seconds = request.max_seconds if request.max_seconds is not None else settings.MAX_INTERVIEW_TIME_SECONDS
    try:
        score = time_efficiency(request.actual_seconds, max_seconds, strict=settings.STRICT_SCORE_VALIDATION)
        return ScoreResponse(score=score)
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        ) from e


@router.post("/composite", response_model=ScoreResponse)
async def calculate_composite_score(request: CompositeScoreRequest):
    """
    Calculate the weighted composite score.

    Accuracy (0-10), time efficiency (0-100) and completion rate (0-100)
    are weighted 0.5 / 0.3 / 0.2 and returned as a percentage.
    """
    settings = get_settings()
    strict = settings.STRICT_SCORE_VALIDATION if request.strict is None else request.strict
    try:
        score = composite_score(
            request.accuracy,
            request.time_efficiency,
            request.completion_rate,
            strict=strict
        )
        return ScoreResponse(
            score=score,
            average_rating=average_rating(score),
            score_band=calculate_score_band(score)
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        ) from e


@router.post("/results", response_model=ResultsDashboard)
async def score_results(
    request: ScoreResultsRequest,
    scoring_service: ResultsScoringService = Depends(get_scoring_service)
):
    """
    Score a batch of interview results.

    Returns the scored results, the top results by composite score and
    the dashboard stats.
    """
    try:
        scored = scoring_service.score_results(request.results)
        return ResultsDashboard(
            results=scored,
            top_results=scoring_service.rank_results(scored, request.limit),
            stats=scoring_service.calculate_dashboard_stats(scored)
        )
    except InvalidInputError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        ) from e
    except Exception as e:
        logger.error(f"Error scoring interview results: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to score interview results: {str(e)}"
        ) from e
