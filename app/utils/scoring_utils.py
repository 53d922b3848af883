"""
Scoring Utilities for Interview Results

This module provides the pure calculations behind the results dashboard:
time efficiency against a time budget, the weighted composite score and
its display tier. Values are rounded half-up to one decimal so scores
match what the dashboard has always shown.
"""
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict
from app.exceptions import ConfigurationError, InvalidInputError
from app.models.scoring_models import ScoreBand

# Composite weights; must sum to 1.0
SCORING_WEIGHTS: Dict[str, float] = {
    "accuracy": 0.5,
    "time_efficiency": 0.3,
    "completion_rate": 0.2,
}

if not math.isclose(sum(SCORING_WEIGHTS.values()), 1.0):
    raise ConfigurationError(
        "Scoring weights must sum to 1.0",
        context={"weights": SCORING_WEIGHTS}
    )

# Common 0-5 scale the three inputs are normalised to
RATING_SCALE = 5.0


def round_half_up(value: float, places: int = 0) -> float:
    """
    Round a float half away from zero at the given number of decimals.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def _check_range(name: str, value: float, low: float, high: float) -> None:
    if not math.isfinite(value) or value < low or value > high:
        raise InvalidInputError(
            f"{name} must be between {low:g} and {high:g}",
            context={"field": name, "value": value}
        )


def time_efficiency(actual_seconds: float, max_seconds: float, strict: bool = False) -> float:
    """
    Convert elapsed time into the percentage of the time budget left unused.

    Overruns are scored as if exactly the budget was used, so the result
    never goes below 0. Instant completion scores 100.

    Args:
        actual_seconds: Elapsed interview time in seconds
        max_seconds: Time budget in seconds, must be greater than 0
        strict: Reject negative elapsed time instead of clamping

    Returns:
        Efficiency between 0.0 and 100.0, one decimal
    """
    if not max_seconds > 0:
        raise InvalidInputError(
            "max_seconds must be greater than 0",
            context={"max_seconds": max_seconds}
        )
    if strict and not actual_seconds >= 0:
        raise InvalidInputError(
            "actual_seconds must not be negative",
            context={"actual_seconds": actual_seconds}
        )

    effective_seconds = min(actual_seconds, max_seconds)
    efficiency = (max_seconds - effective_seconds) / max_seconds * 100
    return max(0.0, min(100.0, round_half_up(efficiency, 1)))


def composite_score(
    accuracy: float,
    time_efficiency: float,
    completion_rate: float,
    strict: bool = False
) -> float:
    """
    Combine accuracy, time efficiency and completion into one percentage.

    Each input is normalised to a 0-5 scale, weighted by SCORING_WEIGHTS
    and the weighted rating is rescaled to 0-100. Out-of-range input is
    passed through the arithmetic unless ``strict`` is set.

    Args:
        accuracy: Accuracy on a 0-10 scale
        time_efficiency: Time efficiency (0-100)
        completion_rate: Completion rate (0-100)
        strict: Raise InvalidInputError for out-of-range input

    Returns:
        Composite score, one decimal
    """
    if strict:
        _check_range("accuracy", accuracy, 0.0, 10.0)
        _check_range("time_efficiency", time_efficiency, 0.0, 100.0)
        _check_range("completion_rate", completion_rate, 0.0, 100.0)

    normalized_accuracy = accuracy / 10 * RATING_SCALE
    normalized_time_efficiency = time_efficiency / 100 * RATING_SCALE
    normalized_completion_rate = completion_rate / 100 * RATING_SCALE

    rating = (
        SCORING_WEIGHTS["accuracy"] * normalized_accuracy +
        SCORING_WEIGHTS["time_efficiency"] * normalized_time_efficiency +
        SCORING_WEIGHTS["completion_rate"] * normalized_completion_rate
    )
    return round_half_up(rating * 100 / RATING_SCALE, 1)


def average_rating(score: float) -> float:
    """Express a 0-100 composite score on the 0-5 rating scale."""
    return score * RATING_SCALE / 100


def calculate_score_band(score: float) -> ScoreBand:
    """
    Calculate the display tier for a composite score.

    Args:
        score: Composite score out of 100

    Returns:
        ScoreBand enum value
    """
    if score >= 80:
        return ScoreBand.EXCELLENT
    elif score >= 60:
        return ScoreBand.GOOD
    elif score >= 40:
        return ScoreBand.FAIR
    else:
        return ScoreBand.POOR
