"""
Interview Analytics Aggregation for TalentScope.

Pure aggregations behind the analytics dashboard charts: interviews per
calendar day over a lookback window, per status, per interview type, and
completion rate per interview type. Every function works on records that
were already fetched; nothing here performs I/O or keeps state.
"""
from collections import Counter
from datetime import date, datetime, timedelta, tzinfo
from itertools import chain
from typing import Dict, Iterable, List, Optional, Tuple, Union
from app.models.analytics_models import (
    BehavioralInterviewRecord, CodingInterviewRecord, DayBucket,
    InterviewAnalytics, InterviewStatus, InterviewType, LabeledValue,
    TimeWindow
)
from app.utils.scoring_utils import round_half_up
from app.utils.logger import get_logger

logger = get_logger(__name__)

AnyRecord = Union[BehavioralInterviewRecord, CodingInterviewRecord]

DAY_LABEL_FORMAT = "%b %d"

STATUS_LABELS: List[Tuple[InterviewStatus, str]] = [
    (InterviewStatus.SCHEDULED, "Scheduled"),
    (InterviewStatus.COMPLETED, "Completed"),
    (InterviewStatus.NO_SHOW, "No-show"),
    (InterviewStatus.DRAFT, "Draft"),
]

TYPE_LABELS: List[Tuple[InterviewType, str]] = [
    (InterviewType.BEHAVIORAL, "Behavioral"),
    (InterviewType.MCQ, "MCQ"),
    (InterviewType.COMBO, "Combo"),
    (InterviewType.CODING, "Coding"),
]

# interview_type values stored on behavioral-origin records
_BEHAVIORAL_TABLE_TYPES = {
    "behavioral": InterviewType.BEHAVIORAL,
    "mcq": InterviewType.MCQ,
    "combo": InterviewType.COMBO,
}


def local_today(tz: Optional[tzinfo] = None) -> date:
    """Current calendar day in ``tz``, or in the system local zone."""
    if tz is None:
        return date.today()
    return datetime.now(tz).date()


def to_local_date(timestamp: datetime, tz: Optional[tzinfo] = None) -> date:
    """
    Map a creation timestamp to the caller's calendar day.

    Naive timestamps are taken as already local. Aware timestamps are
    converted to ``tz`` (system local zone when None) first.
    """
    if timestamp.tzinfo is None:
        return timestamp.date()
    return timestamp.astimezone(tz).date()


def window_days(
    window: Union[TimeWindow, str, None],
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None
) -> List[date]:
    """Calendar days of the window, oldest first, ending with today."""
    window = TimeWindow.parse(window)
    today = today or local_today(tz)
    return [today - timedelta(days=offset) for offset in range(window.days - 1, -1, -1)]


def normalize_status(record: AnyRecord) -> Optional[InterviewStatus]:
    """
    Normalise a record's status for counting.

    Missing or empty status counts as draft; the comparison is
    case-insensitive. Unrecognised values return None.
    """
    raw_status = record.interview_status
    if not raw_status:
        return InterviewStatus.DRAFT
    try:
        return InterviewStatus(raw_status.lower())
    except ValueError:
        return None


def classify_type(record: AnyRecord) -> Optional[InterviewType]:
    """
    Interview type a record is charted under.

    Coding records are always Coding. Behavioral-origin records use their
    ``interview_type``, with a missing type counted as Behavioral; values
    the behavioral table does not store return None.
    """
    if isinstance(record, CodingInterviewRecord):
        return InterviewType.CODING
    if not record.interview_type:
        return InterviewType.BEHAVIORAL
    return _BEHAVIORAL_TABLE_TYPES.get(record.interview_type)


def bucket_by_day(
    behavioral_records: Iterable[AnyRecord],
    coding_records: Iterable[AnyRecord],
    window: Union[TimeWindow, str, None] = TimeWindow.WEEK,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None
) -> List[DayBucket]:
    """
    Count interviews per calendar day over the window.

    Every day of the window appears exactly once, oldest first, including
    days without activity. Records created outside the window are dropped.
    """
    days = window_days(window, today, tz)
    counts: Dict[date, Dict[str, int]] = {day: {"behavioral": 0, "coding": 0} for day in days}

    dropped = 0
    for record in chain(behavioral_records, coding_records):
        day_counts = counts.get(to_local_date(record.created_at, tz))
        if day_counts is None:
            dropped += 1
            continue
        day_counts[record.kind] += 1

    if dropped:
        logger.debug(f"Dropped {dropped} records outside the {len(days)}-day window")

    return [
        DayBucket(
            date=day,
            label=day.strftime(DAY_LABEL_FORMAT),
            behavioral_count=counts[day]["behavioral"],
            coding_count=counts[day]["coding"]
        )
        for day in days
    ]


def bucket_by_status(
    behavioral_records: Iterable[AnyRecord],
    coding_records: Iterable[AnyRecord]
) -> List[LabeledValue]:
    """Count interviews per status: Scheduled, Completed, No-show, Draft."""
    counts = Counter()
    ignored = 0
    for record in chain(behavioral_records, coding_records):
        status = normalize_status(record)
        if status is None:
            ignored += 1
            continue
        counts[status] += 1

    if ignored:
        logger.debug(f"Ignored {ignored} records with unrecognised status")

    return [LabeledValue(label=label, value=counts[status]) for status, label in STATUS_LABELS]


def bucket_by_type(
    behavioral_records: Iterable[AnyRecord],
    coding_records: Iterable[AnyRecord]
) -> List[LabeledValue]:
    """Count interviews per type: Behavioral, MCQ, Combo, Coding."""
    counts = Counter(
        classify_type(record) for record in chain(behavioral_records, coding_records)
    )
    return [LabeledValue(label=label, value=counts[interview_type]) for interview_type, label in TYPE_LABELS]


def completion_rate_by_type(
    behavioral_records: Iterable[AnyRecord],
    coding_records: Iterable[AnyRecord]
) -> List[LabeledValue]:
    """
    Percentage of completed interviews per type, rounded to a whole number.

    A type without records reports 0.
    """
    totals = Counter()
    completed = Counter()
    for record in chain(behavioral_records, coding_records):
        interview_type = classify_type(record)
        if interview_type is None:
            continue
        totals[interview_type] += 1
        if record.interview_status and record.interview_status.lower() == InterviewStatus.COMPLETED.value:
            completed[interview_type] += 1

    rates = []
    for interview_type, label in TYPE_LABELS:
        total = totals[interview_type]
        rate = int(round_half_up(completed[interview_type] / total * 100)) if total > 0 else 0
        rates.append(LabeledValue(label=label, value=rate))
    return rates


def build_interview_analytics(
    behavioral_records: Iterable[AnyRecord],
    coding_records: Iterable[AnyRecord],
    window: Union[TimeWindow, str, None] = TimeWindow.WEEK,
    today: Optional[date] = None,
    tz: Optional[tzinfo] = None
) -> InterviewAnalytics:
    """Run all four aggregations for one dashboard window."""
    behavioral_records = list(behavioral_records)
    coding_records = list(coding_records)
    window = TimeWindow.parse(window)
    today = today or local_today(tz)

    interviews_by_day = bucket_by_day(behavioral_records, coding_records, window, today, tz)

    return InterviewAnalytics(
        window=window,
        start_date=interviews_by_day[0].date,
        end_date=today,
        total_interviews=len(behavioral_records) + len(coding_records),
        interviews_by_day=interviews_by_day,
        interviews_by_status=bucket_by_status(behavioral_records, coding_records),
        interviews_by_type=bucket_by_type(behavioral_records, coding_records),
        completion_rate_by_type=completion_rate_by_type(behavioral_records, coding_records)
    )
