"""
Analytics data models for TalentScope.

This module defines Pydantic models for the interview trend dashboard:
the interview records consumed by the aggregators, the time windows a
dashboard user can select, and the chart buckets produced for each window.
"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, List, Optional, Union, Literal
import datetime as dt
from enum import Enum


class InterviewStatus(str, Enum):
    """Interview lifecycle status as stored by the scheduling system."""
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    NO_SHOW = "no-show"
    DRAFT = "draft"


class InterviewType(str, Enum):
    """Interview formats offered to candidates."""
    BEHAVIORAL = "behavioral"
    MCQ = "mcq"
    CODING = "coding"
    COMBO = "combo"


class TimeWindow(str, Enum):
    """Lookback window options for trend charts."""
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"

    @property
    def days(self) -> int:
        return _WINDOW_DAYS[self]

    @classmethod
    def parse(cls, value: Optional[Union[str, "TimeWindow"]]) -> "TimeWindow":
        """Return the matching window, falling back to a week for missing or unknown input."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.WEEK


_WINDOW_DAYS = {
    TimeWindow.WEEK: 7,
    TimeWindow.MONTH: 30,
    TimeWindow.QUARTER: 90,
}


class BehavioralInterviewRecord(BaseModel):
    """Record from the behavioral-origin interview table (behavioral, MCQ and combo interviews)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    kind: Literal["behavioral"] = "behavioral"
    id: Union[int, str] = Field(..., description="Interview identifier")
    created_at: dt.datetime = Field(..., description="Creation timestamp")
    interview_status: Optional[str] = Field(None, description="Raw interview status")
    interview_type: Optional[str] = Field(None, description="Raw interview type, null means behavioral")


class CodingInterviewRecord(BaseModel):
    """Record from the coding interview table."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    kind: Literal["coding"] = "coding"
    id: Union[int, str] = Field(..., description="Interview identifier")
    created_at: dt.datetime = Field(..., description="Creation timestamp")
    interview_status: Optional[str] = Field(None, description="Raw interview status")


InterviewRecord = Annotated[
    Union[BehavioralInterviewRecord, CodingInterviewRecord],
    Field(discriminator="kind")
]


class DayBucket(BaseModel):
    """Interview counts for one calendar day."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: dt.date = Field(..., description="Calendar day")
    label: str = Field(..., description="Display label, e.g. 'Mar 05'")
    behavioral_count: int = Field(0, ge=0, description="Behavioral-origin interviews created that day")
    coding_count: int = Field(0, ge=0, description="Coding interviews created that day")


class LabeledValue(BaseModel):
    """A labeled counter or percentage used as one point of a chart series."""
    label: str = Field(..., description="Bucket label")
    value: int = Field(..., ge=0, description="Count or rounded percentage")


StatusBucket = LabeledValue
TypeBucket = LabeledValue
RateBucket = LabeledValue


class InterviewAnalytics(BaseModel):
    """All chart series for the analytics dashboard over one window."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    window: TimeWindow = Field(..., description="Selected lookback window")
    start_date: dt.date = Field(..., description="First day covered")
    end_date: dt.date = Field(..., description="Last day covered (today)")
    total_interviews: int = Field(..., ge=0, description="Records supplied to the aggregators")
    interviews_by_day: List[DayBucket] = Field(..., description="One bucket per day, oldest first")
    interviews_by_status: List[StatusBucket] = Field(..., description="Scheduled, Completed, No-show, Draft")
    interviews_by_type: List[TypeBucket] = Field(..., description="Behavioral, MCQ, Combo, Coding")
    completion_rate_by_type: List[RateBucket] = Field(..., description="Completion percentage per type")


class AnalyticsRequest(BaseModel):
    """Records supplied directly to the aggregation endpoint."""
    behavioral_records: List[BehavioralInterviewRecord] = Field(default_factory=list)
    coding_records: List[CodingInterviewRecord] = Field(default_factory=list)
    records: List[InterviewRecord] = Field(default_factory=list, description="Mixed records tagged by 'kind'")
    window: Optional[str] = Field(None, description="week, month or quarter; defaults to week")
    today: Optional[dt.date] = Field(None, description="Override for the last day of the window")

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def split_records(self):
        """Merge the tagged ``records`` list into the per-origin lists."""
        behavioral = list(self.behavioral_records)
        coding = list(self.coding_records)
        for record in self.records:
            if record.kind == "coding":
                coding.append(record)
            else:
                behavioral.append(record)
        return behavioral, coding
