"""
Candidate approval workflow models.

The approval action itself is persisted by an external endpoint; these
models describe what the dashboard sends and what it shows afterwards.
"""
from typing import Any, Dict, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApprovalAction(str, Enum):
    """Actions a recruiter can take on a reviewed candidate."""
    APPROVE = "approve"
    REJECT = "reject"
    NEXT_ROUND = "next_round"
    SCHEDULE_INTERVIEW = "schedule_interview"
    SEND_FEEDBACK = "send_feedback"
    REQUEST_DOCUMENTS = "request_documents"


class ApprovalStatus(str, Enum):
    """Review status shown next to a candidate's result."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    NEXT_ROUND = "next_round"
    INTERVIEW_SCHEDULED = "interview_scheduled"
    FEEDBACK_SENT = "feedback_sent"
    DOCUMENTS_REQUESTED = "documents_requested"


class MeetingDetails(BaseModel):
    """Follow-up meeting requested with a schedule_interview action."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date: str = Field(..., description="Meeting date (YYYY-MM-DD)")
    time: str = Field(..., description="Meeting time (HH:MM)")
    notes: Optional[str] = Field(None, description="Notes for the candidate")


class NextRoundDetails(BaseModel):
    """Details of the next interview round for a next_round action."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    round_name: str = Field(..., description="Name of the next round")
    date: Optional[str] = Field(None, description="Round date (YYYY-MM-DD)")
    time: Optional[str] = Field(None, description="Round time (HH:MM)")


class ApprovalRequest(BaseModel):
    """Approval action submitted for one candidate."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    action: ApprovalAction = Field(..., description="Action to apply")
    notes: Optional[str] = Field(None, description="Recruiter notes; used as the rejection reason on reject")
    interview_id: Optional[str] = Field(None, description="Interview the decision is based on")
    campaign_id: Optional[str] = Field(None, description="Job campaign the candidate applied to")
    feedback_to_candidate: Optional[str] = Field(None, description="Feedback text for send_feedback")
    meeting_details: Optional[MeetingDetails] = Field(None, description="Meeting for schedule_interview")
    next_round_details: Optional[NextRoundDetails] = Field(None, description="Round details for next_round")
    interview_date: Optional[str] = Field(None, description="Date of the next round interview")
    priority: str = Field("normal", description="Notification priority")


class ApprovalOutcome(BaseModel):
    """Result of a submitted approval action."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    candidate_id: str = Field(..., description="Candidate the action was applied to")
    action: ApprovalAction = Field(..., description="Applied action")
    approval_status: ApprovalStatus = Field(..., description="Status to show on the results dashboard")
    application_status: str = Field(..., description="Application status stored by the approval endpoint")
    message: str = Field(..., description="Human readable confirmation")
    remote_response: Dict[str, Any] = Field(default_factory=dict, description="Body returned by the approval endpoint")
