"""
Candidate Approval Service for TalentScope.

Recruiters act on reviewed candidates (approve, reject, move to the next
round, schedule an interview, send feedback, request documents). The
decision is persisted and the candidate notified by the external approval
endpoint; this service validates the action, builds the payload the
endpoint expects and maps the action to the status the dashboard shows.
"""
from typing import Any, Dict
from app.exceptions import InvalidInputError
from app.models.approval_models import (
    ApprovalAction, ApprovalOutcome, ApprovalRequest, ApprovalStatus
)
from app.services.interview_data_client import InterviewDataClient
from app.utils.logger import get_logger

logger = get_logger(__name__)

DASHBOARD_STATUS = {
    ApprovalAction.APPROVE: ApprovalStatus.APPROVED,
    ApprovalAction.REJECT: ApprovalStatus.REJECTED,
    ApprovalAction.NEXT_ROUND: ApprovalStatus.NEXT_ROUND,
    ApprovalAction.SCHEDULE_INTERVIEW: ApprovalStatus.INTERVIEW_SCHEDULED,
    ApprovalAction.SEND_FEEDBACK: ApprovalStatus.FEEDBACK_SENT,
    ApprovalAction.REQUEST_DOCUMENTS: ApprovalStatus.DOCUMENTS_REQUESTED,
}

# Status the approval endpoint stores on the candidate application
APPLICATION_STATUS = {
    ApprovalAction.APPROVE: "approved",
    ApprovalAction.REJECT: "rejected",
    ApprovalAction.NEXT_ROUND: "in_progress",
    ApprovalAction.SCHEDULE_INTERVIEW: "interview_scheduled",
    ApprovalAction.SEND_FEEDBACK: "feedback_provided",
    ApprovalAction.REQUEST_DOCUMENTS: "documents_requested",
}

SUCCESS_MESSAGES = {
    ApprovalAction.APPROVE: "Candidate approved successfully!",
    ApprovalAction.REJECT: "Candidate rejected",
    ApprovalAction.NEXT_ROUND: "Candidate moved to next round!",
    ApprovalAction.SCHEDULE_INTERVIEW: "Interview scheduled successfully!",
    ApprovalAction.SEND_FEEDBACK: "Feedback sent to candidate!",
    ApprovalAction.REQUEST_DOCUMENTS: "Document request sent to candidate!",
}


class ApprovalService:
    """Service for submitting candidate approval actions."""

    def __init__(self, client: InterviewDataClient):
        self.client = client

    @staticmethod
    def resolve_status(action: ApprovalAction) -> ApprovalStatus:
        """Dashboard status after an action succeeds."""
        return DASHBOARD_STATUS[ApprovalAction(action)]

    @staticmethod
    def application_status(action: ApprovalAction) -> str:
        """Application status stored by the approval endpoint for an action."""
        return APPLICATION_STATUS[ApprovalAction(action)]

    @staticmethod
    def validate(request: ApprovalRequest) -> None:
        """Check the action-specific fields an action needs."""
        if request.action == ApprovalAction.SEND_FEEDBACK and not request.feedback_to_candidate:
            raise InvalidInputError(
                "Feedback text is required to send feedback",
                context={"action": request.action.value}
            )
        if request.action == ApprovalAction.SCHEDULE_INTERVIEW and request.meeting_details is None:
            raise InvalidInputError(
                "Meeting details are required to schedule an interview",
                context={"action": request.action.value}
            )

    @staticmethod
    def build_payload(request: ApprovalRequest) -> Dict[str, Any]:
        """Request body for the approval endpoint, with only the fields the action uses."""
        payload: Dict[str, Any] = {
            "action": request.action.value,
            "notes": request.notes or "",
            "priority": request.priority,
        }
        if request.interview_id:
            payload["interviewId"] = request.interview_id
        if request.campaign_id:
            payload["campaignId"] = request.campaign_id

        if request.action == ApprovalAction.SEND_FEEDBACK:
            payload["feedbackToCandidate"] = request.feedback_to_candidate
        elif request.action == ApprovalAction.SCHEDULE_INTERVIEW:
            meeting = request.meeting_details.model_dump(by_alias=True)
            if meeting.get("notes") is None:
                meeting["notes"] = request.notes or ""
            payload["meetingDetails"] = meeting
        elif request.action == ApprovalAction.NEXT_ROUND:
            if request.next_round_details is not None:
                payload["nextRoundDetails"] = request.next_round_details.model_dump(by_alias=True)
            interview_date = request.interview_date or (
                request.next_round_details.date if request.next_round_details else None
            )
            if interview_date:
                payload["interviewDate"] = interview_date

        return payload

    async def submit(self, candidate_id: str, request: ApprovalRequest) -> ApprovalOutcome:
        """Validate and forward an approval action for one candidate."""
        if not candidate_id:
            raise InvalidInputError("Candidate ID is required for approval actions")
        self.validate(request)

        payload = self.build_payload(request)
        logger.info(f"Submitting '{request.action.value}' for candidate {candidate_id}")
        remote_response = await self.client.submit_approval(candidate_id, payload)

        return ApprovalOutcome(
            candidate_id=candidate_id,
            action=request.action,
            approval_status=self.resolve_status(request.action),
            application_status=remote_response.get("status") or self.application_status(request.action),
            message=SUCCESS_MESSAGES.get(request.action, "Action completed successfully!"),
            remote_response=remote_response
        )
