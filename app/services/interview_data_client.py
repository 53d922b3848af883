"""
Client for the external interview data service.

The recruiting platform owns interview storage and the approval workflow;
this client fetches interview records and results from it and forwards
approval actions. The acting user and company are always passed in
explicitly.
"""
import asyncio
from datetime import date, tzinfo
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar, Union
import httpx
from pydantic import BaseModel, ValidationError
from app.config import get_settings
from app.exceptions import ApprovalActionError, RecordsFetchError
from app.models.analytics_models import (
    BehavioralInterviewRecord, CodingInterviewRecord, TimeWindow
)
from app.models.scoring_models import InterviewResult
from app.services.analytics_aggregator import window_days
from app.utils.http_client import HTTPClient
from app.utils.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class InterviewDataClient:
    """Typed access to the interview records, results and approval endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[HTTPClient] = None
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.INTERVIEW_DATA_API_URL).rstrip("/")
        self.http = http_client or HTTPClient(
            timeout=timeout or settings.HTTP_TIMEOUT_SECONDS,
            headers=settings.get_http_headers()
        )

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _get_json(self, path: str, params: Dict[str, Any]) -> Any:
        url = self._url(path)
        try:
            response = await self.http.get(url, params=params)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise RecordsFetchError(
                f"Interview data service returned {e.response.status_code}",
                context={"url": url, "status_code": e.response.status_code}
            ) from e
        except httpx.HTTPError as e:
            raise RecordsFetchError(
                f"Could not reach interview data service: {e}",
                context={"url": url}
            ) from e
        except ValueError as e:
            raise RecordsFetchError(
                "Interview data service returned malformed JSON",
                context={"url": url}
            ) from e

    @staticmethod
    def _parse_list(payload: Any, key: str, model: Type[ModelT]) -> List[ModelT]:
        items = payload.get(key, []) if isinstance(payload, dict) else payload
        if not isinstance(items, list):
            raise RecordsFetchError(
                f"Expected a list of {key}",
                context={"received": type(items).__name__}
            )
        try:
            return [model.model_validate(item) for item in items]
        except ValidationError as e:
            raise RecordsFetchError(
                f"Malformed {key} in interview data response",
                context={"errors": e.errors(include_url=False)}
            ) from e

    async def fetch_interview_records(
        self,
        user_id: str,
        window: Union[TimeWindow, str, None] = TimeWindow.WEEK,
        today: Optional[date] = None,
        tz: Optional[tzinfo] = None
    ) -> Tuple[List[BehavioralInterviewRecord], List[CodingInterviewRecord]]:
        """Fetch the behavioral-origin and coding interviews a user created within the window."""
        window = TimeWindow.parse(window)
        since = window_days(window, today, tz)[0]
        params = {"userId": user_id, "since": since.isoformat()}

        behavioral_payload, coding_payload = await asyncio.gather(
            self._get_json("analytics/interviews/behavioral", params),
            self._get_json("analytics/interviews/coding", params)
        )

        behavioral = self._parse_list(behavioral_payload, "interviews", BehavioralInterviewRecord)
        coding = self._parse_list(coding_payload, "interviews", CodingInterviewRecord)
        logger.info(
            f"Fetched {len(behavioral)} behavioral and {len(coding)} coding interviews "
            f"for user {user_id} since {since}"
        )
        return behavioral, coding

    async def fetch_interview_results(self, company_id: str) -> List[InterviewResult]:
        """Fetch completed interview results for a company."""
        payload = await self._get_json("interviews/results", {"companyId": company_id})
        results = self._parse_list(payload, "results", InterviewResult)
        logger.info(f"Fetched {len(results)} interview results for company {company_id}")
        return results

    async def submit_approval(self, candidate_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """Forward an approval action to the approval endpoint."""
        url = self._url(f"candidates/{candidate_id}/approval")
        try:
            response = await self.http.post(url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApprovalActionError(
                "Failed to process approval action",
                context={"candidate_id": candidate_id, "status_code": e.response.status_code}
            ) from e
        except httpx.HTTPError as e:
            raise ApprovalActionError(
                f"Could not reach approval endpoint: {e}",
                context={"candidate_id": candidate_id}
            ) from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        return body if isinstance(body, dict) else {"response": body}

    async def health_check(self) -> bool:
        """Check whether the interview data service answers."""
        return await self.http.health_check(self._url("health"))
