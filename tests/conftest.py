"""
Test configuration for TalentScope tests.

This module provides test fixtures and configuration for the testing infrastructure.
"""
# Set test environment variables BEFORE any imports that might use them
import os
os.environ.setdefault("INTERVIEW_DATA_API_URL", "http://interview-data.test/api")
os.environ.setdefault("MAX_INTERVIEW_TIME_SECONDS", "600")
os.environ.setdefault("TOP_RESULTS_LIMIT", "10")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from datetime import date, datetime
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from app.main import app
from app.dependencies import get_interview_data_client
from app.models.analytics_models import BehavioralInterviewRecord, CodingInterviewRecord
from app.models.scoring_models import InterviewResult

TODAY = date(2024, 3, 10)


@pytest.fixture
def today():
    """Fixed last day of the analytics window."""
    return TODAY


@pytest.fixture
def mock_data_client():
    """Mock interview data client for testing."""
    client = AsyncMock()
    client.fetch_interview_records = AsyncMock(return_value=([], []))
    client.fetch_interview_results = AsyncMock(return_value=[])
    client.submit_approval = AsyncMock(return_value={"success": True})
    client.health_check = AsyncMock(return_value=True)
    return client


# FastAPI client fixture
@pytest.fixture
def client(mock_data_client):
    """Create FastAPI test client with the interview data client overridden."""
    client = TestClient(app)
    client.app.dependency_overrides[get_interview_data_client] = lambda: mock_data_client
    yield client
    # Clean up overrides after test
    client.app.dependency_overrides.clear()


@pytest.fixture
def behavioral_records():
    """Three behavioral-origin interviews created today."""
    created_at = datetime(2024, 3, 10, 9, 30)
    return [
        BehavioralInterviewRecord(id=1, created_at=created_at, interview_status="completed", interview_type="behavioral"),
        BehavioralInterviewRecord(id=2, created_at=created_at, interview_status="completed", interview_type=None),
        BehavioralInterviewRecord(id=3, created_at=created_at, interview_status="scheduled", interview_type="behavioral"),
    ]


@pytest.fixture
def coding_records():
    """One completed coding interview created today."""
    return [
        CodingInterviewRecord(id=10, created_at=datetime(2024, 3, 10, 14, 0), interview_status="completed"),
    ]


def make_result(
    result_id,
    candidate_name="Jane Doe",
    accuracy=8.0,
    completion_rate=90.0,
    total_time_spent=150.0,
    interview_type="behavioral",
    completed_at="2024-03-08T12:00:00Z",
    approval_status=None
):
    """Build an InterviewResult from the wire (camelCase) representation."""
    payload = {
        "interview": {
            "id": result_id,
            "candidateName": candidate_name,
            "candidateId": f"cand-{result_id}",
            "jobPosition": "Backend Engineer",
            "interviewType": interview_type,
            "completedAt": completed_at,
        },
        "summary": {
            "totalQuestions": 10,
            "totalAnswered": 9,
            "totalTimeSpent": total_time_spent,
            "performanceMetrics": {
                "accuracy": accuracy,
                "completionRate": completion_rate,
                "timeEfficiency": 12.0,
                "averageRating": 1.0,
            },
        },
    }
    if approval_status is not None:
        payload["approvalStatus"] = approval_status
    return InterviewResult.model_validate(payload)


@pytest.fixture
def sample_results():
    """Completed interview results with distinct composite scores."""
    return [
        make_result(1, "Jane Doe", accuracy=8.0, completion_rate=90.0, total_time_spent=150.0),
        make_result(2, "John Roe", accuracy=10.0, completion_rate=100.0, total_time_spent=0.0, interview_type="coding"),
        make_result(3, "Ada Poe", accuracy=2.0, completion_rate=40.0, total_time_spent=900.0, interview_type="mcq"),
    ]


@pytest.fixture
def result_factory():
    """Factory for InterviewResult objects."""
    return make_result
