import os
from dotenv import load_dotenv
from typing import Dict, List, Any, Optional
from functools import lru_cache
from zoneinfo import ZoneInfo
from app.utils.logger import get_logger

load_dotenv()

VALID_TIME_WINDOWS = ("week", "month", "quarter")

logger = get_logger(__name__)

@lru_cache()
def _resolve_timezone(name: str) -> Optional[ZoneInfo]:
    """Load an IANA zone; unknown names fall back to the system local zone (None)."""
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError, OSError):
        logger.warning(f"Unknown LOCAL_TIMEZONE '{name}', using the system local timezone")
        return None

class Settings:
    # Interview data collaborator (records, results, approval endpoint)
    INTERVIEW_DATA_API_URL: str = os.getenv("INTERVIEW_DATA_API_URL", "http://localhost:3000/api")
    INTERVIEW_DATA_API_TOKEN: str = os.getenv("INTERVIEW_DATA_API_TOKEN", "")
    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "30"))

    # Scoring Settings
    MAX_INTERVIEW_TIME_SECONDS: int = int(os.getenv("MAX_INTERVIEW_TIME_SECONDS", "600"))  # 10 questions
    STRICT_SCORE_VALIDATION: bool = os.getenv("STRICT_SCORE_VALIDATION", "false").lower() == "true"
    TOP_RESULTS_LIMIT: int = int(os.getenv("TOP_RESULTS_LIMIT", "10"))

    # Analytics Settings
    DEFAULT_TIME_WINDOW: str = os.getenv("DEFAULT_TIME_WINDOW", "week").lower()
    LOCAL_TIMEZONE: str = os.getenv("LOCAL_TIMEZONE", "")

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    # Debug logging overrides LOG_LEVEL
    DEBUG_LOGGING: bool = os.getenv("DEBUG_LOGGING", "false").lower() == "true"

    # CORS Configuration
    CORS_ORIGINS: List[str] = os.getenv("CORS_ORIGINS", "http://localhost:3000,https://localhost:3001").split(",")
    CORS_METHODS: List[str] = os.getenv("CORS_METHODS", "GET,POST,OPTIONS").split(",")
    CORS_HEADERS: List[str] = os.getenv("CORS_HEADERS", "Content-Type,Authorization,X-Requested-With").split(",")
    CORS_MAX_AGE: int = int(os.getenv("CORS_MAX_AGE", "86400"))  # 24 hours

    @property
    def cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration."""
        return {
            "allow_origins": self.CORS_ORIGINS,
            "allow_credentials": True,
            "allow_methods": self.CORS_METHODS,
            "allow_headers": self.CORS_HEADERS,
            "expose_headers": ["X-Request-ID"],
            "max_age": self.CORS_MAX_AGE
        }

    @property
    def local_timezone(self) -> Optional[ZoneInfo]:
        """Timezone used for calendar-day bucketing; None means the system local zone."""
        if not self.LOCAL_TIMEZONE:
            return None
        return _resolve_timezone(self.LOCAL_TIMEZONE)

    def get_http_headers(self) -> Dict[str, str]:
        """Headers sent to the interview data collaborator."""
        headers = {"Content-Type": "application/json"}
        if self.INTERVIEW_DATA_API_TOKEN:
            headers["Authorization"] = f"Bearer {self.INTERVIEW_DATA_API_TOKEN}"
        return headers

    def validate_configuration(self) -> List[str]:
        """Validate configuration and return list of issues."""
        errors = []
        if self.MAX_INTERVIEW_TIME_SECONDS <= 0:
            errors.append("MAX_INTERVIEW_TIME_SECONDS must be greater than 0")
        if self.HTTP_TIMEOUT_SECONDS <= 0:
            errors.append("HTTP_TIMEOUT_SECONDS must be greater than 0")
        if self.TOP_RESULTS_LIMIT < 1:
            errors.append("TOP_RESULTS_LIMIT must be at least 1")
        if self.DEFAULT_TIME_WINDOW not in VALID_TIME_WINDOWS:
            errors.append(f"DEFAULT_TIME_WINDOW must be one of {', '.join(VALID_TIME_WINDOWS)}")
        if not self.INTERVIEW_DATA_API_URL.startswith(("http://", "https://")):
            errors.append("INTERVIEW_DATA_API_URL must be an http(s) URL")
        if self.LOCAL_TIMEZONE and self.local_timezone is None:
            errors.append(f"LOCAL_TIMEZONE '{self.LOCAL_TIMEZONE}' is not a known timezone")
        return errors

@lru_cache()
def get_settings():
    return Settings()
