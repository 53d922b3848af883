"""
Async HTTP client utility for the interview data collaborators.
"""

import httpx
from typing import Optional, Dict
from app.utils.logger import get_logger

logger = get_logger(__name__)

class HTTPClient:
    """Async HTTP client; each request opens its own connection pool so calls can run concurrently."""

    def __init__(self, timeout: float = 30.0, headers: Optional[Dict[str, str]] = None):
        self.timeout = timeout
        self.headers = headers or {}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, headers=self.headers)

    async def get(self, url: str, **kwargs) -> httpx.Response:
        """Make async GET request."""
        async with self._client() as client:
            return await client.get(url, **kwargs)

    async def post(self, url: str, **kwargs) -> httpx.Response:
        """Make async POST request."""
        async with self._client() as client:
            return await client.post(url, **kwargs)

    async def health_check(self, url: str) -> bool:
        """Check if a service is healthy."""
        try:
            async with self._client() as client:
                response = await client.get(url, timeout=5.0)
                return response.status_code == 200
        except httpx.HTTPError as e:
            logger.warning(f"Health check failed for {url}: {e}")
            return False
