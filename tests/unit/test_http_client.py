"""
Unit tests for HTTPClient.

Tests the async HTTP client utility.
"""
import httpx
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from app.utils.http_client import HTTPClient


def mock_async_client(mock_client_class, **methods):
    mock_client = AsyncMock()
    for name, value in methods.items():
        setattr(mock_client, name, value)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=None)
    mock_client_class.return_value = mock_client
    return mock_client


class TestHTTPClient:
    """Test cases for HTTPClient."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_get_makes_request(self):
        """Verify get() makes async GET request."""
        mock_response = MagicMock()
        mock_response.status_code = 200

        with patch("app.utils.http_client.httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class, get=AsyncMock(return_value=mock_response))

            client = HTTPClient(timeout=5.0, headers={"Authorization": "Bearer token"})
            result = await client.get("https://example.com", params={"userId": "1"})

            assert result.status_code == 200
            mock_client.get.assert_called_once_with("https://example.com", params={"userId": "1"})
            mock_client_class.assert_called_once_with(timeout=5.0, headers={"Authorization": "Bearer token"})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_post_makes_request(self):
        """Verify post() makes async POST request."""
        mock_response = MagicMock()
        mock_response.status_code = 201

        with patch("app.utils.http_client.httpx.AsyncClient") as mock_client_class:
            mock_client = mock_async_client(mock_client_class, post=AsyncMock(return_value=mock_response))

            client = HTTPClient()
            result = await client.post("https://example.com", json={"key": "value"})

            assert result.status_code == 201
            mock_client.post.assert_called_once_with("https://example.com", json={"key": "value"})

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_health_check_returns_true_on_200(self):
        """Verify health_check returns True when status is 200."""
        mock_response = MagicMock()
        mock_response.status_code = 200

        with patch("app.utils.http_client.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, get=AsyncMock(return_value=mock_response))

            client = HTTPClient()
            assert await client.health_check("https://example.com/health") is True

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_health_check_returns_false_on_non_200(self):
        """Verify health_check returns False when status is not 200."""
        mock_response = MagicMock()
        mock_response.status_code = 500

        with patch("app.utils.http_client.httpx.AsyncClient") as mock_client_class:
            mock_async_client(mock_client_class, get=AsyncMock(return_value=mock_response))

            client = HTTPClient()
            assert await client.health_check("https://example.com/health") is False

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_health_check_returns_false_on_connection_error(self):
        """Verify health_check returns False when the request fails."""
        with patch("app.utils.http_client.httpx.AsyncClient") as mock_client_class:
            mock_async_client(
                mock_client_class,
                get=AsyncMock(side_effect=httpx.ConnectError("Connection refused"))
            )

            client = HTTPClient()
            assert await client.health_check("https://example.com/health") is False
