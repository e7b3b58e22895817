"""
Directory API Client

This module provides a unified interface for interacting with the directory REST API using httpx.
Centralizes HTTP client initialization and basic API calls.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from config import API_CONFIG

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class DirectoryClient:
    """Unified async client for directory API interactions using httpx."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize the directory API client.

        Args:
            base_url: Root URL of the remote source (default: from config)
            timeout: Per-request timeout in seconds (default: from config)
            transport: Optional httpx transport, used to substitute the network
        """
        self.base_url = base_url or API_CONFIG["base_url"]
        self.timeout = timeout if timeout is not None else API_CONFIG["timeout"]

        self.http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"User-Agent": API_CONFIG["user_agent"]},
            transport=transport
        )

        logger.info(f"Directory API client initialized for {self.base_url}")

    async def __aenter__(self) -> 'DirectoryClient':
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.http.aclose()

    async def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Perform one GET request and decode the JSON body.

        Args:
            path: Path relative to the base URL
            params: Optional query parameters

        Returns:
            Decoded JSON payload

        Raises:
            httpx.HTTPError: On transport failure or a non-2xx status
            ValueError: If the body is not valid JSON
        """
        response = await self.http.get(path, params=params)
        response.raise_for_status()
        return response.json()

    async def get_users(self) -> Any:
        """GET /users"""
        return await self.get_json("/users")

    async def get_user(self, user_id) -> Any:
        """GET /users/{id}"""
        return await self.get_json(f"/users/{user_id}")

    async def get_posts(self, user_id) -> Any:
        """GET /posts?userId={id}"""
        return await self.get_json("/posts", params={"userId": user_id})

    async def get_comments(self, post_id) -> Any:
        """GET /comments?postId={id}"""
        return await self.get_json("/comments", params={"postId": post_id})
