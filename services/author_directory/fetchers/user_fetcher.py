"""
User Fetcher

This module handles fetching authors from the directory API.
Failures are logged and converted to safe defaults, never raised.
"""

import logging
from typing import List
from ..models import User
from ..client import DirectoryClient

logger = logging.getLogger(__name__)


class UserFetcher:
    """Handles fetching users from the directory."""

    def __init__(self, client: DirectoryClient):
        """
        Initialize the user fetcher.

        Args:
            client: DirectoryClient instance
        """
        self.client = client

    async def fetch_users(self) -> List[User]:
        """
        Fetch every user in the directory.

        Returns:
            List of User objects, empty on failure
        """
        logger.info("Fetching users")

        try:
            data = await self.client.get_users()
            if not isinstance(data, list):
                raise ValueError(f"expected a list of users, got {type(data).__name__}")

            users = [User.from_dict(item) for item in data]

            logger.info(f"Successfully fetched {len(users)} users")
            return users

        except Exception as e:
            logger.error(f"Error fetching users: {e}")
            return []

    async def fetch_user(self, user_id) -> User:
        """
        Fetch a single user by ID.

        Args:
            user_id: Directory user ID

        Returns:
            User object, or User.empty() on failure
        """
        logger.info(f"Fetching user {user_id}")

        try:
            data = await self.client.get_user(user_id)
            if not isinstance(data, dict):
                raise ValueError(f"expected a user object, got {type(data).__name__}")

            user = User.from_dict(data)

            logger.info(f"Successfully fetched user {user_id}")
            return user

        except Exception as e:
            logger.error(f"Error fetching user {user_id}: {e}")
            return User.empty()
