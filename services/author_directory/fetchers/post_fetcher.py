"""
Post Fetcher

This module handles fetching an author's posts and converting them to Post objects.
"""

import logging
from typing import List
from ..models import Post
from ..client import DirectoryClient

logger = logging.getLogger(__name__)


class PostFetcher:
    """Handles fetching posts by author."""

    def __init__(self, client: DirectoryClient):
        self.client = client

    async def fetch_user_posts(self, user_id) -> List[Post]:
        """
        Fetch all posts written by a user.

        Args:
            user_id: Directory user ID

        Returns:
            List of Post objects, empty on failure
        """
        logger.info(f"Fetching posts for user {user_id}")

        try:
            data = await self.client.get_posts(user_id)
            if not isinstance(data, list):
                raise ValueError(f"expected a list of posts, got {type(data).__name__}")

            posts = [Post.from_dict(item) for item in data]

            logger.info(f"Successfully fetched {len(posts)} posts for user {user_id}")
            return posts

        except Exception as e:
            logger.error(f"Error fetching posts for user {user_id}: {e}")
            return []
