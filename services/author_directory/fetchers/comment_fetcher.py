"""
Comment Fetcher

This module handles fetching the comments attached to a post.
Comments are returned in the order the remote source lists them.
"""

import logging
from typing import List
from ..models import Comment
from ..client import DirectoryClient

logger = logging.getLogger(__name__)


class CommentFetcher:
    """Handles fetching comments for posts."""

    def __init__(self, client: DirectoryClient):
        """
        Initialize the comment fetcher.

        Args:
            client: DirectoryClient instance
        """
        self.client = client

    async def fetch_post_comments(self, post_id) -> List[Comment]:
        """
        Fetch comments for a post.

        Args:
            post_id: Directory post ID

        Returns:
            List of Comment objects, empty on failure
        """
        logger.info(f"Fetching comments for post {post_id}")

        try:
            data = await self.client.get_comments(post_id)
            if not isinstance(data, list):
                raise ValueError(f"expected a list of comments, got {type(data).__name__}")

            comments = [Comment.from_dict(item) for item in data]

            logger.info(f"Successfully fetched {len(comments)} comments for post {post_id}")
            return comments

        except Exception as e:
            logger.error(f"Error fetching comments for post {post_id}: {e}")
            return []
