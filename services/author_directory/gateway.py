"""
Data Gateway

This module provides the single entry point the view layer uses to read remote data.
Composes the fetchers and guards every id-taking call against missing ids.
"""

import logging
from typing import List, Optional, Union

from .client import DirectoryClient
from .models import User, Post, Comment
from .fetchers import UserFetcher, PostFetcher, CommentFetcher
from .sentinels import NOT_PROVIDED, Sentinel

logger = logging.getLogger(__name__)


class DataGateway:
    """Reads users, posts and comments; failures come back as safe defaults."""

    def __init__(self, client: Optional[DirectoryClient] = None):
        """
        Initialize the data gateway.

        Args:
            client: DirectoryClient to read through (default: a new client from config)
        """
        # Layer 1: Client
        self.client = client or DirectoryClient()

        # Layer 2: Fetchers
        self.user_fetcher = UserFetcher(self.client)
        self.post_fetcher = PostFetcher(self.client)
        self.comment_fetcher = CommentFetcher(self.client)

        logger.info("Data gateway initialized")

    async def fetch_users(self) -> List[User]:
        return await self.user_fetcher.fetch_users()

    async def fetch_user_posts(self, user_id) -> Union[List[Post], Sentinel]:
        """
        Fetch posts written by a user.

        Args:
            user_id: Directory user ID; must be truthy

        Returns:
            List of posts (empty if the read failed), or NOT_PROVIDED for a missing id
        """
        if not user_id:
            logger.warning("user_id parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED
        return await self.post_fetcher.fetch_user_posts(user_id)

    async def fetch_user(self, user_id) -> Union[User, Sentinel]:
        """
        Fetch a single user.

        Args:
            user_id: Directory user ID; must be truthy

        Returns:
            User (User.empty() if the read failed), or NOT_PROVIDED for a missing id
        """
        if not user_id:
            logger.warning("user_id parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED
        return await self.user_fetcher.fetch_user(user_id)

    async def fetch_post_comments(self, post_id) -> Union[List[Comment], Sentinel]:
        """
        Fetch comments on a post.

        Args:
            post_id: Directory post ID; must be truthy

        Returns:
            List of comments (empty if the read failed), or NOT_PROVIDED for a missing id
        """
        if not post_id:
            logger.warning("post_id parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED
        return await self.comment_fetcher.fetch_post_comments(post_id)

    async def aclose(self) -> None:
        await self.client.aclose()
