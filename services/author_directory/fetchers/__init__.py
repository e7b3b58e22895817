"""Fetchers package for directory data collection."""

from .user_fetcher import UserFetcher
from .post_fetcher import PostFetcher
from .comment_fetcher import CommentFetcher

__all__ = ['UserFetcher', 'PostFetcher', 'CommentFetcher']
