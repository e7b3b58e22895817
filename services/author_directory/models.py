"""
Directory Data Models

This module defines data models for users, posts and comments using dataclasses.
Provides a unified interface for converting between remote JSON payloads and objects.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class Company:
    """Company an author works for."""

    name: str
    catch_phrase: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Company':
        return cls(
            name=data.get("name", ""),
            catch_phrase=data.get("catchPhrase", "")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "catchPhrase": self.catch_phrase
        }


@dataclass
class User:
    """Data model for an author."""

    id: int
    name: str
    username: str = ""
    email: str = ""
    company: Optional[Company] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        """
        Create a User from a remote JSON object.

        Args:
            data: Dictionary with user data

        Returns:
            User instance
        """
        company = data.get("company")
        return cls(
            id=data.get("id", 0),
            name=data.get("name", ""),
            username=data.get("username", ""),
            email=data.get("email", ""),
            company=Company.from_dict(company) if company else None
        )

    @classmethod
    def empty(cls) -> 'User':
        """Empty-record default returned when a user could not be fetched."""
        return cls(id=0, name="")

    @property
    def is_empty(self) -> bool:
        return not self.id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "email": self.email,
            "company": self.company.to_dict() if self.company else None
        }


@dataclass
class Post:
    """Data model for a post."""

    id: int
    title: str
    body: str
    user_id: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Post':
        """
        Create a Post from a remote JSON object.

        Args:
            data: Dictionary with post data

        Returns:
            Post instance
        """
        return cls(
            id=data.get("id", 0),
            title=data.get("title", ""),
            body=data.get("body", ""),
            user_id=data.get("userId", 0)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "userId": self.user_id
        }


@dataclass
class Comment:
    """Data model for a comment on a post."""

    id: int
    post_id: int
    name: str
    body: str
    email: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Comment':
        return cls(
            id=data.get("id", 0),
            post_id=data.get("postId", 0),
            name=data.get("name", ""),
            body=data.get("body", ""),
            email=data.get("email", "")
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "postId": self.post_id,
            "name": self.name,
            "body": self.body,
            "email": self.email
        }
