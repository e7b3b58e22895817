"""
View Builder

This module composes users, posts and comments into view fragments.
Post fragments are built strictly in input order: each post's author and
comments are fetched before the next post is started, which keeps at most one
request in flight at the cost of render latency growing with the post count.
"""

import logging
from typing import List, Optional, Union

from config import VIEW_CONFIG
from ..gateway import DataGateway
from ..models import Comment, Post, User
from ..sentinels import NOT_PROVIDED, Sentinel
from .nodes import Fragment, ViewNode

logger = logging.getLogger(__name__)


class ViewBuilder:
    """Builds view fragments from directory records."""

    def __init__(self, gateway: DataGateway):
        """
        Initialize the view builder.

        Args:
            gateway: DataGateway used to resolve authors and comments
        """
        self.gateway = gateway

    @staticmethod
    def build_element_with_text(kind: str = "p", text: str = "", class_name: str = "") -> ViewNode:
        """
        Create a leaf element.

        Args:
            kind: Element tag
            text: Text content
            class_name: Class to set; nothing is set when empty

        Returns:
            New ViewNode
        """
        element = ViewNode(kind, text)
        if class_name:
            element.add_class(class_name)
        return element

    def build_select_options(self, users: Optional[List[User]]) -> Union[List[ViewNode], Sentinel]:
        """One option per user: value is the user id, label is the user name."""
        if users is None:
            logger.warning("users parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        options = []
        for user in users:
            option = self.build_element_with_text("option", user.name)
            option.attrs["value"] = user.id
            options.append(option)
        return options

    def build_comments(self, comments: Optional[List[Comment]]) -> Union[Fragment, Sentinel]:
        """
        Build one article per comment, in input order.

        Args:
            comments: Comments to render

        Returns:
            Fragment of comment articles, or NOT_PROVIDED if comments is None
        """
        if comments is None:
            logger.warning("comments parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        fragment = Fragment()
        for comment in comments:
            article = ViewNode("article")
            article.append(self.build_element_with_text("h3", comment.name))
            article.append(self.build_element_with_text("p", comment.body))
            article.append(self.build_element_with_text("p", f"From: {comment.email}"))
            fragment.append(article)
        return fragment

    async def build_comment_section(self, post_id) -> Union[ViewNode, Sentinel]:
        """
        Build a post's comment section, hidden, with its comments embedded.

        Args:
            post_id: Post the comments belong to

        Returns:
            Section node, or NOT_PROVIDED for a missing post id
        """
        if not post_id:
            logger.warning("post_id parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        section = ViewNode("section")
        section.data["post_id"] = post_id
        section.add_class(VIEW_CONFIG["comments_class"])
        section.add_class(VIEW_CONFIG["hidden_class"])

        comments = await self.gateway.fetch_post_comments(post_id)
        section.append(self.build_comments(comments or []))
        return section

    async def build_posts(self, posts: Optional[List[Post]]) -> Union[Fragment, Sentinel]:
        """
        Build one article per post, in input order.

        Args:
            posts: Posts to render

        Returns:
            Fragment of post articles, or NOT_PROVIDED if posts is None
        """
        if posts is None:
            logger.warning("posts parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        fragment = Fragment()
        for post in posts:
            article = ViewNode("article")
            article.append(self.build_element_with_text("h2", post.title))
            article.append(self.build_element_with_text("p", post.body))
            article.append(self.build_element_with_text("p", f"Post ID: {post.id}"))

            author = await self.gateway.fetch_user(post.user_id)
            for line in self._build_author_lines(author):
                article.append(line)

            button = self.build_element_with_text("button", VIEW_CONFIG["show_label"])
            button.data["post_id"] = post.id
            article.append(button)

            section = await self.build_comment_section(post.id)
            if section:
                article.append(section)

            fragment.append(article)

        logger.info(f"Built {len(posts)} post articles")
        return fragment

    def build_default_view(self) -> ViewNode:
        """Placeholder shown while no author is selected."""
        return self.build_element_with_text(
            "p",
            VIEW_CONFIG["default_text"],
            VIEW_CONFIG["default_text_class"]
        )

    def _build_author_lines(self, author) -> List[ViewNode]:
        """
        Build the author and catch-phrase lines.

        An author that failed to load (NOT_PROVIDED, the empty record, or a
        record without a company) renders a single "Author unavailable" line.
        """
        if not isinstance(author, User) or author.is_empty or author.company is None:
            logger.warning(f"Author unavailable, rendering placeholder: {author!r}")
            return [self.build_element_with_text(
                "p",
                VIEW_CONFIG["author_unavailable_text"],
                VIEW_CONFIG["author_unavailable_class"]
            )]

        return [
            self.build_element_with_text("p", f"Author: {author.name} with {author.company.name}"),
            self.build_element_with_text("p", author.company.catch_phrase)
        ]
