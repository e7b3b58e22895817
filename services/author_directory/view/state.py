"""
View State

This module holds the mutable state of the mounted view as one explicit object:
the container, the author selector, the per-refresh post index, disclosure
entries, handler bindings and the refresh generation.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

from config import VIEW_CONFIG
from .nodes import ViewNode, SelectControl

logger = logging.getLogger(__name__)


@dataclass
class PostControls:
    """The toggle button and comment section rendered for one post."""

    post_id: int
    button: Optional[ViewNode] = None
    section: Optional[ViewNode] = None


@dataclass
class DisclosureEntry:
    """Whether one mounted post's comment section is shown."""

    post_id: int
    visible: bool = False


@dataclass(frozen=True)
class HandlerBinding:
    """The exact click handler installed on one post's toggle button."""

    post_id: int
    button: ViewNode
    handler: Callable


@dataclass
class ViewState:
    """Everything a refresh cycle reads or replaces."""

    container: ViewNode
    selector: Optional[SelectControl] = None
    controls: Dict[int, PostControls] = field(default_factory=dict)
    entries: Dict[int, DisclosureEntry] = field(default_factory=dict)
    bindings: Dict[int, HandlerBinding] = field(default_factory=dict)
    generation: int = 0

    @classmethod
    def create(cls) -> 'ViewState':
        """Build the page scaffold: a body holding the selector and the main container."""
        body = ViewNode("body")
        header = body.append(ViewNode("header"))
        selector = header.append(SelectControl(VIEW_CONFIG["selector_id"]))
        container = body.append(ViewNode("main"))
        return cls(container=container, selector=selector)

    @property
    def root(self) -> ViewNode:
        node = self.container
        while node.parent is not None:
            node = node.parent
        return node

    def next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def index_controls(self) -> Dict[int, PostControls]:
        """
        Walk the mounted container once and map each post id to its button and section.

        Returns:
            The rebuilt post index
        """
        self.controls = {}
        for node in self.container.iter_descendants():
            post_id = node.data.get("post_id")
            if not post_id:
                continue

            controls = self.controls.setdefault(post_id, PostControls(post_id))
            if node.tag == "button":
                if controls.button is not None:
                    logger.warning(f"Duplicate toggle button for post {post_id}, keeping the last one")
                controls.button = node
            elif node.tag == "section":
                if controls.section is not None:
                    logger.warning(f"Duplicate comment section for post {post_id}, keeping the last one")
                controls.section = node

        logger.debug(f"Indexed controls for {len(self.controls)} posts")
        return self.controls
