"""
Disclosure Controller

This module owns the shown/hidden state of each mounted post's comment section.
Section visibility and toggle label are both derived from the entry's
`visible` flag and always change together.
"""

import logging
from typing import Tuple, Union

from config import VIEW_CONFIG
from ..sentinels import NOT_FOUND, NOT_PROVIDED, Sentinel
from .nodes import Event, ViewNode
from .state import DisclosureEntry, PostControls, ViewState

logger = logging.getLogger(__name__)


class DisclosureController:
    """Two-state (hidden/visible) machine per post."""

    def __init__(self, state: ViewState):
        self.state = state

    def register_all(self) -> int:
        """
        Create a hidden entry for every indexed post and apply the hidden visuals.

        Returns:
            Number of entries created
        """
        self.state.entries = {}
        for post_id, controls in self.state.controls.items():
            if controls.section is None or controls.button is None:
                logger.warning(f"Post {post_id} is missing its section or button, skipping")
                continue
            entry = DisclosureEntry(post_id)
            self.state.entries[post_id] = entry
            self._apply(entry, controls)
        return len(self.state.entries)

    def clear(self) -> None:
        self.state.entries = {}

    def is_visible(self, post_id) -> bool:
        entry = self.state.entries.get(post_id)
        return bool(entry and entry.visible)

    def toggle(self, post_id) -> Union[DisclosureEntry, Sentinel]:
        """
        Flip a post's comment section between hidden and visible.

        Args:
            post_id: Post whose section to toggle

        Returns:
            The updated entry, NOT_PROVIDED for a missing id, or NOT_FOUND
            when the post is not in the current view
        """
        if not post_id:
            logger.warning("post_id parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        entry = self.state.entries.get(post_id)
        if entry is None:
            logger.warning(f"No comment section found for post {post_id}. Returning NOT_FOUND.")
            return NOT_FOUND

        entry.visible = not entry.visible
        self._apply(entry, self.state.controls[post_id])
        logger.debug(f"Post {post_id} comments {'shown' if entry.visible else 'hidden'}")
        return entry

    def toggle_comments(self, event: Event, post_id) -> Union[Tuple[ViewNode, ViewNode], Sentinel]:
        """Click handler body: toggle, then hand back the section and button touched."""
        if not event or not post_id:
            logger.warning("Required parameters not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        entry = self.toggle(post_id)
        if not entry:
            return entry

        controls = self.state.controls[post_id]
        return controls.section, controls.button

    def _apply(self, entry: DisclosureEntry, controls: PostControls) -> None:
        if entry.visible:
            controls.section.remove_class(VIEW_CONFIG["hidden_class"])
            controls.button.text = VIEW_CONFIG["hide_label"]
        else:
            controls.section.add_class(VIEW_CONFIG["hidden_class"])
            controls.button.text = VIEW_CONFIG["show_label"]
