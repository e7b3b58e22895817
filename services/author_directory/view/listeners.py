"""
Listener Registry

This module attaches and detaches the click handlers on toggle buttons.
The handler created for a post is stored in a HandlerBinding and that same
reference is used to remove it, so detaching never misses a handler.
"""

import logging
from typing import Callable, List

from .disclosure import DisclosureController
from .nodes import Event
from .state import HandlerBinding, ViewState

logger = logging.getLogger(__name__)


class ListenerRegistry:
    """Keeps at most one click handler per post id."""

    def __init__(self, state: ViewState, disclosure: DisclosureController):
        self.state = state
        self.disclosure = disclosure

    def attach_all(self) -> List[HandlerBinding]:
        """
        Install a click handler on every indexed toggle button that lacks one.

        Returns:
            All active bindings
        """
        attached = 0
        for post_id, controls in self.state.controls.items():
            if not post_id or controls.button is None:
                continue
            if post_id in self.state.bindings:
                continue

            handler = self._make_handler(post_id)
            controls.button.add_event_listener("click", handler)
            self.state.bindings[post_id] = HandlerBinding(post_id, controls.button, handler)
            attached += 1

        logger.info(f"Attached {attached} click handlers ({len(self.state.bindings)} active)")
        return list(self.state.bindings.values())

    def detach_all(self) -> List[HandlerBinding]:
        """
        Remove every installed click handler.

        Returns:
            The bindings that were removed
        """
        removed = list(self.state.bindings.values())
        for binding in removed:
            if not binding.button.remove_event_listener("click", binding.handler):
                logger.warning(f"Handler for post {binding.post_id} was already gone")
        self.state.bindings = {}

        logger.info(f"Detached {len(removed)} click handlers")
        return removed

    def active_handler_count(self) -> int:
        return sum(binding.button.listener_count("click") for binding in self.state.bindings.values())

    def _make_handler(self, post_id) -> Callable[[Event], object]:
        def handle_click(event: Event):
            return self.disclosure.toggle_comments(event, post_id)
        return handle_click
