"""
Refresh Orchestrator

This module coordinates the fetch-render-disclosure pipeline.
Every refresh runs detach -> clear -> build -> mount -> attach, and bootstrap
populates the author selector and wires the selection-change handler.
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from config import VIEW_CONFIG
from .gateway import DataGateway
from .models import Post, User
from .sentinels import NOT_FOUND, NOT_PROVIDED, Sentinel
from .view.builder import ViewBuilder
from .view.disclosure import DisclosureController
from .view.listeners import ListenerRegistry
from .view.nodes import Event, SelectControl, ViewNode
from .view.state import HandlerBinding, ViewState

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@dataclass
class RefreshResult:
    """Outcome of one refresh cycle."""

    removed: List[HandlerBinding]
    container: ViewNode
    generation: int
    nodes: List[ViewNode] = field(default_factory=list)
    added: List[HandlerBinding] = field(default_factory=list)
    # True when a later refresh started before this one finished building
    superseded: bool = False


@dataclass
class SelectionResult:
    user_id: Any
    posts: Union[List[Post], Sentinel]
    refresh: Union[RefreshResult, Sentinel]


@dataclass
class BootstrapResult:
    users: List[User]
    selector: Union[SelectControl, Sentinel]


class RefreshOrchestrator:
    """Drives bootstrap and every refresh of the mounted view."""

    def __init__(
        self,
        gateway: DataGateway,
        state: Optional[ViewState] = None,
        builder: Optional[ViewBuilder] = None
    ):
        """
        Initialize the orchestrator and the view components it coordinates.

        Args:
            gateway: DataGateway for remote reads
            state: View state to drive (default: a fresh page scaffold)
            builder: ViewBuilder (default: one built on the gateway)
        """
        self.gateway = gateway
        self.state = state or ViewState.create()
        self.builder = builder or ViewBuilder(gateway)
        self.disclosure = DisclosureController(self.state)
        self.listeners = ListenerRegistry(self.state, self.disclosure)
        # Bound once so the same reference is registered on every bootstrap
        self._change_handler = self.on_selection_change
        # Most recent selection change; only it may re-enable the selector
        self._latest_selection = 0

        logger.info("Refresh orchestrator initialized")

    async def refresh(self, posts: Optional[List[Post]]) -> Union[RefreshResult, Sentinel]:
        """
        Replace the mounted view with one built from the given posts.

        An empty list mounts the default placeholder. If another refresh
        starts while this one is building, this one's result is discarded.

        Args:
            posts: Posts to display

        Returns:
            RefreshResult, or NOT_PROVIDED if posts is missing
        """
        if posts is None or posts is NOT_PROVIDED:
            logger.warning("posts parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        generation = self.state.next_generation()
        container = self.state.container

        # Step 1: Detach handlers from the outgoing view
        removed = self.listeners.detach_all()

        # Step 2: Clear disclosure state, the post index and the container
        self.disclosure.clear()
        self.state.controls = {}
        container.clear_children()

        # Step 3: Build the new view
        if posts:
            fragment = await self.builder.build_posts(posts)
            nodes = list(fragment.children)
        else:
            nodes = [self.builder.build_default_view()]

        if generation != self.state.generation:
            logger.warning(
                f"Refresh {generation} superseded by refresh {self.state.generation}, discarding"
            )
            return RefreshResult(removed, container, generation, nodes, superseded=True)

        for node in nodes:
            container.append(node)

        # Step 4: Index, initialize disclosure and attach handlers
        self.state.index_controls()
        self.disclosure.register_all()
        added = self.listeners.attach_all()

        logger.info(f"Refresh {generation} mounted {len(nodes)} nodes")
        return RefreshResult(removed, container, generation, nodes, added)

    def populate_select_menu(self, users: Optional[List[User]]) -> Union[SelectControl, Sentinel]:
        """
        Replace the author selector's options with one option per user.

        Returns:
            The selector, NOT_PROVIDED if users is missing, or NOT_FOUND when
            the page has no selector
        """
        if users is None:
            logger.warning("users parameter not provided. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        selector = self.state.selector
        if selector is None:
            logger.warning("Select menu not found. Returning NOT_FOUND.")
            return NOT_FOUND

        for option in selector.options:
            selector.remove_child(option)
        for option in self.builder.build_select_options(users):
            selector.append(option)
        return selector

    async def bootstrap(self) -> BootstrapResult:
        """
        First load: fill the selector, register the change handler and show the placeholder.

        Returns:
            BootstrapResult with the fetched users and the selector
        """
        users = await self.gateway.fetch_users()
        selector = self.populate_select_menu(users)

        if selector:
            selector.add_event_listener("change", self._change_handler)

        # Through the refresh path so handlers, disclosure entries and the index are dropped
        await self.refresh([])

        logger.info(f"Bootstrap complete with {len(users)} users")
        return BootstrapResult(users, selector)

    async def on_selection_change(self, event: Event) -> Union[SelectionResult, Sentinel]:
        """
        Selection-change handler: fetch the chosen author's posts and refresh.

        The selector is disabled while the refresh runs and re-enabled only
        by the most recent selection change.
        """
        if not event or event.type != "change":
            logger.warning("Invalid or missing event parameter. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        selector = event.current_target
        if selector is None:
            logger.warning("Unable to get the select menu. Returning NOT_PROVIDED.")
            return NOT_PROVIDED

        self._latest_selection += 1
        selection = self._latest_selection

        selector.disabled = True
        try:
            user_id = selector.value or VIEW_CONFIG["fallback_user_id"]
            posts = await self.gateway.fetch_user_posts(user_id)
            refresh_result = await self.refresh(posts)
            return SelectionResult(user_id, posts, refresh_result)
        except Exception:
            logger.exception("Error handling selection change")
            return NOT_PROVIDED
        finally:
            if selection == self._latest_selection:
                selector.disabled = False

    async def select_author(self, user_id) -> Union[SelectionResult, Sentinel]:
        """
        Select an author programmatically, as if chosen in the selector.

        Args:
            user_id: Author to select

        Returns:
            The selection-change handler's result
        """
        selector = self.state.selector
        if selector is None:
            logger.warning("Select menu not found. Returning NOT_FOUND.")
            return NOT_FOUND

        selector.value = user_id
        result = NOT_PROVIDED
        for outcome in selector.dispatch_event(Event("change")):
            if inspect.isawaitable(outcome):
                outcome = await outcome
            result = outcome
        return result
