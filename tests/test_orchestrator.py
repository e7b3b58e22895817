"""Tests for the refresh cycle, bootstrap and selection handling."""
import asyncio
import logging

from conftest import FAIL, default_routes
from services.author_directory.models import Company, Post, User
from services.author_directory.orchestrator import RefreshOrchestrator, RefreshResult, SelectionResult
from services.author_directory.sentinels import NOT_FOUND, NOT_PROVIDED
from services.author_directory.view.nodes import Event
from services.author_directory.view.state import ViewState


POSTS = [Post(id=1, title="T", body="B", user_id=1)]
OTHER_POSTS = [Post(id=11, title="Ervin's post", body="Hello", user_id=2)]


class TestRefresh:

    def test_refresh_fully_replaces_prior_content(self, orchestrator):
        async def scenario():
            first = await orchestrator.refresh(POSTS)
            second = await orchestrator.refresh(OTHER_POSTS)
            return first, second

        first, second = asyncio.run(scenario())
        container = orchestrator.state.container

        assert all(node.parent is None for node in first.nodes)
        assert not any(container.contains(node) for node in first.nodes)
        assert container.children == second.nodes
        assert [a.children[0].text for a in container.children] == ["Ervin's post"]

    def test_missing_posts_is_a_no_op(self, orchestrator):
        asyncio.run(orchestrator.refresh(POSTS))
        before = list(orchestrator.state.container.children)

        assert asyncio.run(orchestrator.refresh(None)) is NOT_PROVIDED
        assert asyncio.run(orchestrator.refresh(NOT_PROVIDED)) is NOT_PROVIDED
        assert orchestrator.state.container.children == before
        assert orchestrator.state.generation == 1

    def test_empty_posts_show_only_the_placeholder(self, orchestrator):
        asyncio.run(orchestrator.refresh(POSTS))

        result = asyncio.run(orchestrator.refresh([]))

        [placeholder] = orchestrator.state.container.children
        assert placeholder.text == "Select an Employee to display their posts."
        assert orchestrator.state.container.find_all("button") == []
        assert isinstance(result, RefreshResult)
        assert not result.superseded

    def test_removed_bindings_belong_to_outgoing_view(self, orchestrator):
        async def scenario():
            await orchestrator.refresh(POSTS)
            return await orchestrator.refresh(OTHER_POSTS)

        result = asyncio.run(scenario())

        assert [binding.post_id for binding in result.removed] == [1]
        assert [binding.post_id for binding in result.added] == [11]


class SlowAuthorGateway:
    """Gateway stub whose author lookups for user 1 take a while."""

    def __init__(self):
        self.calls = []

    async def fetch_user(self, user_id):
        self.calls.append(("user", user_id))
        if user_id == 1:
            await asyncio.sleep(0.05)
        return User(id=user_id, name=f"user {user_id}", company=Company("Acme", "Go"))

    async def fetch_post_comments(self, post_id):
        self.calls.append(("comments", post_id))
        return []


def test_latest_started_refresh_wins_when_overlapping():
    gateway = SlowAuthorGateway()
    orchestrator = RefreshOrchestrator(gateway)

    async def scenario():
        return await asyncio.gather(
            orchestrator.refresh(POSTS),
            orchestrator.refresh(OTHER_POSTS),
        )

    slow, fast = asyncio.run(scenario())

    assert slow.superseded
    assert not fast.superseded
    assert [a.children[0].text for a in orchestrator.state.container.children] == ["Ervin's post"]
    assert list(orchestrator.state.bindings) == [11]
    # the superseded refresh still ran its fetches to completion
    assert ("comments", 1) in gateway.calls


class TestBootstrap:

    def test_populates_selector_and_shows_placeholder(self, orchestrator):
        result = asyncio.run(orchestrator.bootstrap())

        selector = result.selector
        assert [(o.attrs["value"], o.text) for o in selector.options] == [(1, "Leanne"), (2, "Ervin")]
        assert selector.listener_count("change") == 1
        assert [n.text for n in orchestrator.state.container.children] == [
            "Select an Employee to display their posts."
        ]

    def test_failed_user_fetch_leaves_selector_empty(self, make_gateway, caplog):
        orchestrator = RefreshOrchestrator(make_gateway({**default_routes(), "/users": FAIL}))

        with caplog.at_level(logging.INFO):
            result = asyncio.run(orchestrator.bootstrap())

        assert result.users == []
        assert result.selector.options == []
        assert any(r.levelno == logging.ERROR for r in caplog.records)

    def test_bootstrapping_twice_registers_one_change_handler(self, orchestrator):
        asyncio.run(orchestrator.bootstrap())
        asyncio.run(orchestrator.bootstrap())

        assert orchestrator.state.selector.listener_count("change") == 1

    def test_bootstrap_after_selection_drops_previous_view_state(self, orchestrator):
        async def scenario():
            await orchestrator.bootstrap()
            selected = await orchestrator.select_author(1)
            await orchestrator.bootstrap()
            return selected

        selected = asyncio.run(scenario())
        state = orchestrator.state

        assert orchestrator.disclosure.toggle(1) is NOT_FOUND
        assert state.bindings == {}
        assert state.entries == {}
        assert state.controls == {}
        assert len(state.selector.options) == 2
        assert state.generation > selected.refresh.generation
        assert all(b.button.listener_count() == 0 for b in selected.refresh.added)
        assert [n.text for n in state.container.children] == [
            "Select an Employee to display their posts."
        ]

    def test_populate_without_selector_is_not_found(self, gateway):
        state = ViewState.create()
        state.selector = None
        orchestrator = RefreshOrchestrator(gateway, state=state)

        assert orchestrator.populate_select_menu([]) is NOT_FOUND
        assert orchestrator.populate_select_menu(None) is NOT_PROVIDED


class TestSelection:

    def test_selecting_an_author_renders_their_posts(self, orchestrator, request_log):
        async def scenario():
            await orchestrator.bootstrap()
            return await orchestrator.select_author(2)

        result = asyncio.run(scenario())

        assert isinstance(result, SelectionResult)
        assert result.user_id == 2
        assert [p.id for p in result.posts] == [11]
        assert not orchestrator.state.selector.disabled
        assert [a.children[0].text for a in orchestrator.state.container.children] == ["Ervin's post"]
        assert "/posts?userId=2" in request_log

    def test_selector_without_value_falls_back_to_first_author(self, orchestrator):
        async def scenario():
            await orchestrator.bootstrap()
            return await orchestrator.select_author(None)

        result = asyncio.run(scenario())

        assert result.user_id == 1
        assert len(orchestrator.state.container.children) == 2

    def test_selector_is_disabled_while_refreshing(self, orchestrator):
        seen = []
        original = orchestrator.refresh

        async def spying_refresh(posts):
            seen.append(orchestrator.state.selector.disabled)
            return await original(posts)

        orchestrator.refresh = spying_refresh

        async def scenario():
            await orchestrator.bootstrap()
            await orchestrator.select_author(1)

        asyncio.run(scenario())

        assert seen == [True]
        assert not orchestrator.state.selector.disabled

    def test_unexpected_error_is_logged_and_selector_released(self, orchestrator, caplog):
        async def broken_refresh(posts):
            raise RuntimeError("boom")

        orchestrator.refresh = broken_refresh

        async def scenario():
            await orchestrator.bootstrap()
            return await orchestrator.select_author(1)

        assert asyncio.run(scenario()) is NOT_PROVIDED
        assert not orchestrator.state.selector.disabled
        assert any("Error handling selection change" in r.getMessage() for r in caplog.records)

    def test_non_change_events_are_rejected(self, orchestrator):
        assert asyncio.run(orchestrator.on_selection_change(Event("click"))) is NOT_PROVIDED
        assert asyncio.run(orchestrator.on_selection_change(None)) is NOT_PROVIDED


class OverlappingSelectionGateway:
    """Gateway stub where user 1's author resolves first and user 2's last."""

    def __init__(self):
        self.orchestrator = None
        self.disabled_while_second_pending = []

    async def fetch_users(self):
        return [User(id=1, name="Leanne"), User(id=2, name="Ervin")]

    async def fetch_user_posts(self, user_id):
        return POSTS if user_id == 1 else OTHER_POSTS

    async def fetch_user(self, user_id):
        if user_id == 1:
            await asyncio.sleep(0.05)
        else:
            await asyncio.sleep(0.1)
            self.disabled_while_second_pending.append(self.orchestrator.state.selector.disabled)
        return User(id=user_id, name=f"user {user_id}", company=Company("Acme", "Go"))

    async def fetch_post_comments(self, post_id):
        return []


def test_earlier_selection_does_not_release_selector_during_later_one():
    gateway = OverlappingSelectionGateway()
    orchestrator = RefreshOrchestrator(gateway)
    gateway.orchestrator = orchestrator

    async def scenario():
        await orchestrator.bootstrap()
        return await asyncio.gather(
            orchestrator.select_author(1),
            orchestrator.select_author(2),
        )

    first, second = asyncio.run(scenario())

    assert first.refresh.superseded
    assert not second.refresh.superseded
    # the first selection finished while the second was still building
    assert gateway.disabled_while_second_pending == [True]
    assert not orchestrator.state.selector.disabled
