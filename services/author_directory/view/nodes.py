"""
View Nodes

This module defines the in-memory document the view layer builds and mounts.
Nodes carry a tag, text, classes, data attributes and per-event listener lists,
and follow DOM semantics where it matters: appending a Fragment moves its
children, and removing a listener requires the exact callable that was added.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional


@dataclass
class Event:
    """An event dispatched to a node's listeners."""

    type: str
    target: Optional['ViewNode'] = None
    current_target: Optional['ViewNode'] = None


class ViewNode:
    """A single element in the view tree."""

    def __init__(self, tag: str, text: str = "", class_name: str = ""):
        self.tag = tag
        self.text = text
        self.classes: List[str] = class_name.split() if class_name else []
        self.data: Dict[str, Any] = {}
        self.attrs: Dict[str, Any] = {}
        self.children: List['ViewNode'] = []
        self.parent: Optional['ViewNode'] = None
        self._listeners: Dict[str, List[Callable]] = {}

    def __repr__(self) -> str:
        return f"<ViewNode {self.tag} classes={self.classes} data={self.data}>"

    # Tree

    def append(self, child: 'ViewNode') -> 'ViewNode':
        """
        Append a child node, or move every child of a Fragment.

        Args:
            child: Node or Fragment to append

        Returns:
            The appended node (the now-empty Fragment for fragments)
        """
        if isinstance(child, Fragment):
            for node in list(child.children):
                self.append(node)
            return child

        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: 'ViewNode') -> 'ViewNode':
        self.children.remove(child)
        child.parent = None
        return child

    def clear_children(self) -> int:
        """Remove every child, last first. Returns how many were removed."""
        removed = 0
        while self.children:
            self.remove_child(self.children[-1])
            removed += 1
        return removed

    def iter_descendants(self) -> Iterator['ViewNode']:
        """Depth-first, document-order walk below this node."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def find_all(self, tag: Optional[str] = None) -> List['ViewNode']:
        return [node for node in self.iter_descendants() if tag is None or node.tag == tag]

    def contains(self, node: 'ViewNode') -> bool:
        current = node.parent
        while current is not None:
            if current is self:
                return True
            current = current.parent
        return False

    @property
    def text_content(self) -> str:
        """Own text followed by the text of every descendant."""
        return self.text + "".join(child.text_content for child in self.children)

    # Classes

    def add_class(self, name: str) -> None:
        if name not in self.classes:
            self.classes.append(name)

    def remove_class(self, name: str) -> None:
        if name in self.classes:
            self.classes.remove(name)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    # Events

    def add_event_listener(self, event_type: str, handler: Callable) -> None:
        """Register a handler; registering the same callable twice is a no-op."""
        handlers = self._listeners.setdefault(event_type, [])
        if not any(existing is handler for existing in handlers):
            handlers.append(handler)

    def remove_event_listener(self, event_type: str, handler: Callable) -> bool:
        """
        Remove a previously registered handler.

        Only the identical callable is removed; an equivalent closure built
        later does not match.

        Returns:
            True if a handler was removed
        """
        handlers = self._listeners.get(event_type, [])
        for index, existing in enumerate(handlers):
            if existing is handler:
                del handlers[index]
                return True
        return False

    def listener_count(self, event_type: Optional[str] = None) -> int:
        if event_type is not None:
            return len(self._listeners.get(event_type, []))
        return sum(len(handlers) for handlers in self._listeners.values())

    def dispatch_event(self, event: Event) -> List[Any]:
        """
        Invoke this node's listeners for the event type, in registration order.

        Returns:
            The handlers' return values; async handlers return awaitables
            the caller is responsible for awaiting
        """
        if event.target is None:
            event.target = self
        event.current_target = self
        return [handler(event) for handler in list(self._listeners.get(event.type, []))]


class Fragment(ViewNode):
    """A parentless group of nodes that is emptied into whatever it is appended to."""

    def __init__(self):
        super().__init__("#fragment")


class SelectControl(ViewNode):
    """A select element whose options are its `option` children."""

    def __init__(self, element_id: str = ""):
        super().__init__("select")
        if element_id:
            self.attrs["id"] = element_id
        self.attrs["value"] = None
        self.attrs["disabled"] = False

    @property
    def options(self) -> List[ViewNode]:
        return [child for child in self.children if child.tag == "option"]

    @property
    def value(self) -> Any:
        return self.attrs["value"]

    @value.setter
    def value(self, value: Any) -> None:
        self.attrs["value"] = value

    @property
    def disabled(self) -> bool:
        return bool(self.attrs["disabled"])

    @disabled.setter
    def disabled(self, disabled: bool) -> None:
        self.attrs["disabled"] = disabled
