"""
Sentinel values

Falsy markers returned instead of raising, so callers can tell
"nothing was attempted" apart from "looked, but it is not there".
"""


class Sentinel:
    """A named, falsy singleton."""

    def __init__(self, name: str):
        self.name = name

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"<{self.name}>"


# A required argument was missing; no work was attempted
NOT_PROVIDED = Sentinel("NOT_PROVIDED")

# The requested element is not part of the current view
NOT_FOUND = Sentinel("NOT_FOUND")
