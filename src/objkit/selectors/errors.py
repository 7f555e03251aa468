"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selectors.model import PartKind

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorPartError(ValueError):
    """Raised when a part cannot be added to a selector."""

    def __init__(self, message: str, *, part: PartKind) -> None:
        super().__init__(message)
        self.part = part


class DuplicateSingularPartError(SelectorPartError):
    """Element, id or pseudo-element set a second time on one selector."""

    def __init__(self, part: PartKind) -> None:
        super().__init__(DUPLICATE_MESSAGE, part=part)


class OutOfOrderPartError(SelectorPartError):
    """A part added after a part that must follow it."""

    def __init__(self, part: PartKind, conflict: PartKind) -> None:
        super().__init__(ORDER_MESSAGE, part=part)
        self.conflict = conflict
