"""CSS selector builder -- public re-exports."""

from objkit.selectors.builder import (
    SelectorBuilder,
    combine,
    css_selector_builder,
    new_selector,
)
from objkit.selectors.errors import (
    DuplicateSingularPartError,
    OutOfOrderPartError,
    SelectorPartError,
)
from objkit.selectors.model import (
    Combinator,
    CompositeSelector,
    PartKind,
    Selector,
    SelectorFragment,
)

__all__ = [
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    "new_selector",
    "combine",
    # model
    "PartKind",
    "Combinator",
    "Selector",
    "SelectorFragment",
    "CompositeSelector",
    # errors
    "SelectorPartError",
    "DuplicateSingularPartError",
    "OutOfOrderPartError",
]
