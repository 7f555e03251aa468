"""objkit: rectangle values, JSON helpers and a CSS selector builder."""

from objkit.config import ObjkitConfig
from objkit.geometry import Rectangle, make_rectangle
from objkit.selectors import (
    Combinator,
    DuplicateSingularPartError,
    OutOfOrderPartError,
    SelectorBuilder,
    SelectorPartError,
    combine,
    css_selector_builder,
    new_selector,
)
from objkit.serialization import deserialize, serialize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ObjkitConfig",
    # geometry
    "Rectangle",
    "make_rectangle",
    # serialization
    "serialize",
    "deserialize",
    # selectors
    "SelectorBuilder",
    "css_selector_builder",
    "new_selector",
    "combine",
    "Combinator",
    "SelectorPartError",
    "DuplicateSingularPartError",
    "OutOfOrderPartError",
]
