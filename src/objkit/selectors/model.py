"""Selector model: part kinds, combinators, fragments and composites.

Each compound selector is made of up to six kinds of parts, which CSS
requires in a fixed order::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Selectors are immutable: every chained call returns a new ``Selector``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum, StrEnum

from objkit.selectors.errors import DuplicateSingularPartError, OutOfOrderPartError


class PartKind(IntEnum):
    """Selector part categories, valued by their required position."""

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def singular(self) -> bool:
        """True for categories that may appear at most once per selector."""
        return self in _SINGULAR


_SINGULAR = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

# PartKind -> SelectorFragment field holding that category.
_SLOTS: dict[PartKind, str] = {
    PartKind.ELEMENT: "element",
    PartKind.ID: "id",
    PartKind.CLASS: "classes",
    PartKind.ATTRIBUTE: "attributes",
    PartKind.PSEUDO_CLASS: "pseudo_classes",
    PartKind.PSEUDO_ELEMENT: "pseudo_element",
}


class Combinator(StrEnum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class SelectorFragment:
    """The parts of a single compound selector, in category order."""

    element: str | None = None
    id: str | None = None
    classes: tuple[str, ...] = ()
    attributes: tuple[str, ...] = ()
    pseudo_classes: tuple[str, ...] = ()
    pseudo_element: str | None = None

    def has(self, kind: PartKind) -> bool:
        return bool(getattr(self, _SLOTS[kind]))

    def render(self) -> str:
        out: list[str] = []
        if self.element:
            out.append(self.element)
        if self.id:
            out.append(f"#{self.id}")
        out.extend(f".{name}" for name in self.classes)
        out.extend(f"[{spec}]" for spec in self.attributes)
        out.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element:
            out.append(f"::{self.pseudo_element}")
        return "".join(out)


@dataclass(frozen=True)
class Selector:
    """A compound selector under construction.

    Part methods validate eagerly and return a new selector, so a selector
    can be shared and extended in several directions without interference.
    """

    fragment: SelectorFragment = field(default_factory=SelectorFragment)

    # --- singular parts -----------------------------------------------------

    def element(self, name: str) -> Selector:
        return self._with(PartKind.ELEMENT, element=name)

    def id(self, name: str) -> Selector:
        return self._with(PartKind.ID, id=name)

    def pseudo_element(self, name: str) -> Selector:
        return self._with(PartKind.PSEUDO_ELEMENT, pseudo_element=name)

    # --- repeatable parts ---------------------------------------------------

    def class_(self, name: str) -> Selector:
        return self._with(PartKind.CLASS, classes=self.fragment.classes + (name,))

    def attr(self, spec: str) -> Selector:
        """Append a raw attribute selector such as ``href$=".png"``."""
        return self._with(
            PartKind.ATTRIBUTE, attributes=self.fragment.attributes + (spec,)
        )

    def pseudo_class(self, name: str) -> Selector:
        return self._with(
            PartKind.PSEUDO_CLASS,
            pseudo_classes=self.fragment.pseudo_classes + (name,),
        )

    # --- rendering ----------------------------------------------------------

    def stringify(self) -> str:
        return self.fragment.render()

    def __str__(self) -> str:
        return self.stringify()

    # --- internals ----------------------------------------------------------

    def _with(self, kind: PartKind, **changes: object) -> Selector:
        self._check(kind)
        return Selector(fragment=replace(self.fragment, **changes))

    def _check(self, kind: PartKind) -> None:
        """Raise if *kind* may not be added to this selector."""
        if kind.singular and self.fragment.has(kind):
            raise DuplicateSingularPartError(kind)
        for later in PartKind:
            if later > kind and self.fragment.has(later):
                raise OutOfOrderPartError(kind, later)


@dataclass(frozen=True)
class CompositeSelector:
    """Two rendered selectors joined by a combinator.

    The combinator is padded with one space on each side, so the descendant
    combinator renders as three spaces.
    """

    left: str
    combinator: str
    right: str

    def stringify(self) -> str:
        return f"{self.left} {self.combinator} {self.right}"

    def __str__(self) -> str:
        return self.stringify()
