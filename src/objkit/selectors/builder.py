"""Selector builder facade.

Usage::

    from objkit.selectors import css_selector_builder as builder

    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data"),
    ).stringify()
    # 'div#main + table#data'
"""

from __future__ import annotations

import logging
from typing import Protocol

from objkit.selectors.model import CompositeSelector, Selector

logger = logging.getLogger("objkit.selectors")

__all__ = ["SelectorBuilder", "css_selector_builder", "new_selector", "combine"]


class Renderable(Protocol):
    def stringify(self) -> str: ...


Operand = str | Renderable


def new_selector() -> Selector:
    """Return an empty selector to start a chain from."""
    return Selector()


def _render(operand: Operand) -> str:
    if isinstance(operand, str):
        return operand
    return operand.stringify()


def combine(left: Operand, combinator: str, right: Operand) -> CompositeSelector:
    """Join two selectors (or selector strings) with *combinator*.

    Operands that are not strings are rendered immediately.
    """
    composite = CompositeSelector(
        left=_render(left), combinator=str(combinator), right=_render(right)
    )
    logger.debug(
        "Combined selectors: left=%r combinator=%r right=%r",
        composite.left,
        composite.combinator,
        composite.right,
    )
    return composite


class SelectorBuilder:
    """Stateless entry point: every part method starts a new selector."""

    def element(self, name: str) -> Selector:
        return new_selector().element(name)

    def id(self, name: str) -> Selector:
        return new_selector().id(name)

    def class_(self, name: str) -> Selector:
        return new_selector().class_(name)

    def attr(self, spec: str) -> Selector:
        return new_selector().attr(spec)

    def pseudo_class(self, name: str) -> Selector:
        return new_selector().pseudo_class(name)

    def pseudo_element(self, name: str) -> Selector:
        return new_selector().pseudo_element(name)

    def combine(
        self, left: Operand, combinator: str, right: Operand
    ) -> CompositeSelector:
        return combine(left, combinator, right)

    def stringify(self) -> str:
        return ""


css_selector_builder = SelectorBuilder()
