"""SelectorBuilder facade: entry point for building CSS selectors.

Example::

    builder = SelectorBuilder()
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selector_builder.expression import (
    ComplexSelector,
    CompoundSelector,
    SelectorExpression,
    combine,
)
from selector_builder.model import Combinator

__all__ = ["SelectorBuilder", "css_selector_builder"]

_EMPTY = CompoundSelector()


class SelectorBuilder:
    """Stateless facade that starts every chain from an empty selector."""

    def element(self, name: str) -> CompoundSelector:
        return _EMPTY.element(name)

    def id(self, name: str) -> CompoundSelector:
        return _EMPTY.id(name)

    def class_(self, name: str) -> CompoundSelector:
        return _EMPTY.class_(name)

    def attr(self, expr: str) -> CompoundSelector:
        return _EMPTY.attr(expr)

    def pseudo_class(self, name: str) -> CompoundSelector:
        return _EMPTY.pseudo_class(name)

    def pseudo_element(self, name: str) -> CompoundSelector:
        return _EMPTY.pseudo_element(name)

    def combine(
        self,
        left: SelectorExpression,
        combinator: Combinator | str,
        right: SelectorExpression,
    ) -> ComplexSelector:
        return combine(left, combinator, right)

    def stringify(self) -> str:
        """Render the empty selector (always ``""``)."""
        return _EMPTY.stringify()


css_selector_builder = SelectorBuilder()
