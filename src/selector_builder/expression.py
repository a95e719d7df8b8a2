"""Selector expressions: compound (flat) and complex (combined) selectors.

A compound selector is an ordered tuple of fragments::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may repeat

A complex selector joins two expressions with a combinator. Both are frozen,
so every builder call returns a new value and never alters its receiver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Union

from selector_builder.errors import CardinalityError, OrderError
from selector_builder.model import Combinator, Fragment, FragmentKind

__all__ = ["CompoundSelector", "ComplexSelector", "SelectorExpression", "combine"]

logger = logging.getLogger("selector_builder")


@dataclass(frozen=True)
class CompoundSelector:
    """A flat sequence of fragments in element-to-pseudo-element order."""

    fragments: tuple[Fragment, ...] = ()

    # --- fragment builders ----------------------------------------------------

    def element(self, name: str) -> CompoundSelector:
        return self.append(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> CompoundSelector:
        return self.append(FragmentKind.ID, name)

    def class_(self, name: str) -> CompoundSelector:
        return self.append(FragmentKind.CLASS, name)

    def attr(self, expr: str) -> CompoundSelector:
        """Append an attribute fragment; *expr* is the raw bracket content."""
        return self.append(FragmentKind.ATTRIBUTE, expr)

    def pseudo_class(self, name: str) -> CompoundSelector:
        return self.append(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> CompoundSelector:
        return self.append(FragmentKind.PSEUDO_ELEMENT, name)

    def append(self, kind: FragmentKind, value: str) -> CompoundSelector:
        """Return a new selector with a *kind* fragment appended.

        Raises CardinalityError if *kind* is singular and already present,
        and OrderError if a fragment of a later kind is already present.
        """
        self._check(kind)
        logger.debug("Appending %s fragment %r", kind.value, value)
        return CompoundSelector(fragments=self.fragments + (Fragment(kind, value),))

    def _check(self, kind: FragmentKind) -> None:
        if kind.singular and any(f.kind is kind for f in self.fragments):
            logger.debug("Rejected repeated %s fragment", kind.value)
            raise CardinalityError(kind=kind, fragments=self.fragments)
        if kind.rank < self.highest_rank:
            logger.debug(
                "Rejected %s fragment after %s",
                kind.value,
                self.fragments[-1].kind.value,
            )
            raise OrderError(kind=kind, fragments=self.fragments)

    @property
    def highest_rank(self) -> int:
        """Highest kind rank present, or -1 for an empty selector."""
        return max((f.kind.rank for f in self.fragments), default=-1)

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        return "".join(f.render() for f in self.fragments)

    def __str__(self) -> str:
        return self.stringify()


@dataclass(frozen=True)
class ComplexSelector:
    """Two selector expressions joined by a combinator."""

    left: SelectorExpression
    combinator: Combinator
    right: SelectorExpression

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator.value} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


SelectorExpression = Union[CompoundSelector, ComplexSelector]


def combine(
    left: SelectorExpression,
    combinator: Combinator | str,
    right: SelectorExpression,
) -> ComplexSelector:
    """Join *left* and *right* with *combinator* (a member or its symbol)."""
    op = Combinator.coerce(combinator)
    logger.debug("Combining selectors with %r", op.value)
    return ComplexSelector(left=left, combinator=op, right=right)
