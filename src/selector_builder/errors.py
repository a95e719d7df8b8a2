"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selector_builder.model import Fragment, FragmentKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
CARDINALITY_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for all selector_builder errors."""

    def __init__(
        self,
        message: str,
        *,
        kind: FragmentKind | None = None,
        fragments: tuple[Fragment, ...] = (),
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.fragments = fragments


class OrderError(SelectorError):
    """A fragment was added after a fragment that must follow it."""

    def __init__(self, message: str = ORDER_MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)


class CardinalityError(SelectorError):
    """A singular fragment (element, id, pseudo-element) was added twice."""

    def __init__(self, message: str = CARDINALITY_MESSAGE, **kwargs) -> None:
        super().__init__(message, **kwargs)
