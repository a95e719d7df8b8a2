"""Selector model: fragment kinds, fragments, and combinators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kinds of compound-selector fragments, declared in required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the required fragment order."""
        return _RANKS[self]

    @property
    def singular(self) -> bool:
        """True if the kind may occur at most once per compound selector."""
        return self in _SINGULAR

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS = {kind: index for index, kind in enumerate(FragmentKind)}

_SINGULAR = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class Fragment:
    """A single selector token, e.g. an id ``#main`` or a class ``.item``."""

    kind: FragmentKind
    value: str  # name, or raw bracket content for attributes

    def render(self) -> str:
        return self.kind.render(self.value)


class Combinator(Enum):
    """Relational symbols joining two selectors."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @classmethod
    def coerce(cls, value: Combinator | str) -> Combinator:
        """Return the member for *value*, accepting members or literal symbols.

        Raises ValueError for anything that is not one of the four symbols.
        """
        if isinstance(value, cls):
            return value
        return cls(value)
