"""selector_builder: fluent, immutable builder for CSS selector strings."""
from __future__ import annotations

__version__ = "0.1.0"

from selector_builder.builder import SelectorBuilder, css_selector_builder
from selector_builder.config import SelectorConfig
from selector_builder.errors import CardinalityError, OrderError, SelectorError
from selector_builder.expression import (
    ComplexSelector,
    CompoundSelector,
    SelectorExpression,
    combine,
)
from selector_builder.model import Combinator, Fragment, FragmentKind

__all__ = [
    "__version__",
    # builder
    "SelectorBuilder",
    "css_selector_builder",
    # expressions
    "CompoundSelector",
    "ComplexSelector",
    "SelectorExpression",
    "combine",
    # model
    "Fragment",
    "FragmentKind",
    "Combinator",
    # errors
    "SelectorError",
    "OrderError",
    "CardinalityError",
    # config
    "SelectorConfig",
]
