"""CLI command: selector-builder build -- assemble a selector from steps."""

from __future__ import annotations

import sys

import click

from selector_builder.config import SelectorConfig
from selector_builder.errors import SelectorError
from selector_builder.expression import CompoundSelector, SelectorExpression, combine
from selector_builder.model import Combinator, FragmentKind

# Combinator tokens as typed on a shell command line
_COMBINATOR_TOKENS = {
    ">": Combinator.CHILD,
    "+": Combinator.ADJACENT_SIBLING,
    "~": Combinator.GENERAL_SIBLING,
    " ": Combinator.DESCENDANT,
    "descendant": Combinator.DESCENDANT,
}


def build_from_steps(
    steps: list[str] | tuple[str, ...], config: SelectorConfig | None = None
) -> SelectorExpression:
    """Build a selector expression from ``kind=value`` and combinator steps.

    Compounds are joined right-associatively, so ``a + b ~ c`` becomes
    ``combine(a, "+", combine(b, "~", c))``.

    Raises click.BadParameter for malformed steps and SelectorError for
    fragments in the wrong order or repeated.
    """
    config = config or SelectorConfig()
    compounds: list[CompoundSelector] = []
    ops: list[Combinator] = []
    current: CompoundSelector | None = None

    for step in steps:
        if step in _COMBINATOR_TOKENS:
            if current is None:
                raise click.BadParameter(
                    f"combinator {step!r} has no selector on its left"
                )
            compounds.append(current)
            ops.append(_COMBINATOR_TOKENS[step])
            current = None
            continue

        kind, value = _parse_step(step, config.kind_separator)
        if current is None:
            current = CompoundSelector()
        current = current.append(kind, value)

    if current is None:
        if ops:
            raise click.BadParameter("trailing combinator has no selector on its right")
        raise click.BadParameter("no selector steps given")
    compounds.append(current)

    result: SelectorExpression = compounds[-1]
    for compound, op in zip(reversed(compounds[:-1]), reversed(ops)):
        result = combine(compound, op, result)
    return result


def _parse_step(step: str, separator: str) -> tuple[FragmentKind, str]:
    name, sep, value = step.partition(separator)
    if not sep or not value:
        raise click.BadParameter(
            f"expected kind{separator}value or a combinator, got {step!r}"
        )
    try:
        kind = FragmentKind(name.strip().lower())
    except ValueError:
        choices = ", ".join(k.value for k in FragmentKind)
        raise click.BadParameter(
            f"unknown fragment kind {name!r} (choose from {choices})"
        ) from None
    return kind, value


@click.command()
@click.argument("steps", nargs=-1, required=True)
@click.pass_obj
def build(config: SelectorConfig | None, steps: tuple[str, ...]) -> None:
    """Build a CSS selector from ordered STEPS and print it.

    Each step is kind=value (element, id, class, attr, pseudo-class,
    pseudo-element) or a combinator: '>', '+', '~' or 'descendant'.

    Example: selector-builder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        selector = build_from_steps(steps, config)
    except (SelectorError, click.BadParameter) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
