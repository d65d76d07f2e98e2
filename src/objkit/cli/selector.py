"""CLI command: objkit selector -- build a CSS selector from part tokens."""

from __future__ import annotations

import sys

import click

from objkit.selectors import EMPTY_SELECTOR, SelectorError, SelectorState, combine

# Token kind -> SelectorState method name.
_PART_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}
_COMBINATOR = "combinator"


def _split_token(token: str) -> tuple[str, str]:
    kind, sep, value = token.partition("=")
    if not sep or (kind not in _PART_METHODS and kind != _COMBINATOR):
        raise click.BadParameter(
            f"expected KIND=VALUE with KIND one of "
            f"{', '.join([*_PART_METHODS, _COMBINATOR])}, got {token!r}",
            param_hint="TOKENS",
        )
    return kind, value


def build_selector(tokens: tuple[str, ...]) -> SelectorState:
    """Build a selector from ``kind=value`` tokens.

    A ``combinator=<c>`` token joins the compound before it with the one
    after it; an empty value means the descendant combinator.
    """
    compounds: list[SelectorState] = []
    combinators: list[str] = []
    current = EMPTY_SELECTOR
    for token in tokens:
        kind, value = _split_token(token)
        if kind == _COMBINATOR:
            if current is EMPTY_SELECTOR:
                raise click.BadParameter(
                    f"{token!r} must follow a selector part", param_hint="TOKENS"
                )
            compounds.append(current)
            combinators.append(value or " ")
            current = EMPTY_SELECTOR
            continue
        current = getattr(current, _PART_METHODS[kind])(value)

    if current is EMPTY_SELECTOR:
        raise click.BadParameter(
            "expected a selector part at the end", param_hint="TOKENS"
        )
    compounds.append(current)

    result = compounds[0]
    for combinator, right in zip(combinators, compounds[1:]):
        result = combine(result, combinator, right)
    return result


@click.command()
@click.argument("tokens", nargs=-1, required=True)
def selector(tokens: tuple[str, ...]) -> None:
    """Build a CSS selector from KIND=VALUE tokens and print it.

    Example: objkit selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    try:
        result = build_selector(tokens)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(result.stringify())
