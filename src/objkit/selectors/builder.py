"""Selector builder facade.

Each part method starts a fresh chain from the empty template::

    css_selector_builder.element("a").attr('href$=".png"').pseudo_class("focus")

Compound selectors are joined with :func:`combine`, which is not subject
to part ordering.
"""

from __future__ import annotations

from objkit.selectors.model import EMPTY_SELECTOR, SelectorState, Stage

__all__ = ["SelectorBuilder", "css_selector_builder", "combine", "stringify"]


def combine(left: SelectorState, combinator: str, right: SelectorState) -> SelectorState:
    """Join two selectors with *combinator* (`` ``, ``>``, ``+`` or ``~``).

    Neither operand's stage carries over; the result starts at
    ``Stage.EMPTY``.
    """
    return SelectorState(text=f"{left.text} {combinator} {right.text}", stage=Stage.EMPTY)


def stringify(state: SelectorState) -> str:
    return state.text


class SelectorBuilder:
    """Entry point for building CSS selectors."""

    def __init__(self, template: SelectorState = EMPTY_SELECTOR) -> None:
        self._template = template

    def element(self, value: str) -> SelectorState:
        return self._template.element(value)

    def id(self, value: str) -> SelectorState:
        return self._template.id(value)

    def class_(self, value: str) -> SelectorState:
        return self._template.class_(value)

    def attr(self, value: str) -> SelectorState:
        return self._template.attr(value)

    def pseudo_class(self, value: str) -> SelectorState:
        return self._template.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorState:
        return self._template.pseudo_element(value)

    def combine(
        self, left: SelectorState, combinator: str, right: SelectorState
    ) -> SelectorState:
        return combine(left, combinator, right)

    def stringify(self, state: SelectorState | None = None) -> str:
        return stringify(self._template if state is None else state)


css_selector_builder = SelectorBuilder()
