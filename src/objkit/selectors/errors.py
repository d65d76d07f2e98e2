"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objkit.selectors.model import Stage

DUPLICATE_PART_MESSAGE = (
    "element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
PART_ORDER_MESSAGE = (
    "selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base class for selector builder failures."""


class DuplicateSelectorPartError(SelectorError):
    """Raised when a single-use part (element, id, pseudo-element) repeats."""

    def __init__(self, part: Stage) -> None:
        self.part = part
        super().__init__(DUPLICATE_PART_MESSAGE)


class SelectorOrderError(SelectorError):
    """Raised when a part is appended after a part of a later category."""

    def __init__(self, part: Stage, after: Stage) -> None:
        self.part = part
        self.after = after
        super().__init__(PART_ORDER_MESSAGE)
