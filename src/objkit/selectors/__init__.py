from objkit.selectors.builder import (
    SelectorBuilder,
    combine,
    css_selector_builder,
    stringify,
)
from objkit.selectors.errors import (
    DuplicateSelectorPartError,
    SelectorError,
    SelectorOrderError,
)
from objkit.selectors.model import EMPTY_SELECTOR, SINGLE_USE, SelectorState, Stage

__all__ = [
    "SelectorBuilder",
    "css_selector_builder",
    "combine",
    "stringify",
    "SelectorState",
    "Stage",
    "SINGLE_USE",
    "EMPTY_SELECTOR",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
