"""Selector model: Stage ranks and the immutable SelectorState value."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import IntEnum

from objkit.selectors.errors import DuplicateSelectorPartError, SelectorOrderError

log = logging.getLogger(__name__)


class Stage(IntEnum):
    """Rank of the selector part category appended last.

    Parts must be appended in non-decreasing rank order.
    """

    EMPTY = 0
    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


# Categories that may appear at most once per compound selector.
SINGLE_USE = frozenset({Stage.ELEMENT, Stage.ID, Stage.PSEUDO_ELEMENT})


@dataclass(frozen=True)
class SelectorState:
    """A selector under construction.

    Every builder method returns a new state; ``self`` is never modified,
    so a state stays usable after a failed call and any number of chains
    can branch from it.
    """

    text: str = ""
    stage: Stage = Stage.EMPTY

    def __post_init__(self) -> None:
        object.__setattr__(self, "stage", Stage(self.stage))

    def _append(self, stage: Stage, fragment: str) -> SelectorState:
        if stage in SINGLE_USE and stage == self.stage:
            log.debug("Rejected repeated %s %r in %r", stage.label, fragment, self.text)
            raise DuplicateSelectorPartError(stage)
        if stage < self.stage:
            log.debug(
                "Rejected %s %r after %s in %r",
                stage.label,
                fragment,
                self.stage.label,
                self.text,
            )
            raise SelectorOrderError(stage, self.stage)
        return replace(self, text=self.text + fragment, stage=stage)

    # --- parts ------------------------------------------------------------------

    def element(self, value: str) -> SelectorState:
        return self._append(Stage.ELEMENT, value)

    def id(self, value: str) -> SelectorState:
        return self._append(Stage.ID, f"#{value}")

    def class_(self, value: str) -> SelectorState:
        return self._append(Stage.CLASS, f".{value}")

    def attr(self, value: str) -> SelectorState:
        return self._append(Stage.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorState:
        return self._append(Stage.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> SelectorState:
        return self._append(Stage.PSEUDO_ELEMENT, f"::{value}")

    # --- output -----------------------------------------------------------------

    def stringify(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text


EMPTY_SELECTOR = SelectorState()
