"""objkit: rectangle records, a JSON record bridge and a CSS selector builder."""

__version__ = "0.1.0"

from objkit.codec import (  # noqa: E402
    ConstructionError,
    ParseError,
    SerializationError,
    deserialize,
    serialize,
)
from objkit.selectors import (  # noqa: E402
    DuplicateSelectorPartError,
    SelectorBuilder,
    SelectorError,
    SelectorOrderError,
    SelectorState,
    Stage,
    combine,
    css_selector_builder,
    stringify,
)
from objkit.shapes import Rectangle, make_rectangle  # noqa: E402

__all__ = [
    "__version__",
    # shapes
    "Rectangle",
    "make_rectangle",
    # codec
    "serialize",
    "deserialize",
    "ParseError",
    "ConstructionError",
    "SerializationError",
    # selectors
    "SelectorBuilder",
    "SelectorState",
    "Stage",
    "css_selector_builder",
    "combine",
    "stringify",
    "SelectorError",
    "DuplicateSelectorPartError",
    "SelectorOrderError",
]
