from objkit.codec.bridge import deserialize, serialize
from objkit.codec.errors import ConstructionError, ParseError, SerializationError

__all__ = [
    "serialize",
    "deserialize",
    "ParseError",
    "ConstructionError",
    "SerializationError",
]
