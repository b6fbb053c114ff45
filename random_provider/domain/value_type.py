from enum import Enum
from typing import Protocol


class RandomSource(Protocol):
    """Anything exposing a uniform draw in [0, 1), e.g. ``random.Random``."""

    def random(self) -> float: ...


class ValueType(str, Enum):
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRUCTURED_VALUE = "structuredvalue"
    TEXT = "text"
    UNKNOWN = "unknown"

    @classmethod
    def from_tag(cls, tag: str) -> "ValueType":
        """Map a case-insensitive type tag (or one of its aliases) to a ValueType."""
        return _TAG_ALIASES.get((tag or "").lower(), cls.UNKNOWN)


_TAG_ALIASES = {
    "boolean": ValueType.BOOLEAN,
    "number": ValueType.NUMBER,
    "float": ValueType.NUMBER,
    "integer": ValueType.NUMBER,
    "structuredvalue": ValueType.STRUCTURED_VALUE,
    "text": ValueType.TEXT,
    "string": ValueType.TEXT,
}
