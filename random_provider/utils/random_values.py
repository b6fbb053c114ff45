"""
Random value generation for the context provider.

This module produces the values returned to the context broker. Each value is
selected by a type tag such as ``boolean`` or ``text``; unknown tags produce
``None`` rather than an error so the broker always receives a response.
"""

import logging
import math
import random
from typing import Any, Dict, Optional

from random_provider.domain.value_type import RandomSource, ValueType

logger = logging.getLogger(__name__)


class RandomValueGenerator:
    """
    Generator for random attribute values keyed by type tag.

    The random source is injected so callers (and tests) can supply a seeded
    ``random.Random`` or any object exposing ``random() -> float``.
    """

    # Exclusive upper bound for number values
    NUMBER_LIMIT = 43

    # Sentence length is MIN_WORDS plus up to WORD_SPREAD - 1 extra words
    MIN_WORDS = 5
    WORD_SPREAD = 10

    STRUCTURED_VALUE: Dict[str, Any] = {"somevalue": "this"}

    LOREM_IPSUM_WORDS = (
        "lorem ipsum dolor sit amet, consectetur adipisicing elit, sed do eiusmod tempor "
        "incididunt ut labore et dolore magna aliqua. enim ad minim veniam quis nostrud exercitation ullamco laboris nisi "
        "ut aliquip ex ea commodo consequat. duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore "
        "eu fugiat nulla pariatur. excepteur sint occaecat cupidatat non proident, sunt in culpa qui officia deserunt mollit"
    ).split()

    SENTENCE_ENDINGS = (".", "?")

    def __init__(self, rng: Optional[RandomSource] = None):
        """
        Initialize the generator.

        Args:
            rng: Source of uniform draws in [0, 1). Defaults to an unseeded ``random.Random``.
        """
        self.rng = rng if rng is not None else random.Random()

    def generate(self, type_tag: str) -> Any:
        """
        Generate one random value for a type tag.

        Args:
            type_tag: Case-insensitive tag, e.g. ``number`` or ``Text``

        Returns:
            The generated value, or None for unrecognized tags
        """
        value_type = ValueType.from_tag(type_tag)

        if value_type is ValueType.BOOLEAN:
            return self.rng.random() >= 0.5
        if value_type is ValueType.NUMBER:
            return self._draw_index(self.NUMBER_LIMIT)
        if value_type is ValueType.STRUCTURED_VALUE:
            return dict(self.STRUCTURED_VALUE)
        if value_type is ValueType.TEXT:
            return self.generate_text()

        logger.debug(f"No generator for type tag '{type_tag}', returning None")
        return None

    def generate_text(self) -> str:
        """
        Generate a lorem ipsum sentence of 5 to 14 words.

        Every word is preceded by a single space. A word following one that
        ends a sentence is capitalized.
        """
        word_count = self.MIN_WORDS + self._draw_index(self.WORD_SPREAD)

        text = ""
        for _ in range(word_count):
            word = self.LOREM_IPSUM_WORDS[self._draw_index(len(self.LOREM_IPSUM_WORDS))]
            if text.endswith(self.SENTENCE_ENDINGS):
                word = word[:1].upper() + word[1:]
            text += " " + word

        return text

    def _draw_index(self, limit: int) -> int:
        return math.floor(self.rng.random() * limit)
