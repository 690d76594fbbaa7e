"""Cached brightness lookups and brightness ordering.

Rendering a character costs far more than a dictionary lookup, and text-art
pipelines look up the same small character set for every source pixel.
``BrightnessTable`` renders each character once and keeps the score.
"""

import threading
from collections.abc import Iterable

from glyphbright.core.brightness import BrightnessEvaluator
from glyphbright.utils.logging import get_logger

logger = get_logger(__name__)


class BrightnessTable:
    """Thread-safe memo of character brightness scores.

    Example:
        table = BrightnessTable()
        table["M"]
        table.score_many(" .:-=+*#%@")
    """

    def __init__(self, evaluator: BrightnessEvaluator | None = None) -> None:
        self._evaluator = evaluator if evaluator is not None else BrightnessEvaluator()
        self._scores: dict[str, int] = {}
        self._lock = threading.Lock()

    def __getitem__(self, character: str) -> int:
        with self._lock:
            cached = self._scores.get(character)
        if cached is not None:
            return cached

        # Evaluated outside the lock; a concurrent duplicate gives the same score.
        score = self._evaluator.evaluate(character)
        logger.debug("Brightness cached", character=character, brightness=score)
        with self._lock:
            return self._scores.setdefault(character, score)

    def __contains__(self, character: object) -> bool:
        with self._lock:
            return character in self._scores

    def __len__(self) -> int:
        with self._lock:
            return len(self._scores)

    def get(self, character: str, default: int | None = None) -> int | None:
        """Get a cached score without rendering."""
        with self._lock:
            return self._scores.get(character, default)

    def score_many(self, characters: Iterable[str]) -> dict[str, int]:
        """Score several characters, rendering only those not yet cached.

        Args:
            characters: Characters to score; duplicates are scored once

        Returns:
            Mapping of each distinct character to its brightness, in first-seen order
        """
        return {character: self[character] for character in dict.fromkeys(characters)}

    def as_dict(self) -> dict[str, int]:
        """Snapshot of all cached scores."""
        with self._lock:
            return dict(self._scores)


def rank_characters(
    characters: Iterable[str],
    table: BrightnessTable | None = None,
) -> list[tuple[str, int]]:
    """Order distinct characters from darkest to brightest.

    Ties keep the order in which characters first appear.

    Args:
        characters: Characters to rank
        table: Table to score with (a fresh one if None)

    Returns:
        List of (character, brightness) pairs in ascending brightness
    """
    if table is None:
        table = BrightnessTable()
    scores = table.score_many(characters)
    return sorted(scores.items(), key=lambda item: item[1])
