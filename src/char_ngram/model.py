"""
Character-level n-gram language model.

The model maps every window (a string of `window_length` characters) seen in
training to the distribution of characters that followed it, and generates
text by repeatedly sampling from the distribution of the current window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

import numpy as np
import pandas as pd

from .config import GenerateConfig, ModelConfig
from .windows import iter_transitions

logger = logging.getLogger(__name__)


@dataclass
class CharCount:
    """
    One character observed after a window.

    Attributes:
        character: The observed character
        count: Training occurrences right after the window
        probability: count / total count of the window
        cumulative_probability: Running sum of probability in stored order
    """

    character: str
    count: int = 0
    probability: float = 0.0
    cumulative_probability: float = 0.0

    def __str__(self) -> str:
        return f"({self.character} {self.count} {self.probability} {self.cumulative_probability})"


class Distribution:
    """Ordered, unique-by-character collection of CharCount entries.

    Entries keep first-seen order; sampling and cumulative sums both rely on it.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, CharCount] = {}

    def update(self, character: str) -> None:
        """Count one more occurrence of `character`, appending it if new."""
        entry = self._entries.get(character)
        if entry is None:
            entry = CharCount(character)
            self._entries[character] = entry
        entry.count += 1

    def get(self, character: str) -> Optional[CharCount]:
        return self._entries.get(character)

    def total(self) -> int:
        return sum(cc.count for cc in self._entries.values())

    def calculate_probabilities(self) -> None:
        """Recompute probability and cumulative_probability of every entry."""
        total = self.total()
        if total == 0:
            return

        cumulative = 0.0
        for cc in self._entries.values():
            cc.probability = cc.count / total
            cumulative += cc.probability
            cc.cumulative_probability = cumulative

    def last(self) -> CharCount:
        """Most recently added entry; raises ValueError when empty."""
        if not self._entries:
            raise ValueError("Distribution has no entries")
        return next(reversed(self._entries.values()))

    def __iter__(self) -> Iterator[CharCount]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, character: object) -> bool:
        return character in self._entries

    def __str__(self) -> str:
        return "(" + " ".join(str(cc) for cc in self._entries.values()) + ")"


class LanguageModel:
    """
    Window -> Distribution table with a private random source.

    Training calls accumulate counts; use `clear` to start over.
    """

    def __init__(self, window_length: int, seed: Optional[int] = None):
        config = ModelConfig(window_length=window_length, seed=seed).validate()
        self.window_length = config.window_length
        self.seed = config.seed
        self._rng = np.random.default_rng(config.seed)
        self._table: Dict[str, Distribution] = {}

    @classmethod
    def from_config(cls, config: ModelConfig) -> "LanguageModel":
        return cls(config.window_length, seed=config.seed)

    def train(self, characters: Iterable[str]) -> None:
        """
        Count every (window, next character) transition in `characters`.

        A corpus shorter than the window length is ignored. Probabilities are
        recomputed over the whole table once the input is consumed.

        Args:
            characters: A string or any iterable of single characters
        """
        text = characters if isinstance(characters, str) else "".join(characters)
        if len(text) < self.window_length:
            logger.debug(
                f"Corpus of {len(text)} characters is shorter than window length "
                f"{self.window_length}; nothing to train"
            )
            return

        for window, c in iter_transitions(text, self.window_length):
            probs = self._table.get(window)
            if probs is None:
                probs = Distribution()
                self._table[window] = probs
            probs.update(c)

        for probs in self._table.values():
            probs.calculate_probabilities()

        logger.info(f"Trained on {len(text):,} characters; table holds {len(self._table):,} windows")

    def random_char(self, probs: Distribution) -> str:
        """Sample one character from `probs` by its cumulative probabilities.

        `probs` must be non-empty; an empty Distribution raises ValueError.
        """
        r = float(self._rng.random())
        for cc in probs:
            if cc.cumulative_probability > r:
                return cc.character
        # Rounding left the last cumulative sum at or below r.
        return probs.last().character

    def generate(self, initial_text: str, text_length: int) -> str:
        """
        Extend `initial_text` by up to `text_length` sampled characters.

        Returns `initial_text` unchanged when it is shorter than the window,
        and stops early at the first window never seen in training.
        """
        GenerateConfig(initial_text=initial_text, length=text_length).validate()
        if len(initial_text) < self.window_length:
            logger.debug("Initial text is shorter than the window; returning it unchanged")
            return initial_text

        generated: List[str] = list(initial_text)
        window = initial_text[-self.window_length:]

        for i in range(text_length):
            probs = self._table.get(window)
            if probs is None:
                logger.debug(f"Window {window!r} unseen in training; stopped after {i} characters")
                break
            next_char = self.random_char(probs)
            generated.append(next_char)
            window = window[1:] + next_char

        return "".join(generated)

    def generate_from_config(self, config: GenerateConfig) -> str:
        return self.generate(config.initial_text, config.length)

    def distribution(self, window: str) -> Optional[Distribution]:
        return self._table.get(window)

    def windows(self) -> List[str]:
        return list(self._table)

    def clear(self) -> None:
        """Drop all learned counts. The random source is left as is."""
        self._table.clear()

    def to_frame(self) -> pd.DataFrame:
        """Flatten the table into one row per (window, character)."""
        rows = [
            {
                "window": window,
                "character": cc.character,
                "count": cc.count,
                "probability": cc.probability,
                "cumulative_probability": cc.cumulative_probability,
            }
            for window, probs in self._table.items()
            for cc in probs
        ]
        return pd.DataFrame(
            rows,
            columns=["window", "character", "count", "probability", "cumulative_probability"],
        )

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, window: object) -> bool:
        return window in self._table

    def __str__(self) -> str:
        return "".join(f"{window} : {probs}\n" for window, probs in self._table.items())
