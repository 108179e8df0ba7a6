"""
Character window language model.

Training maps every window of `window_length` characters in a corpus to a
FrequencyTable of the characters that followed it. Generation extends a
seed text by repeatedly sampling from the table of its trailing window.

Usage:
    model = LanguageModel(window_length=4, seed=42)
    model.train("corpus.txt")
    print(model.generate("the ", 200))
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, TextIO

import numpy as np

from .config import ModelConfig
from .corpus import CorpusConfig, normalize_corpus, read_corpus
from .frequency import FrequencyTable

logger = logging.getLogger(__name__)


class LanguageModel:
    """
    Window-to-next-character model.

    Attributes:
        window_length: Number of characters used as lookup context
        windows: Read-only view of window -> FrequencyTable

    The random generator is model-scoped state that advances with every
    sampled character. Models built with the same seed and trained on the
    same corpus produce the same text.
    """

    def __init__(self, window_length: int, seed: int | None = None) -> None:
        if not isinstance(window_length, int) or window_length < 1:
            raise ValueError("window_length must be >= 1")

        self._window_length = window_length
        self._rng = np.random.default_rng(seed)
        self._tables: dict[str, FrequencyTable] = {}

    @classmethod
    def from_config(cls, config: ModelConfig) -> "LanguageModel":
        return cls(config.window_length, seed=config.seed)

    @property
    def window_length(self) -> int:
        return self._window_length

    @property
    def windows(self) -> Mapping[str, FrequencyTable]:
        return MappingProxyType(self._tables)

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, window: object) -> bool:
        return window in self._tables

    def table(self, window: str) -> FrequencyTable | None:
        return self._tables.get(window)

    def train(self, source: str | Path | TextIO, config: CorpusConfig | None = None) -> None:
        """Read a corpus file (or stream) and train on its full text."""
        corpus = read_corpus(source)
        if config is not None:
            corpus = normalize_corpus(corpus, config)
        self.train_text(corpus)

    def train_text(self, corpus: str) -> None:
        """
        Count every (window, next character) pair, then finalize all tables.

        Probabilities depend on the corpus-wide totals, so no table is
        finalized until the scan is complete. A corpus no longer than the
        window records nothing.
        """
        w = self._window_length
        positions = max(0, len(corpus) - w)

        for i in range(positions):
            window = corpus[i : i + w]
            table = self._tables.get(window)
            if table is None:
                table = FrequencyTable()
                self._tables[window] = table
            table.record(corpus[i + w])

        for table in self._tables.values():
            table.finalize()

        logger.info(
            "Trained on %d positions: %d distinct windows (window_length=%d)",
            positions,
            len(self._tables),
            w,
        )

    def get_random_char(self, table: FrequencyTable) -> str:
        return table.sample(self._rng)

    def generate(self, seed_text: str, target_length: int) -> str:
        """
        Extend `seed_text` one sampled character at a time.

        Args:
            seed_text: Text to start from
            target_length: Total length of the returned text

        Returns:
            The extended text. It is `seed_text` unchanged when the seed is
            shorter than the window, and stops early when the trailing window
            was never seen during training.
        """
        w = self._window_length
        if len(seed_text) < w:
            return seed_text

        out = list(seed_text)
        while len(out) < target_length:
            window = "".join(out[-w:])
            table = self._tables.get(window)
            if table is None:
                logger.debug("Unseen window %r after %d characters; stopping", window, len(out))
                break
            out.append(self.get_random_char(table))

        return "".join(out)

    def dump(self) -> str:
        """Human-readable listing of every window and its table."""
        return "".join(f"{window} : {table}\n" for window, table in self._tables.items())

    def __str__(self) -> str:
        return self.dump()
