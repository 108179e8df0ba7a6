from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


class EmptyDistributionError(ValueError):
    """Raised when sampling from a table with no observations."""


@dataclass
class CharObservation:
    char: str
    count: int = 1
    p: float = 0.0
    cp: float = 0.0

    def __str__(self) -> str:
        return f"({self.char} {self.count} {self.p} {self.cp})"


class FrequencyTable:
    """Characters observed after one window, in first-seen order.

    `p` and `cp` are only meaningful after `finalize()`.
    """

    def __init__(self) -> None:
        self._obs: dict[str, CharObservation] = {}

    def __len__(self) -> int:
        return len(self._obs)

    def __contains__(self, char: object) -> bool:
        return char in self._obs

    def __iter__(self) -> Iterator[CharObservation]:
        return iter(self._obs.values())

    def __str__(self) -> str:
        return "(" + " ".join(str(o) for o in self._obs.values()) + ")"

    def get(self, char: str) -> CharObservation | None:
        return self._obs.get(char)

    def observations(self) -> list[CharObservation]:
        return list(self._obs.values())

    @property
    def total(self) -> int:
        return sum(o.count for o in self._obs.values())

    def record(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")

        obs = self._obs.get(char)
        if obs is None:
            self._obs[char] = CharObservation(char)
        else:
            obs.count += 1

    def finalize(self) -> None:
        total = self.total
        if total == 0:
            return

        acc = 0.0
        for obs in self._obs.values():
            obs.p = obs.count / total
            acc += obs.p
            obs.cp = acc

    def select(self, r: float) -> str:
        """Return the first character whose cumulative probability exceeds `r`.

        Falls back to the last character when rounding leaves the final
        `cp` just under `r`.
        """

        if not self._obs:
            raise EmptyDistributionError("cannot sample from an empty frequency table")

        last = None
        for obs in self._obs.values():
            if obs.cp > r:
                return obs.char
            last = obs
        return last.char

    def sample(self, rng: np.random.Generator) -> str:
        if not self._obs:
            raise EmptyDistributionError("cannot sample from an empty frequency table")
        return self.select(float(rng.random()))
