from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ModelConfig:
    window_length: int = 4
    # None draws fresh OS entropy on every construction.
    seed: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ModelConfig":
        """Create a ModelConfig from a dictionary, ignoring unknown keys."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> dict:
        return {"window_length": self.window_length, "seed": self.seed}
