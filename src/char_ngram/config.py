"""
Configuration for the character n-gram language model.

Both configs are frozen dataclasses; build them directly, or from a plain
dictionary (e.g. a JSON file) with `from_dict`, which ignores unknown keys.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class ModelConfig:
    """
    Settings fixed for the lifetime of a model.

    Attributes:
        window_length: Number of preceding characters used as lookup key
        seed: Random seed; None means entropy-seeded, non-reproducible output
    """

    window_length: int = 4
    seed: Optional[int] = None

    def validate(self) -> "ModelConfig":
        """Raise InvalidConfiguration unless window_length is a positive int."""
        # bool is an int subclass but never a meaningful window length
        if isinstance(self.window_length, bool) or not isinstance(self.window_length, int):
            raise InvalidConfiguration(
                f"window_length must be an integer, got {self.window_length!r}"
            )
        if self.window_length < 1:
            raise InvalidConfiguration(
                f"window_length must be >= 1, got {self.window_length}"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfiguration(f"seed must be an integer, got {self.seed!r}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "ModelConfig":
        """Create ModelConfig from dictionary."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class GenerateConfig:
    """
    Settings for one generation run.

    Attributes:
        initial_text: Seed text; must hold at least window_length characters
        length: Maximum number of characters to append
    """

    initial_text: str = ""
    length: int = 200

    def validate(self) -> "GenerateConfig":
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 0:
            raise InvalidConfiguration(f"length must be a non-negative integer, got {self.length!r}")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "GenerateConfig":
        """Create GenerateConfig from dictionary."""
        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def to_dict(self) -> Dict:
        return asdict(self)
