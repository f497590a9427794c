"""Character-level n-gram language model.

Train a `LanguageModel` on a corpus string, then `generate` text from a seed.
"""

from .config import GenerateConfig, ModelConfig
from .errors import InvalidConfiguration
from .model import CharCount, Distribution, LanguageModel

__version__ = "0.1.0"

__all__ = [
    "CharCount",
    "Distribution",
    "GenerateConfig",
    "InvalidConfiguration",
    "LanguageModel",
    "ModelConfig",
]
