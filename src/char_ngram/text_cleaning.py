from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

import regex  # type: ignore


_WHITESPACE_RE = re.compile(r"\s+")
# Tabs and newlines are real corpus characters, keep them.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


@dataclass(frozen=True)
class CleanTextConfig:
    lowercase: bool = False
    strip_accents: bool = False
    remove_control_chars: bool = True
    normalize_whitespace: bool = False


def clean_text(text: str, config: CleanTextConfig | None = None) -> str:
    """Optional corpus normalization before character-level training.

    The defaults only drop control characters; everything else the model
    sees is learned as-is.
    """

    cfg = config or CleanTextConfig()
    s = text

    if cfg.lowercase:
        s = s.lower()

    if cfg.strip_accents:
        s = regex.sub(r"\p{Mn}+", "", unicodedata.normalize("NFKD", s))

    if cfg.remove_control_chars:
        s = _CONTROL_RE.sub("", s)

    if cfg.normalize_whitespace:
        s = _WHITESPACE_RE.sub(" ", s).strip()

    return s
