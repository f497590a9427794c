from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def read_corpus(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole text file as one corpus string.

    Read and decode errors propagate to the caller.
    """

    text = Path(path).read_text(encoding=encoding)
    logger.info(f"Read {len(text):,} characters from {path}")
    return text


def load_corpus_csv(path: str | Path, column: str = "text", separator: str = "\n") -> str:
    df = pd.read_csv(path)
    if column not in df.columns:
        raise ValueError(f"CSV must have column: {column}")
    text = separator.join(df[column].dropna().astype(str).tolist())
    logger.info(f"Loaded {len(df)} rows ({len(text):,} characters) from {path}")
    return text
