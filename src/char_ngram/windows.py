from __future__ import annotations

from typing import Iterator


def char_ngrams(text: str, n: int) -> list[str]:
    """All n-character windows of `text`, in order."""

    if n <= 0:
        raise ValueError("n must be >= 1")
    return [text[i : i + n] for i in range(0, max(0, len(text) - n + 1))]


def iter_transitions(text: str, n: int) -> Iterator[tuple[str, str]]:
    """Yield (window, next_char) for every window that has a follower."""

    if n <= 0:
        raise ValueError("n must be >= 1")
    if len(text) < n:
        return

    window = text[:n]
    for c in text[n:]:
        yield window, c
        window = window[1:] + c
