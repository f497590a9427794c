from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a model or generation setting is out of range."""
