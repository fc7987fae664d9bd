from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings for pyolazy.

    Args:
        trace_drives (bool): Log each drive start and each early release at DEBUG level.
        repr_max_chars (int): Maximum length of the producer name shown by `Enumerator.__repr__`.
    """

    trace_drives: bool = False
    repr_max_chars: int = 60

    def truncate(self, text: str) -> str:
        if len(text) <= self.repr_max_chars:
            return text
        return text[: max(self.repr_max_chars - 3, 0)] + "..."


_CONFIG = Config(trace_drives=_env_flag("PYOLAZY_TRACE"))


def get_config() -> Config:
    """Return the current `Config`."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace the current `Config` with a copy updated by **changes**.

    Args:
        **changes (Any): Fields of `Config` to override.

    Returns:
        Config: The previous configuration, so callers can restore it.

    Example:
    ```python
    >>> import pyolazy as pl
    >>> previous = pl.set_config(repr_max_chars=10)
    >>> pl.get_config().repr_max_chars
    10
    >>> _ = pl.set_config(**{"repr_max_chars": previous.repr_max_chars})

    ```
    """
    global _CONFIG  # noqa: PLW0603
    previous = _CONFIG
    _CONFIG = replace(_CONFIG, **changes)
    return previous
