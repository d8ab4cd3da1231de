from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import asdict, dataclass, replace
from typing import Any

from ._format import can_preview, iter_repr
from ._log import logger

_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide display settings.

    Read it with `get_config()`, change it with `set_config()`.

    Args:
        max_items (int): Number of elements shown by `repr()`. Defaults to 10.
        preview (bool): Whether `repr()` may iterate the producer at all. Defaults to True.
            Producers over a one-shot iterator or a `from_fn()` factory are never previewed.

    Example:
    ```python
    >>> import seqchain as sc
    >>> sc.Config(max_items=3).iter_repr(range(10))
    '0, 1, 2, ...'
    >>> sc.Config(preview=False).iter_repr(range(10))
    '...'
    >>> sc.Config().iter_repr(iter(range(10)))
    '...'

    ```
    """

    max_items: int = 10
    preview: bool = True

    def __post_init__(self) -> None:
        if (
            isinstance(self.max_items, bool)
            or not isinstance(self.max_items, int)
            or self.max_items < 0
        ):
            msg = f"max_items must be a non-negative int, got {self.max_items!r}"
            raise ValueError(msg)
        if not isinstance(self.preview, bool):
            msg = f"preview must be a bool, got {self.preview!r}"
            raise ValueError(msg)

    @classmethod
    def from_env(cls) -> Config:
        """Build a `Config` from `SEQCHAIN_MAX_ITEMS` and `SEQCHAIN_PREVIEW`, falling back to the defaults.

        An invalid `SEQCHAIN_MAX_ITEMS` is logged as a warning and ignored.
        """
        raw_max_items = os.environ.get("SEQCHAIN_MAX_ITEMS")
        raw_preview = os.environ.get("SEQCHAIN_PREVIEW")
        preview = (
            cls().preview
            if raw_preview is None
            else raw_preview.strip().lower() not in _FALSY
        )
        if raw_max_items is None:
            return cls(preview=preview)
        try:
            return cls(max_items=int(raw_max_items), preview=preview)
        except ValueError:
            logger.warning("ignoring invalid SEQCHAIN_MAX_ITEMS=%r", raw_max_items)
            return cls(preview=preview)

    def iter_repr(self, data: Iterable[Any]) -> str:
        """Preview **data**, unless previews are disabled or iterating it would consume it."""
        if not self.preview or not can_preview(data):
            return "..."
        return iter_repr(data, self.max_items)


_CONFIG = Config.from_env()


def get_config() -> Config:
    """Return the current `Config`."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the current `Config`.

    Args:
        **changes (Any): Field values to change.

    Returns:
        Config: The new current configuration.

    Raises:
        TypeError: If a key is not a `Config` field.
        ValueError: If a value is invalid.
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **changes)
    logger.debug("config updated: %s", asdict(_CONFIG))
    return _CONFIG
