from collections.abc import Iterable, Iterator
from typing import Any

import cytoolz as cz


def can_preview(data: Iterable[Any]) -> bool:
    """Whether **data** can be iterated for a `repr()` without losing elements or running a factory."""
    return getattr(data, "_preview", not isinstance(data, Iterator))


def iter_repr(data: Iterable[Any], max_items: int) -> str:
    head = tuple(cz.itertoolz.take(max_items + 1, data))
    body = ", ".join(repr(item) for item in head[:max_items])
    if len(head) > max_items:
        return f"{body}, ..." if body else "..."
    return body
