"""Path utilities shared by projection and patch modules."""

from __future__ import annotations

import json
from typing import Iterable

from .errors import PathResolutionError


def format_path(path: Iterable[str | int] | None) -> str:
    """Render *path* as a bracket path.

    ``[]`` → ``$``, ``["customer", 0, "id"]`` → ``$["customer"][0]["id"]``.
    """
    if not path:
        return "$"
    parts: list[str] = []
    for seg in path:
        if isinstance(seg, int) and not isinstance(seg, bool):
            parts.append(f"[{seg}]")
        else:
            parts.append(f"[{json.dumps(str(seg), ensure_ascii=False)}]")
    return "$" + "".join(parts)


def step(container: object, seg: str | int, prefix: tuple[str | int, ...]) -> object:
    """Index one level into *container*.

    *prefix* is the path up to and including *seg*, used for error messages.
    """
    if isinstance(container, dict):
        if not isinstance(seg, str):
            raise PathResolutionError(prefix, seg, "expected an object key")
        if seg not in container:
            raise PathResolutionError(prefix, seg, "key not found")
        return container[seg]
    if isinstance(container, list):
        if not isinstance(seg, int) or isinstance(seg, bool):
            raise PathResolutionError(prefix, seg, "expected an array index")
        if not 0 <= seg < len(container):
            raise PathResolutionError(prefix, seg, "index out of range")
        return container[seg]
    raise PathResolutionError(prefix, seg, "not a container")


def resolve(data: object, path: Iterable[str | int]) -> object:
    """Return the value at *path*, raising ``PathResolutionError``."""
    current = data
    walked: tuple[str | int, ...] = ()
    for seg in path:
        walked += (seg,)
        current = step(current, seg, walked)
    return current


def get_value_at_path(data: object, path: Iterable[str | int]) -> object:
    """Get the value at a given path in data, or None if it does not resolve."""
    try:
        return resolve(data, path)
    except PathResolutionError:
        return None
