"""Merge an edited node projection back into the full document."""

from __future__ import annotations

import json
import logging
from typing import Iterable

from ._path import format_path, step
from .errors import Err, Ok, ParseError, PathResolutionError, Result

_LOG = logging.getLogger(__name__)

_MISSING = object()


def _reject_constant(name: str) -> object:
    raise ValueError(f"{name} is not valid JSON")


def loads_json(text: str, message: str = "Invalid JSON format") -> object:
    """Strict ``json.loads``.

    ``NaN`` and ``Infinity`` are rejected, and nesting too deep for the
    decoder is reported as a ``ParseError`` like any other invalid input.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        raise ParseError(message) from exc


def parse_edit(edited_text: str) -> object:
    """Parse the edited text, raising ``ParseError`` on invalid JSON."""
    return loads_json(edited_text)


def resolve_parent(
    document: object, path: Iterable[str | int]
) -> tuple[object, object]:
    """Locate the parent container and the current target of *path*.

    The target is ``_MISSING`` when the last segment names an absent
    object key. The empty path has no parent: ``(None, document)``.
    """
    path = tuple(path)
    if not path:
        return None, document

    parent = document
    walked: tuple[str | int, ...] = ()
    for seg in path[:-1]:
        walked += (seg,)
        parent = step(parent, seg, walked)

    last = path[-1]
    if isinstance(parent, dict) and isinstance(last, str) and last not in parent:
        return parent, _MISSING
    return parent, step(parent, last, path)


def merge_edit(
    target: object, edited: object, path: tuple[str | int, ...] = ()
) -> object:
    """Return the value that replaces *target* after an edit.

    Scalars are overwritten. An object edit on a container is a shallow
    merge, leaving keys it does not mention untouched. Anything else
    replaces the container wholesale.
    """
    if not isinstance(target, (dict, list)):
        _LOG.debug("overwrite scalar at %s", format_path(path))
        return edited
    if not isinstance(edited, dict):
        _LOG.debug("replace container at %s", format_path(path))
        return edited

    _LOG.debug("merge %d key(s) into %s", len(edited), format_path(path))
    if isinstance(target, dict):
        merged = dict(target)
        merged.update(edited)
        return merged

    items = list(target)
    for key, value in edited.items():
        if not (key.isascii() and key.isdigit()) or int(key) >= len(items):
            raise PathResolutionError(path + (key,), key, "not an index of this array")
        items[int(key)] = value
    return items


def _rebuild(node: object, path: tuple[str | int, ...], value: object) -> object:
    """Copy each container along *path*, putting *value* at its end."""
    if not path:
        return value
    head, rest = path[0], path[1:]
    if isinstance(node, dict):
        copy = dict(node)
        copy[head] = _rebuild(node.get(head), rest, value)
        return copy
    copy = list(node)
    copy[head] = _rebuild(node[head], rest, value)
    return copy


def apply_edit(
    edited_text: str, path: Iterable[str | int], document: object
) -> object:
    """Return a new document with *edited_text* written at *path*.

    Raises ``ParseError`` or ``PathResolutionError``; *document* itself is
    never modified.
    """
    edited = parse_edit(edited_text)
    path = tuple(path)
    if not path:
        _LOG.debug("replace document root")
        return edited

    _, target = resolve_parent(document, path)
    if target is _MISSING:
        _LOG.debug("add key at %s", format_path(path))
        new_value = edited
    else:
        new_value = merge_edit(target, edited, path)
    return _rebuild(document, path, new_value)


def save_edit(
    edited_text: str, path: Iterable[str | int], document: object
) -> Result[object]:
    """Like ``apply_edit`` but returns ``Ok(document)`` or ``Err(error)``."""
    try:
        return Ok(apply_edit(edited_text, path, document))
    except (ParseError, PathResolutionError) as exc:
        _LOG.debug("edit rejected: %s", exc, exc_info=exc)
        return Err(exc)
