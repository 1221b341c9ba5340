"""Node rows and their editable text projection."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence

from ._path import resolve


class RowType(Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


# rows of these types are shown elsewhere in the tree, never inline
_CONTAINER_TYPES = (RowType.ARRAY, RowType.OBJECT)


@dataclass(frozen=True)
class NodeRow:
    """One immediate child of a node."""

    key: str | None
    value: object
    type: RowType


@dataclass(frozen=True)
class NodeData:
    """A selected node: its rows plus the path of its value in the document."""

    rows: tuple[NodeRow, ...] = ()
    path: tuple[str | int, ...] = field(default_factory=tuple)


def value_type(value: object) -> RowType:
    """Classify a JSON value."""
    if value is None:
        return RowType.NULL
    if isinstance(value, bool):
        return RowType.BOOLEAN
    if isinstance(value, (int, float)):
        return RowType.NUMBER
    if isinstance(value, str):
        return RowType.STRING
    if isinstance(value, list):
        return RowType.ARRAY
    return RowType.OBJECT


def rows_from_value(value: object) -> tuple[NodeRow, ...]:
    """Build the rows the tree view shows for *value*."""
    if isinstance(value, dict):
        return tuple(NodeRow(k, v, value_type(v)) for k, v in value.items())
    if isinstance(value, list):
        return tuple(NodeRow(None, v, value_type(v)) for v in value)
    return (NodeRow(None, value, value_type(value)),)


def node_at_path(document: object, path: Iterable[str | int]) -> NodeData:
    """Return the NodeData for the value at *path* in *document*."""
    path = tuple(path)
    return NodeData(rows_from_value(resolve(document, path)), path)


def scalar_text(value: object) -> str:
    """Literal textual form of a single value (strings are not quoted)."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def project_rows(rows: Sequence[NodeRow] | None) -> str:
    """Return the editable text for a node's rows.

    A single unnamed row is shown as its bare value. Otherwise the keyed
    scalar rows are rendered as a JSON object; array and object rows are
    left out.
    """
    if not rows:
        return "{}"
    if len(rows) == 1 and not rows[0].key:
        return scalar_text(rows[0].value)

    obj: dict[str, object] = {}
    for row in rows:
        if row.type in _CONTAINER_TYPES or not row.key:
            continue
        obj[row.key] = row.value
    return json.dumps(obj, indent=2, ensure_ascii=False)
