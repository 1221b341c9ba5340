"""Document store and selection source used by the node editor."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol

from .errors import Err, ParseError, Result
from .patch import loads_json, save_edit
from .projection import NodeData

_LOG = logging.getLogger(__name__)


class DocumentStore(Protocol):
    def read(self) -> str: ...

    def write(self, text: str) -> None: ...


class SelectionSource(Protocol):
    def current(self) -> NodeData | None: ...


class MemoryDocumentStore:
    """Keeps the document text in memory."""

    def __init__(self, text: str = "{}") -> None:
        self.text = text
        self.writes = 0

    def read(self) -> str:
        return self.text

    def write(self, text: str) -> None:
        self.text = text
        self.writes += 1


class FileDocumentStore:
    """Reads and writes the document as a UTF-8 file.

    A file that does not exist yet reads as *default* and is created on the
    first write.
    """

    def __init__(self, path: str | Path, default: str = "{}") -> None:
        self.path = Path(path)
        self.default = default

    def read(self) -> str:
        if not self.path.exists():
            return self.default
        return self.path.read_text(encoding="utf-8")

    def write(self, text: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(text, encoding="utf-8")
        _LOG.debug("wrote %d chars to %s", len(text), self.path)


class StaticSelection:
    """A selection source that always returns the same node."""

    def __init__(self, node: NodeData | None = None) -> None:
        self.node = node

    def current(self) -> NodeData | None:
        return self.node


def dump_document(document: object) -> str:
    return json.dumps(document, indent=2, ensure_ascii=False, allow_nan=False)


def load_document(text: str) -> object:
    return loads_json(text, "Document is not valid JSON")


def save_to_store(
    edited_text: str, node: NodeData, store: DocumentStore
) -> Result[object]:
    """Merge *edited_text* into the stored document at the node's path.

    The store is read once and written once on success; it is left
    untouched on failure.
    """
    try:
        document = load_document(store.read())
    except ParseError as exc:
        _LOG.debug("stored document unreadable", exc_info=exc)
        return Err(exc)

    result = save_edit(edited_text, node.path, document)
    if isinstance(result, Err):
        return result
    store.write(dump_document(result.value))
    return result
