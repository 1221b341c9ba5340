"""Edit state of the node dialog."""

from __future__ import annotations

from ._path import format_path
from .errors import Err, Result
from .projection import NodeData, project_rows
from .store import DocumentStore, SelectionSource, save_to_store


class NodeEditSession:
    """View/edit state for one selected node.

    ``content`` holds the text currently shown. While editing it is the
    user's in-progress text; ``cancel`` throws that away and re-derives the
    projection from the node.
    """

    def __init__(
        self,
        store: DocumentStore,
        selection: SelectionSource,
        *,
        read_only: bool = False,
    ) -> None:
        self.store = store
        self.selection = selection
        self.read_only = read_only
        self.node: NodeData | None = None
        self.content: str = "{}"
        self.editing: bool = False
        self.error: str = ""

    @property
    def path_text(self) -> str:
        return format_path(self.node.path if self.node else ())

    def _projection(self) -> str:
        return project_rows(self.node.rows if self.node else ())

    def open(self) -> None:
        self.node = self.selection.current()
        self.content = self._projection()
        self.editing = False
        self.error = ""

    def begin_edit(self) -> None:
        if self.read_only:
            self.error = "Document is read-only"
            return
        if self.node is None:
            self.error = "No node selected"
            return
        self.editing = True
        self.error = ""

    def cancel(self) -> None:
        self.editing = False
        self.content = self._projection()
        self.error = ""

    def save(self, text: str) -> Result[object]:
        """Write *text* back into the document.

        On failure the session stays in edit mode, ``content`` is left as it
        was and ``error`` is set.
        """
        result = save_to_store(text, self.node or NodeData(), self.store)
        if isinstance(result, Err):
            self.error = result.message
            return result
        self.content = text
        self.editing = False
        self.error = ""
        return result
