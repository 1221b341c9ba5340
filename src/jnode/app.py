"""Tree browser for a JSON document with a per-node edit dialog."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Tree
from textual.widgets.tree import TreeNode

from .errors import ParseError
from .modal import NodeModal
from .projection import node_at_path, scalar_text
from .session import NodeEditSession
from .store import (
    DocumentStore,
    FileDocumentStore,
    MemoryDocumentStore,
    StaticSelection,
    load_document,
)

SAMPLE_JSON = """\
{
  "customer": {
    "id": 1042,
    "name": "Ada Lovelace",
    "vip": true,
    "tags": ["math", "engines"],
    "address": {
      "city": "London",
      "zip": null
    }
  },
  "orders": [
    {"sku": "A-1", "qty": 2},
    {"sku": "B-7", "qty": 1}
  ]
}"""


def _node_label(key: str | int | None, value: object) -> Text:
    label = Text()
    if key is not None:
        label.append(f"{key}", style="bold cyan" if isinstance(key, str) else "magenta")
    if isinstance(value, dict):
        label.append(f" {{{len(value)}}}", style="dim")
    elif isinstance(value, list):
        label.append(f" [{len(value)}]", style="dim")
    else:
        if key is not None:
            label.append(": ")
        label.append(scalar_text(value), style="green" if isinstance(value, str) else "yellow")
    return label


def populate_tree(node: TreeNode, value: object, path: tuple[str | int, ...]) -> None:
    """Add children for *value* under *node*; each node's data is its path."""
    if isinstance(value, dict):
        children = list(value.items())
    elif isinstance(value, list):
        children = list(enumerate(value))
    else:
        return
    for key, child in children:
        child_path = path + (key,)
        if isinstance(child, (dict, list)):
            branch = node.add(_node_label(key, child), data=child_path)
            populate_tree(branch, child, child_path)
        else:
            node.add_leaf(_node_label(key, child), data=child_path)


class JsonNodeApp(App):
    """TUI app that shows a JSON document as a tree of editable nodes."""

    CSS = """
    Screen {
        layout: vertical;
    }
    #tree {
        height: 1fr;
        border: solid $accent;
    }
    """

    TITLE = "JSON Node Editor"
    BINDINGS = [("q", "quit", "Quit")]
    ENABLE_COMMAND_PALETTE = False

    def __init__(
        self,
        store: DocumentStore | None = None,
        file_path: str = "",
        read_only: bool = False,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.store: DocumentStore = store or MemoryDocumentStore(SAMPLE_JSON)
        self.file_path = file_path
        self.read_only = read_only

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Tree("$", id="tree")
        yield Footer()

    def on_mount(self) -> None:
        ro = " [RO]" if self.read_only else ""
        self.sub_title = (self.file_path or "[memory]") + ro
        self.reload_tree()
        self.query_one("#tree").focus()

    def reload_tree(self) -> None:
        tree = self.query_one("#tree", Tree)
        tree.clear()
        tree.root.data = ()
        try:
            document = load_document(self.store.read())
        except ParseError as exc:
            self.notify(f"{exc}", severity="error", timeout=6)
            return
        except OSError as exc:
            self.notify(f"Cannot open: {exc}", severity="error", timeout=6)
            return
        label = Text("$")
        if not isinstance(document, (dict, list)):
            label.append(" ")
        tree.root.set_label(label.append_text(_node_label(None, document)))
        populate_tree(tree.root, document, ())
        tree.root.expand_all()

    def on_tree_node_selected(self, event: Tree.NodeSelected) -> None:
        path = event.node.data or ()
        try:
            node = node_at_path(load_document(self.store.read()), path)
        except (ParseError, LookupError) as exc:
            self.notify(f"{exc}", severity="error", timeout=6)
            return
        session = NodeEditSession(
            self.store, StaticSelection(node), read_only=self.read_only
        )
        self.push_screen(NodeModal(session), self._on_modal_closed)

    def _on_modal_closed(self, saved: bool | None) -> None:
        if saved:
            self.reload_tree()
            self.notify("Node updated", severity="information")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="jnode",
        description="Browse a JSON document and edit one node at a time",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="",
        help="JSON file to open",
    )
    parser.add_argument(
        "-R", "--read-only",
        action="store_true",
        default=False,
        help="open in read-only mode",
    )
    parser.add_argument(
        "--log-file",
        default="",
        help="write debug logs to this file",
    )
    args = parser.parse_args()

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    file_path: str = args.file
    store: DocumentStore = MemoryDocumentStore(SAMPLE_JSON)
    if file_path:
        path = Path(file_path)
        try:
            if path.exists():
                path.read_text(encoding="utf-8")
        except PermissionError as exc:
            print(f"jnode: {exc}", file=sys.stderr)
            sys.exit(1)
        store = FileDocumentStore(path)

    app = JsonNodeApp(store=store, file_path=file_path, read_only=args.read_only)
    app.run()


if __name__ == "__main__":
    main()
