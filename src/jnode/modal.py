"""Node content dialog."""

from __future__ import annotations

from rich.syntax import Syntax
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static, TextArea

from .session import NodeEditSession


class NodeModal(ModalScreen[bool]):
    """Shows one node's scalar fields and lets the user edit them.

    Dismisses with ``True`` after a successful save and ``False`` when
    closed without saving.
    """

    DEFAULT_CSS = """
    NodeModal {
        align: center middle;
    }
    #node-dialog {
        width: 80;
        max-width: 90%;
        height: auto;
        max-height: 90%;
        border: thick $accent;
        background: $surface;
        padding: 0 1;
    }
    #node-header, #content-header, #path-header {
        height: auto;
    }
    #node-title {
        width: 1fr;
        text-style: bold;
    }
    .section-label {
        width: 1fr;
        color: $text-muted;
    }
    #content-view {
        max-height: 14;
    }
    #content-editor {
        height: 12;
    }
    #edit-error {
        color: $error;
        height: auto;
    }
    Button {
        min-width: 8;
    }
    """

    BINDINGS = [("escape", "close", "Close")]

    def __init__(
        self,
        session: NodeEditSession,
        *,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.session = session

    def compose(self) -> ComposeResult:
        with Vertical(id="node-dialog"):
            with Horizontal(id="node-header"):
                yield Label("Node Content", id="node-title")
                yield Button("✕", id="close", variant="error")
            with Horizontal(id="content-header"):
                yield Label("Content", classes="section-label")
                yield Button("Edit", id="edit", variant="primary")
                yield Button("Save", id="save", variant="success")
                yield Button("Cancel", id="cancel")
                yield Button("Copy", id="copy-content")
            with VerticalScroll(id="content-view"):
                yield Static(id="content-code")
            yield TextArea(id="content-editor")
            yield Label("", id="edit-error")
            with Horizontal(id="path-header"):
                yield Label("JSON Path", classes="section-label")
                yield Button("Copy", id="copy-path")
            yield Static(id="path-code")

    def on_mount(self) -> None:
        self.session.open()
        self.query_one("#path-code", Static).update(
            Syntax(self.session.path_text, "json", word_wrap=True)
        )
        self._refresh()

    def _refresh(self) -> None:
        editing = self.session.editing
        self.query_one("#content-code", Static).update(
            Syntax(self.session.content, "json", word_wrap=True)
        )
        self.query_one("#content-view").display = not editing
        self.query_one("#content-editor").display = editing
        self.query_one("#edit").display = not editing
        self.query_one("#edit", Button).disabled = self.session.read_only
        self.query_one("#save").display = editing
        self.query_one("#cancel").display = editing
        self.query_one("#edit-error", Label).update(self.session.error)

    # -- Actions -----------------------------------------------------------

    def _edit(self) -> None:
        self.session.begin_edit()
        if self.session.editing:
            editor = self.query_one("#content-editor", TextArea)
            editor.load_text(self.session.content)
            self._refresh()
            editor.focus()
        else:
            self._refresh()

    def _cancel(self) -> None:
        self.session.cancel()
        self._refresh()

    def _save(self) -> None:
        text = self.query_one("#content-editor", TextArea).text
        try:
            self.session.save(text)
        except OSError as exc:
            self.notify(f"Save failed: {exc}", severity="error", timeout=6)
            return
        if self.session.editing:
            self._refresh()
            return
        self.dismiss(True)

    def _copy(self, text: str) -> None:
        self.app.copy_to_clipboard(text)
        self.notify("Copied to clipboard", severity="information")

    def action_close(self) -> None:
        self.dismiss(False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "close":
            self.action_close()
        elif button_id == "edit":
            self._edit()
        elif button_id == "save":
            self._save()
        elif button_id == "cancel":
            self._cancel()
        elif button_id == "copy-content":
            self._copy(self.session.content)
        elif button_id == "copy-path":
            self._copy(self.session.path_text)
