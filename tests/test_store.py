"""Tests for document stores and store-backed saves."""

import json

from jnode.errors import Err, Ok, ParseError, PathResolutionError
from jnode.projection import NodeData, node_at_path
from jnode.store import FileDocumentStore, MemoryDocumentStore, save_to_store


class TestSaveToStore:
    """Read once, write once on success."""

    def test_writes_pretty_document(self):
        store = MemoryDocumentStore('{"a": {"b": 1, "c": [1, 2, 3]}}')
        node = node_at_path(json.loads(store.read()), ["a"])

        result = save_to_store('{"b": 99}', node, store)

        assert isinstance(result, Ok)
        assert json.loads(store.text) == {"a": {"b": 99, "c": [1, 2, 3]}}
        assert store.text.startswith('{\n  "a": {\n    "b": 99,')
        assert store.writes == 1

    def test_invalid_edit_leaves_store(self):
        original = '{"a": 1}'
        store = MemoryDocumentStore(original)

        result = save_to_store("{bad}", NodeData(path=("a",)), store)

        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)
        assert store.text == original
        assert store.writes == 0

    def test_unresolvable_path_leaves_store(self):
        store = MemoryDocumentStore('{"a": 1}')

        result = save_to_store("2", NodeData(path=("x", "y")), store)

        assert isinstance(result.error, PathResolutionError)
        assert store.writes == 0

    def test_invalid_stored_document(self):
        store = MemoryDocumentStore("not json")

        result = save_to_store("1", NodeData(), store)

        assert isinstance(result, Err)
        assert result.message == "Document is not valid JSON"
        assert store.writes == 0

    def test_uses_latest_document(self):
        store = MemoryDocumentStore('{"a": {"b": 1}, "z": 0}')
        node = node_at_path(json.loads(store.read()), ["a"])
        store.text = '{"a": {"b": 1}, "z": 5}'

        save_to_store('{"b": 2}', node, store)

        assert json.loads(store.text) == {"a": {"b": 2}, "z": 5}

    def test_unicode_not_escaped(self):
        store = MemoryDocumentStore('{"name": "x"}')

        save_to_store('"서울"', NodeData(path=("name",)), store)

        assert '"서울"' in store.text


class TestFileDocumentStore:
    """UTF-8 file backed store."""

    def test_missing_file_reads_default(self, tmp_path):
        store = FileDocumentStore(tmp_path / "new.json")
        assert store.read() == "{}"

    def test_write_creates_parents(self, tmp_path):
        target = tmp_path / "sub" / "doc.json"
        store = FileDocumentStore(target)

        store.write('{"a": 1}')

        assert target.read_text(encoding="utf-8") == '{"a": 1}'
        assert store.read() == '{"a": 1}'

    def test_save_round_trip(self, tmp_path):
        target = tmp_path / "doc.json"
        target.write_text('{"a": {"b": 5}}', encoding="utf-8")
        store = FileDocumentStore(target)

        save_to_store('"hello"', NodeData(path=("a", "b")), store)

        assert json.loads(target.read_text(encoding="utf-8")) == {"a": {"b": "hello"}}


class TestStrictDocuments:
    """Non-JSON numbers never reach or leave the store."""

    def test_nan_edit_not_written(self):
        store = MemoryDocumentStore('{"a": 1}')

        result = save_to_store("NaN", NodeData(path=("a",)), store)

        assert isinstance(result, Err)
        assert isinstance(result.error, ParseError)
        assert store.writes == 0
        assert store.text == '{"a": 1}'

    def test_nan_in_stored_document(self):
        store = MemoryDocumentStore('{"a": NaN}')

        result = save_to_store("1", NodeData(path=("a",)), store)

        assert result.message == "Document is not valid JSON"
        assert store.writes == 0

    def test_deeply_nested_stored_document(self):
        store = MemoryDocumentStore("[" * 100000 + "]" * 100000)

        result = save_to_store("1", NodeData(), store)

        assert isinstance(result.error, ParseError)
        assert store.writes == 0
