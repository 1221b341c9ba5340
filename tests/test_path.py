"""Tests for path formatting and lookup."""

import pytest

from jnode._path import format_path, get_value_at_path, resolve
from jnode.errors import PathResolutionError


class TestFormatPath:
    """Bracket path rendering."""

    def test_empty_path_is_root(self):
        assert format_path([]) == "$"

    def test_none_is_root(self):
        assert format_path(None) == "$"

    def test_keys_and_indices(self):
        assert format_path(["customer", 0, "id"]) == '$["customer"][0]["id"]'

    def test_single_index(self):
        assert format_path((3,)) == "$[3]"

    def test_numeric_looking_key_stays_quoted(self):
        assert format_path(["0"]) == '$["0"]'

    def test_quote_in_key_is_escaped(self):
        assert format_path(['a"b']) == '$["a\\"b"]'

    def test_unicode_key(self):
        assert format_path(["이름"]) == '$["이름"]'


class TestResolve:
    """Strict and lenient value lookup."""

    DATA = {"a": {"b": [10, 20, {"c": None}]}}

    def test_resolve_nested(self):
        assert resolve(self.DATA, ["a", "b", 2, "c"]) is None
        assert resolve(self.DATA, ["a", "b", 1]) == 20

    def test_resolve_empty_path(self):
        assert resolve(self.DATA, []) is self.DATA

    def test_missing_key(self):
        with pytest.raises(PathResolutionError) as info:
            resolve(self.DATA, ["a", "x"])
        assert info.value.path == ("a", "x")
        assert info.value.segment == "x"
        assert str(info.value) == 'cannot resolve $["a"]["x"]: key not found'

    def test_index_out_of_range(self):
        with pytest.raises(PathResolutionError, match="index out of range"):
            resolve(self.DATA, ["a", "b", 3])

    def test_negative_index_rejected(self):
        with pytest.raises(PathResolutionError, match="index out of range"):
            resolve(self.DATA, ["a", "b", -1])

    def test_key_into_array(self):
        with pytest.raises(PathResolutionError, match="expected an array index"):
            resolve(self.DATA, ["a", "b", "0"])

    def test_index_into_object(self):
        with pytest.raises(PathResolutionError, match="expected an object key"):
            resolve(self.DATA, ["a", 0])

    def test_into_scalar(self):
        with pytest.raises(PathResolutionError, match="not a container"):
            resolve(self.DATA, ["a", "b", 0, "x"])

    def test_is_lookup_error(self):
        with pytest.raises(LookupError):
            resolve({}, ["missing"])

    def test_get_value_at_path_lenient(self):
        assert get_value_at_path(self.DATA, ["a", "b", 0]) == 10
        assert get_value_at_path(self.DATA, ["nope"]) is None
