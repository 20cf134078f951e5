import logging
from collections import defaultdict

import pytest

from querable.errors import (
    IndexIntError,
    IndexNotExistError,
    KeyNotExistError,
    QueryTypeError,
    UnknownTypeError,
)
from querable.kind import QueryKind
from querable.resolver import descend_array, descend_dict, query
from querable.tokenizers import DefaultTokenizer, SlashTokenizer


class RecordingValue:
    """Array of arrays that records each descent and fails on demand."""

    def __init__(self, depth: int, calls: list, error: Exception | None = None):
        self.depth = depth
        self.calls = calls
        self.error = error

    def query_kind(self):
        return QueryKind.ARRAY if self.depth else None

    def query_dict(self, key):
        raise AssertionError("array values are never queried by key")

    def query_array(self, index):
        self.calls.append((self.depth, index))
        if self.error is not None and self.depth == 1:
            raise self.error
        return RecordingValue(self.depth - 1, self.calls, self.error)


def test_descend_dict__returns_child():
    assert descend_dict({"a": 1}, "a") == 1


def test_descend_dict__missing_key():
    with pytest.raises(KeyNotExistError):
        descend_dict({"a": 1}, "b")


def test_descend_dict__does_not_trigger_default_factory():
    data = defaultdict(list)

    with pytest.raises(KeyNotExistError):
        descend_dict(data, "a")

    assert "a" not in data


def test_descend_dict__on_array_is_type_error():
    with pytest.raises(QueryTypeError) as exc_info:
        descend_dict([1, 2], "a")

    assert exc_info.value == QueryTypeError(
        "a", QueryKind.DICTIONARY, QueryKind.ARRAY
    )


def test_descend_dict__on_leaf_is_unknown_type():
    with pytest.raises(UnknownTypeError):
        descend_dict("text", "a")


def test_descend_array__returns_child():
    assert descend_array([1, 2], 1) == 2


def test_descend_array__out_of_range():
    with pytest.raises(IndexNotExistError) as exc_info:
        descend_array([1, 2], 2)

    assert exc_info.value.index == 2


def test_descend_array__on_dict_is_type_error():
    with pytest.raises(QueryTypeError) as exc_info:
        descend_array({"0": 1}, 0)

    assert exc_info.value == QueryTypeError(
        "[0]", QueryKind.ARRAY, QueryKind.DICTIONARY
    )


def test_descend_array__on_leaf_is_unknown_type():
    with pytest.raises(UnknownTypeError):
        descend_array(7, 0)


def test_query__recursion_depth_matches_step_count():
    calls: list = []
    root = RecordingValue(3, calls)

    query(root, "/0/1/2", SlashTokenizer)

    assert calls == [(3, 0), (2, 1), (1, 2)]


def test_query__value_errors_propagate_unchanged():
    error = QueryTypeError("[2]", QueryKind.ARRAY, QueryKind.DICTIONARY)
    calls: list = []
    root = RecordingValue(2, calls, error=error)

    with pytest.raises(QueryTypeError) as exc_info:
        query(root, "[0].[2].[9]", DefaultTokenizer)

    assert exc_info.value is error
    assert calls == [(2, 0), (1, 2)]


def test_query__parse_errors_stop_before_descent():
    calls: list = []
    root = RecordingValue(2, calls)

    with pytest.raises(IndexIntError):
        query(root, "[0].[x]", DefaultTokenizer)

    assert calls == [(2, 0)]


def test_query__emits_no_log_records(caplog):
    with caplog.at_level(logging.DEBUG):
        query({"a": [1, 2]}, "a.[1]", DefaultTokenizer)

    assert caplog.records == []
