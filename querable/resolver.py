from collections.abc import Mapping
from typing import Any

from .errors import (
    EmptyPathError,
    IndexNotExistError,
    KeyNotExistError,
    QueryTypeError,
    UnknownTypeError,
)
from .kind import QueryKind, query_kind
from .types import Queryable, Tokenizer


def descend_dict(value: Any, key: str) -> Any:
    """
    Step into `value` by `key`.

    `Queryable` values answer for themselves; plain mappings and sequences are
    handled here. The child is returned as is, without copying.
    """
    if isinstance(value, Queryable):
        return value.query_dict(key)

    kind = query_kind(value)
    if kind is QueryKind.DICTIONARY:
        # Membership first so mappings with a default factory are left untouched.
        if key not in value:
            raise KeyNotExistError(key)
        return value[key]
    if kind is QueryKind.ARRAY:
        raise QueryTypeError(key, QueryKind.DICTIONARY, QueryKind.ARRAY)
    raise UnknownTypeError(key)


def descend_array(value: Any, index: int) -> Any:
    """Step into `value` by `index`. See `descend_dict`."""
    if isinstance(value, Queryable):
        return value.query_array(index)

    kind = query_kind(value)
    if kind is QueryKind.ARRAY:
        if not 0 <= index < len(value):
            raise IndexNotExistError(index)
        return value[index]
    if kind is QueryKind.DICTIONARY:
        raise QueryTypeError(f"[{index}]", QueryKind.ARRAY, QueryKind.DICTIONARY)
    raise UnknownTypeError(f"[{index}]")


def _detach(value: Any) -> Any:
    # Plain containers are rebuilt; leaves and anything else are shared as is.
    if isinstance(value, Queryable):
        return value
    if isinstance(value, Mapping):
        return {key: _detach(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_detach(item) for item in value]
    if type(value) is tuple:
        return tuple(_detach(item) for item in value)
    return value


def query(value: Any, path: str, tokenizer: type[Tokenizer]) -> Any:
    """
    Resolve `path` against `value`, one step per call.

    The tokenizer splits off the current step, the value's kind decides whether
    that step is a key or an index, and the remainder is resolved against the
    child. The first error raised anywhere along the way reaches the caller
    unchanged.

    Args:
        value: Root of the tree to read from. Never modified.
        path: Path in the tokenizer's syntax.
        tokenizer: Tokenizer class defining the path syntax.

    Returns:
        The matched sub-value. Mappings, lists and tuples on the way down to
        the leaves are fresh copies; leaves themselves are returned as is.

    Raises:
        UnknownTypeError: If a leaf is reached while steps remain.
        EmptyPathError: If the tokenizer yields no step for a container.
        QueryTypeError: If a step is spelled for the other kind of container.
        KeyNotExistError: If a key is missing.
        IndexNotExistError: If an index is out of range.
        KeyTokenError: If the path cannot be split.
        IndexTokenError: If an array step is not a valid index.
    """
    kind = query_kind(value)
    if kind is None:
        raise UnknownTypeError(path)

    current, remainder = tokenizer.split(path)
    if current is None:
        raise EmptyPathError(kind)

    implied_kind = tokenizer.step_kind(current)
    if implied_kind is not None and implied_kind is not kind:
        raise QueryTypeError(current, implied_kind, kind)

    if kind is QueryKind.DICTIONARY:
        child = descend_dict(value, current)
    else:
        child = descend_array(value, tokenizer.parse_index(current))

    # base case
    if remainder is None:
        return _detach(child)
    return query(child, remainder, tokenizer)
