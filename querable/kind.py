from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any

from .types import Queryable


class QueryKind(Enum):
    """
    How a value can be descended into.

    - `QueryKind.ARRAY` for values indexed by a non-negative integer.
    - `QueryKind.DICTIONARY` for values indexed by a string key.

    Anything else is a leaf and is classified as `None`.
    """

    ARRAY = "array"
    DICTIONARY = "dictionary"


_TEXT_TYPES = (str, bytes, bytearray)


def query_kind(value: Any) -> QueryKind | None:
    if isinstance(value, Queryable):
        return value.query_kind()
    if isinstance(value, Mapping):
        return QueryKind.DICTIONARY
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return QueryKind.ARRAY
    return None
