import re
import sys

from .errors import EmptyKeyError, IndexFormatError, IndexIntError, KeyFormatError
from .kind import QueryKind
from .types import State

_INDEX_DIGITS = re.compile(r"[0-9]+")


def _parse_index_digits(digits: str, token: str) -> int:
    if not _INDEX_DIGITS.fullmatch(digits):
        raise IndexIntError(token, f"Invalid index '{digits}'.")
    index = int(digits)
    if index > sys.maxsize:
        raise IndexIntError(token, f"Index '{digits}' is out of range.")
    return index


def _ensure_step(path: str, step: str):
    if not step.strip():
        raise EmptyKeyError(path)


class DefaultTokenizer:
    """
    Bracket/dot syntax.

    Keys are separated by `.` and array indexes are written `[N]`:

        [0].test.[1]
        test.test.[1]

    Steps are used exactly as written; a step made only of whitespace is rejected.
    """

    separator = "."

    @staticmethod
    def parse_index(step: str) -> int:
        """
        Parse an index step such as `[2]`.

        >>> DefaultTokenizer.parse_index("[2]")
        2
        >>> DefaultTokenizer.parse_index("[]")
        Traceback (most recent call last):
        ...
        querable.errors.IndexFormatError: Expected an index like '[0]'. (token='[]')
        """
        if step.startswith("[") and step.endswith("]") and len(step) > 2:
            return _parse_index_digits(step[1:-1], step)
        raise IndexFormatError(step, "Expected an index like '[0]'.")

    @staticmethod
    def split(path: str) -> State:
        """
        Split at the first `.`.

        >>> DefaultTokenizer.split("a.b.c")
        ('a', 'b.c')
        >>> DefaultTokenizer.split("a")
        ('a', None)
        """
        if not path:
            raise EmptyKeyError(path)
        current, separator, remainder = path.partition(DefaultTokenizer.separator)
        _ensure_step(path, current)
        if not separator:
            return current, None
        _ensure_step(path, remainder)
        return current, remainder

    @staticmethod
    def step_kind(step: str) -> QueryKind | None:
        if step.startswith("["):
            return QueryKind.ARRAY
        return QueryKind.DICTIONARY


class SlashTokenizer:
    """
    Slash syntax.

    Every step, key or index, is introduced by `/` and indexes are bare integers:

        /0/1/2/3
        /test/test/1/test/test/2

    The remainder returned by `split` keeps its leading `/`, so it is a valid path
    on its own. Empty steps (`//`) are rejected rather than skipped.
    """

    separator = "/"

    @staticmethod
    def parse_index(step: str) -> int:
        return _parse_index_digits(step, step)

    @staticmethod
    def split(path: str) -> State:
        """
        Split off the first `/`-prefixed step.

        >>> SlashTokenizer.split("/a/1")
        ('a', '/1')
        """
        if not path:
            raise EmptyKeyError(path)
        if not path.startswith(SlashTokenizer.separator):
            raise KeyFormatError(path, "Path must start with '/'.")
        current, separator, rest = path[1:].partition(SlashTokenizer.separator)
        _ensure_step(path, current)
        if not separator:
            return current, None
        _ensure_step(path, rest)
        return current, SlashTokenizer.separator + rest

    @staticmethod
    def step_kind(step: str) -> QueryKind | None:
        # A bare number is as valid a key as it is an index.
        return None
