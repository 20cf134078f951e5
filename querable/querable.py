from typing import Any

from .errors import KeyFormatError, QueryResolutionError
from .resolver import query
from .tokenizers import DefaultTokenizer
from .types import Tokenizer


def _as_path(path: str | bytes | bytearray) -> str:
    if isinstance(path, str):
        return path
    if isinstance(path, bytes | bytearray):
        try:
            return path.decode("utf-8")
        except UnicodeDecodeError as ex:
            raise KeyFormatError(
                path.decode("utf-8", errors="replace"), "Path is not valid UTF-8."
            ) from ex
    raise TypeError(f"Expected a str or bytes path, got {type(path).__name__}.")


class Querable:
    def __init__(self, tokenizer: type[Tokenizer] = DefaultTokenizer):
        self._tokenizer = tokenizer

    @property
    def tokenizer(self) -> type[Tokenizer]:
        return self._tokenizer

    def lookup(self, value: Any, path: str | bytes | bytearray) -> Any:
        """
        Resolve `path` against `value` and return the matched sub-value.

        With the default tokenizer this supports:
        - Key traversal: `a.b.c`
        - Array indexes: `[0]`, `a.items.[2].name`

        With `SlashTokenizer`, the same paths read `/a/b/c` and `/a/items/2/name`.

        Args:
            value: Mapping, sequence or `Queryable` to read from.
            path: Path in this instance's tokenizer syntax.

        Returns:
            The matched value. Containers are fresh copies; leaves are returned as is.

        Raises:
            QueryParseError: If the path syntax is invalid, including a bytes path
                that is not valid UTF-8.
            QueryResolutionError: If the path does not resolve against `value`.

        Examples:
            >>> querable.lookup({"id": 12}, "id")
            12
            >>> querable.lookup({"a": [{"b": 1}, {"b": 2}]}, "a.[1].b")
            2
            >>> querable.lookup({"a": {"b": 1}}, "a.c")
            Traceback (most recent call last):
            ...
            querable.errors.KeyNotExistError: Key does not exist (token='c')
        """
        return query(value, _as_path(path), self._tokenizer)

    def get(
        self,
        value: Any,
        path: str | bytes | bytearray,
        default=None,
        *,
        strict: bool = False,
    ):
        """
        Like `lookup`, but returns `default` when the path does not resolve.

        Args:
            value: Mapping, sequence or `Queryable` to read from.
            path: Path in this instance's tokenizer syntax.
            default: Value returned when resolution fails in non-strict mode.
            strict: If True, resolution failures raise instead of returning `default`.

        Raises:
            QueryParseError: If the path syntax is invalid, whatever `strict` is.
            QueryResolutionError: If strict mode is enabled and resolution fails.
        """
        try:
            return self.lookup(value, path)
        except QueryResolutionError:
            if strict:
                raise
            return default

    def exists(
        self, value: Any, path: str | bytes | bytearray, *, strict: bool = False
    ) -> bool:
        """
        Check whether `path` resolves against `value`.

        Raises:
            QueryParseError: If the path syntax is invalid.
            QueryResolutionError: If strict mode is enabled and resolution fails.
        """
        try:
            self.lookup(value, path)
        except QueryResolutionError:
            if strict:
                raise
            return False
        return True


def lookup(
    value: Any,
    path: str | bytes | bytearray,
    tokenizer: type[Tokenizer],
) -> Any:
    """
    Resolve `path` against `value` with `tokenizer`.

    The syntax is always chosen by the caller. For the configured default use
    the package-level `querable` instance instead.
    """
    return query(value, _as_path(path), tokenizer)
