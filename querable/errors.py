from typing import Any


class QuerableError(Exception):
    def _fields(self) -> tuple[Any, ...]:
        return self.args

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class QueryResolutionError(QuerableError):
    """The path is well formed but the value cannot be walked along it."""


class QueryParseError(QuerableError):
    """A path step could not be read by the tokenizer."""


class KeyNotExistError(QueryResolutionError):
    def __init__(self, key: str):
        super().__init__(f"Key does not exist (token='{key}')")
        self.key = key

    def _fields(self) -> tuple[Any, ...]:
        return (self.key,)


class IndexNotExistError(QueryResolutionError):
    def __init__(self, index: int):
        super().__init__(f"Index is out of range (index={index})")
        self.index = index

    def _fields(self) -> tuple[Any, ...]:
        return (self.index,)


class EmptyPathError(QueryResolutionError):
    def __init__(self, kind: Any):
        super().__init__(f"Path has no step left for the {kind.value} value.")
        self.kind = kind

    def _fields(self) -> tuple[Any, ...]:
        return (self.kind,)


class UnknownTypeError(QueryResolutionError):
    def __init__(self, path: str):
        super().__init__(
            f"Cannot descend into a leaf value (path='{path}')"
        )
        self.path = path

    def _fields(self) -> tuple[Any, ...]:
        return (self.path,)


class QueryTypeError(QueryResolutionError):
    def __init__(self, path: str, expected: Any, found: Any):
        super().__init__(
            f"Expected a value of kind {expected.value}, found {found.value} "
            f"(path='{path}')"
        )
        self.path = path
        self.expected = expected
        self.found = found

    def _fields(self) -> tuple[Any, ...]:
        return (self.path, self.expected, self.found)


class IndexTokenError(QueryParseError):
    """
    An array step could not be turned into an index.

    Custom tokenizers report their own index failures by subclassing this.
    """

    def __init__(self, token: str, message: str):
        super().__init__(f"{message} (token='{token}')")
        self.token = token
        self.message = message

    def _fields(self) -> tuple[Any, ...]:
        return (self.token, self.message)


class IndexFormatError(IndexTokenError):
    pass


class IndexIntError(IndexTokenError):
    pass


class KeyTokenError(QueryParseError):
    """
    A path could not be split into steps.

    Custom tokenizers report their own syntax failures by subclassing this.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"{message} (path='{path}')")
        self.path = path
        self.message = message

    def _fields(self) -> tuple[Any, ...]:
        return (self.path, self.message)


class EmptyKeyError(KeyTokenError):
    def __init__(self, path: str, message: str = "Path step cannot be empty."):
        super().__init__(path, message)

    def _fields(self) -> tuple[Any, ...]:
        # Every empty step is the same failure whatever text surrounded it.
        return ()


class KeyFormatError(KeyTokenError):
    pass
