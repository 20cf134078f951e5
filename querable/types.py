from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .kind import QueryKind

# (current step, remainder); a `None` remainder means `current` is the last step.
State = tuple[str | None, str | None]


class Tokenizer(Protocol):
    """
    Path syntax used by the resolver.

    Implement this to teach the resolver a new path format; see
    `querable.tokenizers.DefaultTokenizer` and `querable.tokenizers.SlashTokenizer`.
    Tokenizers are stateless and are passed around as classes.
    """

    @staticmethod
    def parse_index(step: str) -> int:
        """
        Turn a step into an index when the current value is an array.

        Raises:
            IndexTokenError: If the step is not a valid index for this syntax.
        """
        ...

    @staticmethod
    def split(path: str) -> State:
        """
        Split off the first step of `path`.

        Raises:
            KeyTokenError: If the path is empty or its separators are malformed.
        """
        ...

    @staticmethod
    def step_kind(step: str) -> "QueryKind | None":
        """Return the value kind the step's spelling implies, or `None` if ambiguous."""
        ...


@runtime_checkable
class Queryable(Protocol):
    """
    A tree value that knows how to descend into itself.

    `query_dict` and `query_array` return a value of the same queryable type,
    raise `KeyNotExistError`/`IndexNotExistError` when the step is absent, and
    `QueryTypeError` when asked for the wrong kind of step.
    """

    def query_kind(self) -> "QueryKind | None": ...

    def query_dict(self, key: str) -> "Queryable": ...

    def query_array(self, index: int) -> "Queryable": ...
