from .querable import Querable, lookup
from .config import resolve_tokenizer
from .kind import QueryKind, query_kind
from .tokenizers import DefaultTokenizer, SlashTokenizer
from .types import Queryable, Tokenizer

tokenizer_name, default_tokenizer = resolve_tokenizer()
querable = Querable(default_tokenizer)


__all__ = [
    "querable",
    "Querable",
    "Queryable",
    "QueryKind",
    "Tokenizer",
    "DefaultTokenizer",
    "SlashTokenizer",
    "lookup",
    "query_kind",
    "tokenizer_name",
]
