import os

from .tokenizers import DefaultTokenizer, SlashTokenizer
from .types import Tokenizer

TOKENIZER_ENV_VAR = "QUERABLE_TOKENIZER"
_TOKENIZERS: dict[str, type[Tokenizer]] = {
    "default": DefaultTokenizer,
    "slash": SlashTokenizer,
}


def resolve_tokenizer(preference: str | None = None) -> tuple[str, type[Tokenizer]]:
    requested = (preference or os.getenv(TOKENIZER_ENV_VAR, "default")).strip().lower()

    if requested not in _TOKENIZERS:
        valid_options = ", ".join(sorted(_TOKENIZERS))
        raise ValueError(
            f"Invalid tokenizer '{requested}'. Expected one of: {valid_options}."
        )

    return requested, _TOKENIZERS[requested]
