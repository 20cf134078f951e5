import os
from collections.abc import Callable

import pytest

from querable.tokenizers import DefaultTokenizer, SlashTokenizer
from querable.types import Tokenizer

Step = str | int
PathBuilder = Callable[..., str]


def _default_path(*steps: Step) -> str:
    return ".".join(f"[{step}]" if isinstance(step, int) else step for step in steps)


def _slash_path(*steps: Step) -> str:
    return "".join(f"/{step}" for step in steps)


_TOKENIZERS: dict[str, tuple[type[Tokenizer], PathBuilder]] = {
    "default": (DefaultTokenizer, _default_path),
    "slash": (SlashTokenizer, _slash_path),
}


def _discover_tokenizers() -> list[tuple[str, type[Tokenizer], PathBuilder]]:
    requested = os.getenv("QUERABLE_TEST_TOKENIZERS")
    if requested is None:
        return [(name, *entry) for name, entry in _TOKENIZERS.items()]

    requested_ids = [item.strip() for item in requested.split(",") if item.strip()]
    missing = [name for name in requested_ids if name not in _TOKENIZERS]
    if missing:
        raise RuntimeError(
            "Requested test tokenizers are unavailable: "
            f"{', '.join(missing)}. Available: {', '.join(_TOKENIZERS)}"
        )

    return [(name, *_TOKENIZERS[name]) for name in requested_ids]


@pytest.fixture(
    params=_discover_tokenizers(), ids=lambda tokenizer_entry: tokenizer_entry[0]
)
def tokenizer_entry(
    request: pytest.FixtureRequest,
) -> tuple[str, type[Tokenizer], PathBuilder]:
    return request.param


@pytest.fixture
def tokenizer(tokenizer_entry) -> type[Tokenizer]:
    return tokenizer_entry[1]


@pytest.fixture
def make_path(tokenizer_entry) -> PathBuilder:
    """Render steps in the tokenizer's syntax: `make_path("a", 1)` -> `a.[1]` or `/a/1`."""
    return tokenizer_entry[2]
