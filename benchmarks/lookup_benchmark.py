from benchbro import Case
from querable import lookup
from querable.tokenizers import DefaultTokenizer, SlashTokenizer


def _nested_child(depth: int, leaf: int = 1) -> dict:
    node: dict = {"id": 20, "child": leaf}
    for _ in range(depth - 1):
        node = {"id": 20, "child": node}
    return node


def _nested_array(depth: int) -> list:
    node: list = ["leaf"]
    for _ in range(depth - 1):
        node = [node]
    return node


SAMPLE = [
    {"id": 12, "child": _nested_child(6, leaf=10)},
    _nested_array(6),
    {"id": 12, "child": _nested_child(11)},
]

lookup_case = Case(
    name="lookup",
    case_type="cpu",
    metric_type="time",
    tags=["querable", "lookup"],
    warmup_iterations=5,
    min_iterations=50,
    repeats=10,
)


@lookup_case.benchmark()
def default_tokenizer_single_index():
    lookup(SAMPLE, "[0]", DefaultTokenizer)


@lookup_case.benchmark()
def default_tokenizer_index_then_key():
    lookup(SAMPLE, "[0].child.id", DefaultTokenizer)


@lookup_case.benchmark()
def default_tokenizer_nested_arrays():
    lookup(SAMPLE, "[1].[0].[0].[0].[0].[0].[0]", DefaultTokenizer)


@lookup_case.benchmark()
def default_tokenizer_deep_keys():
    lookup(SAMPLE, "[2]" + ".child" * 11, DefaultTokenizer)


@lookup_case.benchmark()
def slash_tokenizer_single_index():
    lookup(SAMPLE, "/0", SlashTokenizer)


@lookup_case.benchmark()
def slash_tokenizer_index_then_key():
    lookup(SAMPLE, "/0/child/id", SlashTokenizer)


@lookup_case.benchmark()
def slash_tokenizer_nested_arrays():
    lookup(SAMPLE, "/1/0/0/0/0/0/0", SlashTokenizer)


@lookup_case.benchmark()
def slash_tokenizer_deep_keys():
    lookup(SAMPLE, "/2" + "/child" * 11, SlashTokenizer)
