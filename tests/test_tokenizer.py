# tests/test_tokenizer.py
import pytest

from difftok.config import SUPPORTED_ENCODINGS
from difftok.errors import EncodingError
from difftok.utils.tokenizer import load_encoding, resolve_encoding_name


# --- Test 1: Name resolution (no vocabulary download) ---

@pytest.mark.parametrize("name", SUPPORTED_ENCODINGS)
def test_supported_names_resolve_to_themselves(name):
    assert resolve_encoding_name(name) == name


def test_gpt2_alias():
    assert resolve_encoding_name("gpt2") == "r50k_base"


def test_unsupported_name_is_in_message():
    with pytest.raises(EncodingError) as exc_info:
        load_encoding("cl200k_fancy")
    assert "cl200k_fancy" in str(exc_info.value)
    assert str(exc_info.value) == "unsupported encoding 'cl200k_fancy'"


def test_load_failure_is_an_encoding_error(monkeypatch):
    def boom(name):
        raise ValueError("network unreachable")

    monkeypatch.setattr("difftok.utils.tokenizer._get_encoding", boom)
    with pytest.raises(EncodingError, match="failed to load encoding 'gpt2'"):
        load_encoding("gpt2")


# --- Test 2: Real tiktoken (skipped when the vocabulary cannot be fetched) ---

@pytest.fixture(scope="module")
def o200k():
    try:
        return load_encoding("o200k_base")
    except EncodingError as e:
        pytest.skip(f"tiktoken encoding unavailable: {e}")


def test_real_count(o200k):
    assert o200k.count("hello world") == 2
    assert o200k.count("") == 0


def test_special_tokens_are_counted(o200k):
    assert o200k.count("<|endoftext|>") == 1


def test_alias_loads_canonical_encoding():
    try:
        tokenizer = load_encoding("gpt2")
    except EncodingError as e:
        pytest.skip(f"tiktoken encoding unavailable: {e}")
    assert tokenizer.name == "r50k_base"
