# src/difftok/utils/tokenizer.py
from functools import lru_cache
from typing import List

import tiktoken

from difftok.config import ENCODING_ALIASES, SUPPORTED_ENCODINGS
from difftok.errors import EncodingError


def resolve_encoding_name(name: str) -> str:
    """Maps aliases (e.g. gpt2) to their canonical tiktoken name."""
    canonical = ENCODING_ALIASES.get(name, name)
    if canonical not in SUPPORTED_ENCODINGS:
        raise EncodingError(f"unsupported encoding '{name}'")
    return canonical


@lru_cache(maxsize=None)
def _get_encoding(name: str) -> tiktoken.Encoding:
    return tiktoken.get_encoding(name)


class Tokenizer:
    def __init__(self, encoding: tiktoken.Encoding, name: str):
        self._encoding = encoding
        self.name = name

    def encode(self, text: str) -> List[int]:
        # Special-token text such as <|endoftext|> is counted, not rejected.
        return self._encoding.encode(text, allowed_special="all")

    def count(self, text: str) -> int:
        """Number of tokens in text."""
        return len(self.encode(text))

    def __repr__(self) -> str:
        return f"Tokenizer(name={self.name!r})"


def load_encoding(name: str) -> Tokenizer:
    """
    Loads the tiktoken encoding for name.
    Raises EncodingError for unknown names and for encodings tiktoken fails to load.
    """
    canonical = resolve_encoding_name(name)
    try:
        encoding = _get_encoding(canonical)
    except Exception as e:
        raise EncodingError(f"failed to load encoding '{name}': {e}") from e
    return Tokenizer(encoding, canonical)
