# src/wordheat/core/counter.py
from collections import Counter
from types import MappingProxyType
from typing import Mapping

from wordheat.utils.tokenizer import Tokenizer


def get_word_counts(content: str) -> Mapping[str, int]:
    """Case-insensitive tally of every word token in content (read-only)."""
    tally = Counter(word.lower() for word in Tokenizer.words(content))
    return MappingProxyType(dict(tally))
