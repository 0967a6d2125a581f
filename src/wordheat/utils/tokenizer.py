# src/wordheat/utils/tokenizer.py
from typing import Callable, List

from wordheat.config import WORD_PATTERN


class Tokenizer:
    """
    Single source of truth for what a "word" is.
    Counter and Renderer both go through here so the two passes never disagree.
    """
    pattern = WORD_PATTERN

    @staticmethod
    def words(text: str) -> List[str]:
        return Tokenizer.pattern.findall(text)

    @staticmethod
    def sub(repl: Callable[[str], str], text: str) -> str:
        """Replaces every word with repl(word); all other characters are kept as is."""
        return Tokenizer.pattern.sub(lambda m: repl(m.group()), text)
