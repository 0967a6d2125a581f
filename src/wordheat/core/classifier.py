# src/wordheat/core/classifier.py
from typing import Optional

from rich.color import ColorSystem
from rich.style import Style

from wordheat.models import Tier


def color_word(word: str, count, color_system: Optional[ColorSystem] = ColorSystem.STANDARD) -> str:
    """
    Wraps word in the escape codes of its frequency tier.
    Unexpected counts (0, negative, ...) or no color system leave the word as is.
    """
    tier = Tier.from_count(count)
    if tier is None or color_system is None:
        return word
    return Style.parse(tier.style).render(word, color_system=color_system)
