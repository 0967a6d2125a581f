# src/wordheat/models.py
from enum import Enum
from typing import Optional

from wordheat.config import TIER_STYLES


class Tier(Enum):
    """Display tier of a word, derived from its occurrence count."""
    SINGLETON = "singleton"
    COMMON = "common"
    FREQUENT = "frequent"

    @property
    def style(self) -> str:
        return TIER_STYLES[self.value]

    @classmethod
    def from_count(cls, count) -> Optional["Tier"]:
        """
        1 -> SINGLETON, 2..5 -> COMMON, >5 -> FREQUENT.
        Anything else (0, negative, not an int) has no tier.
        """
        if isinstance(count, bool) or not isinstance(count, int):
            return None
        if count == 1:
            return cls.SINGLETON
        if 2 <= count <= 5:
            return cls.COMMON
        if count > 5:
            return cls.FREQUENT
        return None
