# src/wordheat/core/summary.py
from collections import Counter
from typing import Mapping

from rich.table import Table

from wordheat.config import SUMMARY_TOP_N
from wordheat.models import Tier


def build_summary_table(word_counts: Mapping[str, int], top_n: int = SUMMARY_TOP_N) -> Table:
    """Top words by count. Ties keep first-occurrence order."""
    total = sum(word_counts.values())
    table = Table(
        title=f"Top {top_n} Words",
        caption=f"Total words: {total} | Unique words: {len(word_counts)}",
    )
    table.add_column("Rank", justify="right")
    table.add_column("Word")
    table.add_column("Count", justify="right")
    table.add_column("Tier")

    for i, (word, count) in enumerate(Counter(word_counts).most_common(top_n)):
        tier = Tier.from_count(count)
        tier_name = tier.value if tier else "-"
        style = tier.style if tier else None
        table.add_row(str(i + 1), word, str(count), tier_name, style=style)
    return table
