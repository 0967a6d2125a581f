# src/wordheat/core/renderer.py
from typing import Iterator, Mapping, Optional

from rich.color import ColorSystem
from rich.console import COLOR_SYSTEMS, Console

from wordheat.config import MAX_LINES
from wordheat.core.classifier import color_word
from wordheat.utils.tokenizer import Tokenizer


def render_line(
    line: str, word_counts: Mapping[str, int], color_system: Optional[ColorSystem] = ColorSystem.STANDARD
) -> str:
    """
    Styles every word in line by its global count.
    Everything between words is copied through byte for byte.
    """
    return Tokenizer.sub(
        lambda word: color_word(word, word_counts.get(word.lower(), 0), color_system),
        line,
    )


def iter_rendered_lines(
    content: str,
    word_counts: Mapping[str, int],
    max_lines: int = MAX_LINES,
    color_system: Optional[ColorSystem] = ColorSystem.STANDARD,
) -> Iterator[str]:
    """Yields rendered lines for at most the first max_lines lines of content."""
    # 只切分前 max_lines 行，后面的内容不处理
    for line in content.split("\n")[:max_lines]:
        yield render_line(line, word_counts, color_system)


def console_color_system(console: Console) -> Optional[ColorSystem]:
    """The color system to render for, or None when console output must stay plain."""
    if console.no_color or console.legacy_windows or console.color_system is None:
        return None
    return COLOR_SYSTEMS[console.color_system]


def print_colored_lines(
    content: str, word_counts: Mapping[str, int], console: Optional[Console] = None
) -> None:
    if console is None:
        console = Console()
    color_system = console_color_system(console)
    # Write straight to the file: Console.print would expand tabs and drop control characters
    for line in iter_rendered_lines(content, word_counts, color_system=color_system):
        console.file.write(line + "\n")
    console.file.flush()
