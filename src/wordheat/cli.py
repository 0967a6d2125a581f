# src/wordheat/cli.py
import sys
import argparse

from rich.console import Console

# Module imports
from wordheat.config import DEFAULT_INPUT_FILE, ERROR_STYLE, MAX_LINES
from wordheat.core.loader import read_file_content
from wordheat.core.counter import get_word_counts
from wordheat.core.renderer import print_colored_lines
from wordheat.core.summary import build_summary_table

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description=(
            f"Print the first {MAX_LINES} lines of '{DEFAULT_INPUT_FILE}' "
            "with every word colored by how often it occurs."
        )
    )
    parser.add_argument("--no-color", action="store_true", help="Disable styling")
    parser.add_argument("-s", "--summary", action="store_true", help="Also print a table of the most common words")
    return parser

def main():
    err_console = Console(stderr=True, highlight=False)
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        console = Console(no_color=args.no_color, highlight=False)

        # 2. Load
        try:
            content = read_file_content(DEFAULT_INPUT_FILE)
        except IOError as e:
            err_console.print(f"Error reading file: {e}", style=ERROR_STYLE, markup=False)
            sys.exit(1)

        # 3. Count over the whole file, not just the printed lines
        word_counts = get_word_counts(content)

        # 4. Render
        print_colored_lines(content, word_counts, console=console)

        if args.summary:
            console.print()
            console.print(build_summary_table(word_counts))

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
