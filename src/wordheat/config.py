# src/wordheat/config.py
import re

# Input file is fixed; there is no path argument.
DEFAULT_INPUT_FILE = "declaration.txt"

MAX_LINES = 15

# ASCII word characters. Shared by counting and rendering.
WORD_PATTERN = re.compile(r"[A-Za-z0-9_]+")

# Tier name -> rich style
TIER_STYLES = {
    "singleton": "blue",
    "common": "green",
    "frequent": "red",
}

ERROR_STYLE = "bold red"

SUMMARY_TOP_N = 10
