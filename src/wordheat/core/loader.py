# src/wordheat/core/loader.py
from pathlib import Path
from typing import Union

from wordheat.config import DEFAULT_INPUT_FILE


def read_file_content(path: Union[str, Path] = DEFAULT_INPUT_FILE) -> str:
    """
    Reads the whole file as strict UTF-8, with line endings left as they are.
    Raises IOError if the file is missing, unreadable or not valid UTF-8.
    """
    path = Path(path)
    try:
        # newline="": no \r\n -> \n translation
        with path.open("r", encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        # 解码失败也按 IOError 处理，调用方只需要捕获一种异常
        raise IOError(f"Cannot decode '{path}' as UTF-8: {e}") from e
