"""Reading files to an output stream."""

from __future__ import annotations

import os
import sys
from typing import TextIO


def read_file(path: str | os.PathLike[str], file: TextIO | None = None) -> None:
    """Write the contents of the text file at ``path`` to ``file`` (stdout by default).

    Raises ``OSError`` (for example ``FileNotFoundError``) if the file cannot be opened.
    """
    out = sys.stdout if file is None else file
    with open(path, encoding="utf-8", newline="") as source:
        for line in source:
            out.write(line)