"""Command that demonstrates the growable containers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from utilkit.string_utils import StringArray
from utilkit.vector import Vector


def _out(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def demo_string_array(file: TextIO | None = None) -> None:
    """Fill a string array, print it, pop one element and print it again."""
    out = _out(file)
    arr = StringArray(10)
    for word in ("hello", "world", "people"):
        arr.append(word)
    out.write(arr.format())
    arr.pop()
    out.write(arr.format())


def demo_vector(file: TextIO | None = None) -> None:
    """Fill an integer vector, print it, pop one element and print it again."""
    out = _out(file)
    vec: Vector[int] = Vector()
    for value in (10, 5, 1):
        vec.push(value)
    out.write(vec.format())
    vec.pop()
    out.write(vec.format())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the vector demonstration."""
    parser = argparse.ArgumentParser(
        prog="utilkit",
        description="Demonstrate the growable vector.",
    )
    parser.parse_args(argv)
    demo_vector()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())