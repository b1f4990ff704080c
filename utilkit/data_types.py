"""Printed reference tables for primitive type limits, format specifiers and ASCII."""

from __future__ import annotations

import sys
from typing import TextIO

RULE_WIDTH = 136

LIMITS: tuple[tuple[str, int], ...] = (
    ("Max size of a char bit data type:  ", 8),
    ("Min size of a char:                ", -128),
    ("Max size of a char:                ", 127),
    ("Min size of a short int:           ", -32768),
    ("Max size of a short int:           ", 32767),
    ("Max size of an unsigned short int: ", 65535),
    ("Min size of an int:                ", -(2**31)),
    ("Max size of an int:                ", 2**31 - 1),
    ("Max size of an unisigned int:      ", 2**32 - 1),
    ("Min size of a long int:            ", -(2**63)),
    ("Max size of a long int:            ", 2**63 - 1),
    ("Max size of an unsigned long int:  ", 2**64 - 1),
)

FORMAT_SPECIFIERS: tuple[tuple[str, str], ...] = (
    ("Character:             ", "%c"),
    ("Int:                   ", "%d"),
    ("Unsigned Int:          ", "%u"),
    ("Scientific Notations:  ", "%e or %E"),
    ("Float:                 ", "%f"),
    ("Signed int:            ", "%i"),
    ("Long int:              ", "%ld or %li"),
    ("Long double:           ", "%lf"),
    ("Unsigned int/long:     ", "%lu"),
    ("Long long int:         ", "%lli or %lld"),
    ("Unsigned long long:    ", "%llu"),
    ("Octal:                 ", "%o"),
    ("Pointer:               ", "%p"),
    ("String literal:        ", "%s"),
    ("Hexadecimal:           ", "%x or %X"),
)

ESCAPE_CHARS: tuple[tuple[str, str], ...] = (
    ("Newline:         ", "\\n"),
    ("Tab:             ", "\\t"),
    ("Backspace:       ", "\\b"),
    ("Carriage Return: ", "\\r"),
    ("Null Character:  ", "\\0"),
)


def _out(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def print_limits(file: TextIO | None = None) -> None:
    """Print the ranges of the primitive integer types."""
    out = _out(file)
    out.write("\n C data type limits:\n\n")
    for label, value in LIMITS:
        out.write(f"\t{label}{value:>20}\n")
    out.write("\n")


def print_format_specifiers(file: TextIO | None = None) -> None:
    """Print the format specifier for each data type."""
    out = _out(file)
    out.write("\n Format Specifiers:\n\n")
    for label, spec in FORMAT_SPECIFIERS:
        out.write(f"\t{label}{spec}\n")
    out.write("\n")


def print_alphabet(ascii: bool = False, file: TextIO | None = None) -> None:
    """Print the upper-case alphabet, as letters or as their ASCII codes."""
    out = _out(file)
    letters = (chr(ord("A") + offset) for offset in range(26))
    cells = (str(ord(letter)) if ascii else letter for letter in letters)
    out.write("".join(f"{cell} " for cell in cells))
    out.write("\n")


def print_ascii_table(file: TextIO | None = None) -> None:
    """Print the printable ASCII characters with their codes, eight per row."""
    out = _out(file)
    rule = "_" * RULE_WIDTH
    out.write("\n ASCII Table:")
    for position, code in enumerate(range(32, 127)):
        if position % 8 == 0:
            out.write(f"\t\n\n{rule}\n\n\n")
        out.write(f"  '{chr(code)}' -- '{code:3d}'  |")
    out.write(f"\n\n\n{rule}\n\n")


def print_escape_chars(file: TextIO | None = None) -> None:
    """Print the common escape sequences."""
    out = _out(file)
    out.write(" Escape Characters:\n\n")
    for label, sequence in ESCAPE_CHARS:
        out.write(f"\t{label}{sequence}\n")
    out.write("\n")


def print_spacer(size: int, file: TextIO | None = None) -> None:
    """Print ``size`` dashes with no trailing newline."""
    _out(file).write("-" * max(size, 0))