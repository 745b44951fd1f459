"""A terminal game of matches against the computer or another person, with printf-style formatting and text helpers."""

__version__ = "1.0.0"
__all__ = [
    "ai",
    "board",
    "chars",
    "fmt_decimal",
    "fmt_radix",
    "fmt_text",
    "fmtspec",
    "game",
    "linereader",
    "numbers",
    "output",
    "printf",
    "rules",
    "strings",
]