"""Sort integers with two stacks and print the stack operations used."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "cli",
    "conversions",
    "formatting",
    "linkedlist",
    "memory",
    "output",
    "parsing",
    "radix",
    "simplesort",
    "stacks",
    "strings",
]