"""Reading whitespace-separated integers from a text file."""

import re
from os import PathLike
from pathlib import Path

__all__ = ["NumberFileError", "parse_numbers", "read_numbers"]

_INTEGER = re.compile(r"[+-]?\d+")


class NumberFileError(ValueError):
    """Raised when a file of numbers cannot be read or holds something else."""


def parse_numbers(text: str) -> list[int]:
    """Return the integers in ``text``; every token must be an integer."""
    if not text:
        raise NumberFileError("File is empty")
    tokens = text.split()
    if not tokens:
        raise NumberFileError("Incorrect value in file")
    numbers = []
    for token in tokens:
        if not _INTEGER.fullmatch(token):
            raise NumberFileError(f"Incorrect value in file: {token!r}")
        numbers.append(int(token))
    return numbers


def read_numbers(path: str | PathLike[str]) -> list[int]:
    """Read and parse the integers stored in the file at ``path``."""
    try:
        text = Path(path).read_text()
    except OSError as error:
        raise NumberFileError(f"Can't open file {path}") from error
    return parse_numbers(text)