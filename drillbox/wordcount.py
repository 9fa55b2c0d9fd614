"""Word frequency counting with a fixed bucket order for the report."""

from __future__ import annotations

import os
import re
import string
from collections import Counter
from collections.abc import Iterator, Mapping

MAX_WORD_LEN = 128
HASH_SIZE = 1000

_MASK = (1 << 64) - 1
_WORD = re.compile(r"[A-Za-z']+")
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORKSPACE_PREFIX = "/workspace/exercises/20_mybash/"
_LOCAL_PREFIX = "../exercises/20_mybash/"


def bucket_index(word: str) -> int:
    """Return the report bucket of a word: its djb2 hash modulo 1000."""
    value = 5381
    for byte in word.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _MASK
    return value % HASH_SIZE


def tokenize(text: str) -> Iterator[str]:
    """Yield lower-cased words made of ASCII letters and apostrophes.

    Words longer than 127 characters are cut to their first 127.
    """
    for match in _WORD.finditer(text):
        yield match.group(0)[: MAX_WORD_LEN - 1].translate(_LOWER)


def count_words(text: str) -> dict[str, int]:
    """Count each word of ``text``, keeping first-seen order."""
    return dict(Counter(tokenize(text)))


def format_counts(counts: Mapping[str, int]) -> list[str]:
    """Render the statistics report.

    Words are listed by bucket; within a bucket the word seen last
    comes first.
    """
    ordered = sorted(
        enumerate(counts.items()),
        key=lambda item: (bucket_index(item[1][0]), -item[0]),
    )
    lines = ["Word Count Statistics:", "======================"]
    lines.extend(f"{word:<20} {count}" for _, (word, count) in ordered)
    return lines


def count_file(path: str | os.PathLike) -> dict[str, int]:
    """Count the words of a file.

    Paths under the shared workspace directory are read from the local
    exercise tree instead.
    """
    name = os.fspath(path)
    if isinstance(name, str) and name.startswith(_WORKSPACE_PREFIX):
        name = _LOCAL_PREFIX + name[len(_WORKSPACE_PREFIX):]
    with open(name, "rb") as handle:
        data = handle.read()
    return count_words(data.decode("latin-1"))