"""Small string tasks: word counting, string copying, URL query parsing."""

from __future__ import annotations

import re

_QUERY_LIMIT = 511
_WORD = re.compile(r"[^ \n]+")


def count_words(text: str) -> int:
    """Count runs of characters separated by spaces or newlines."""
    return len(_WORD.findall(text))


def copy_string(text: str) -> str:
    """Copy a string up to, not including, its first NUL character."""
    return text.split("\0", 1)[0]


def parse_url_params(url: str) -> list[tuple[str, str]]:
    """Return the ``key=value`` pairs of a URL's query, in order.

    Empty segments and segments without ``=`` are skipped. Only the
    first 511 characters after ``?`` are considered.
    """
    _, mark, query = url.partition("?")
    if not mark:
        return []
    pairs = []
    for token in query[:_QUERY_LIMIT].split("&"):
        key, eq, value = token.partition("=")
        if token and eq:
            pairs.append((key, value))
    return pairs


def format_url_params(url: str) -> list[str]:
    """Render each query pair as ``key = K, value = V``."""
    return [f"key = {key}, value = {value}" for key, value in parse_url_params(url)]