"""An English-to-Chinese word translator backed by a loaded dictionary."""

from __future__ import annotations

import os
import re
import string
from collections.abc import Iterable
from typing import TextIO

_MASK = (1 << 64) - 1
_C_SPACE = " \t\n\v\f\r"
_WORD_LIMIT = 99
_TRANSLATION_LIMIT = 1023
_TOKEN_SPLIT = re.compile(r"[ \t]+")
_CORE = re.compile(r"[^A-Za-z0-9]*(.*?)[^A-Za-z0-9]*\Z", re.DOTALL)
_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORKSPACE_PREFIX = "/workspace/exercises/20_mybash/"
_LOCAL_PREFIX = "../exercises/20_mybash/"


def djb2(text: str) -> int:
    """Return the 64-bit djb2 hash of the UTF-8 bytes of ``text``."""
    value = 5381
    for byte in text.encode("utf-8"):
        signed = byte - 256 if byte >= 128 else byte
        value = (value * 33 + signed) & _MASK
    return value


class Dictionary:
    """A word-to-translation mapping that counts every insertion."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self.insertions = 0

    def insert(self, key: str, value: str) -> None:
        """Store a translation, replacing any earlier one for the key."""
        self._entries[key] = value
        self.insertions += 1

    def lookup(self, key: str) -> str | None:
        """Return the translation of ``key``, or None."""
        return self._entries.get(key)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


def _truncate_bytes(text: str, limit: int) -> str:
    return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")


def parse_dictionary(lines: Iterable[str]) -> Dictionary:
    """Build a dictionary from ``#word`` lines each followed by ``Trans:...``.

    An entry is kept only when both its word and its translation are
    non-empty; the translation is stripped of surrounding whitespace.
    """
    dictionary = Dictionary()
    word = ""
    translation = ""
    in_entry = False

    def flush() -> None:
        if in_entry and word and translation:
            dictionary.insert(word, translation.strip(_C_SPACE))

    for raw in lines:
        line = raw.split("\n", 1)[0]
        if line.startswith("#"):
            flush()
            word = _truncate_bytes(line[1:], _WORD_LIMIT)
            translation = ""
            in_entry = True
        elif in_entry and line.startswith("Trans:"):
            translation = _truncate_bytes(line[6:], _TRANSLATION_LIMIT)
    flush()
    return dictionary


def load_dictionary(path: str | os.PathLike) -> Dictionary:
    """Load a dictionary file."""
    with open(path, encoding="utf-8", errors="replace", newline="") as handle:
        return parse_dictionary(handle)


def extract_words(line: str) -> list[str]:
    """Split a line on blanks and trim each token to its alphanumeric core.

    The words are lower-cased; tokens with no letters or digits vanish.
    """
    words = []
    for token in _TOKEN_SPLIT.split(line.split("\n", 1)[0]):
        match = _CORE.match(token)
        core = match.group(1) if match else ""
        if core:
            words.append(core.translate(_LOWER))
    return words


def translate_lines(lines: Iterable[str], dictionary: Dictionary) -> list[str]:
    """Translate every word of the lines, one output line per word."""
    output = []
    for line in lines:
        for word in extract_words(line):
            translation = dictionary.lookup(word)
            if translation is not None:
                output.append(f"原文: {word}\t翻译: {translation}")
            else:
                output.append(f"原文: {word}\t未找到该单词的翻译。")
    return output


def _open_text(path: str | os.PathLike) -> TextIO:
    name = os.fspath(path)
    try:
        return open(name, encoding="utf-8", errors="replace", newline="")
    except OSError:
        if isinstance(name, str) and name.startswith(_WORKSPACE_PREFIX):
            local = _LOCAL_PREFIX + name[len(_WORKSPACE_PREFIX):]
            return open(local, encoding="utf-8", errors="replace", newline="")
        raise


def translate_file(path: str | os.PathLike, dictionary: Dictionary) -> list[str]:
    """Translate every word of a text file."""
    with _open_text(path) as handle:
        return translate_lines(handle, dictionary)