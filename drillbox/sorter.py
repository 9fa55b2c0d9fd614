"""Sorting integers, floats or strings read from a small text format."""

from __future__ import annotations

import os
from collections.abc import Sequence
from enum import IntEnum

MAX_VALUES = 20


class ValueKind(IntEnum):
    """The kind of values in a sort file, by its numeric code."""

    INT = 1
    FLOAT = 2
    STRING = 3


_CONVERTERS = {ValueKind.INT: int, ValueKind.FLOAT: float, ValueKind.STRING: str}


def sort_values(kind: ValueKind, values: Sequence) -> list:
    """Return the values in ascending order."""
    converter = _CONVERTERS[ValueKind(kind)]
    return sorted(converter(value) for value in values)


def format_values(kind: ValueKind, values: Sequence) -> str:
    """Join values with spaces; floats use two decimals."""
    if ValueKind(kind) is ValueKind.FLOAT:
        return " ".join(f"{value:.2f}" for value in values)
    return " ".join(str(value) for value in values)


def process_text(text: str) -> list[str]:
    """Sort the values described by ``text`` and return the output lines.

    The text holds a kind code, a count (capped at twenty) and the values.
    An unknown kind yields a single ``未知类型`` line.
    """
    tokens = text.split()
    try:
        code, count = int(tokens[0]), int(tokens[1])
    except (IndexError, ValueError) as exc:
        raise ValueError("malformed sort data: expected kind and count") from exc
    count = min(count, MAX_VALUES)
    try:
        kind = ValueKind(code)
    except ValueError:
        return ["未知类型"]
    if count <= 0:
        return []
    raw = tokens[2 : 2 + count]
    if len(raw) < count:
        raise ValueError(f"expected {count} values, data is incomplete")
    try:
        ordered = sort_values(kind, raw)
    except ValueError as exc:
        raise ValueError("invalid value in sort data") from exc
    return [format_values(kind, ordered)]


def process_file(path: str | os.PathLike) -> list[str]:
    """Sort the values in a file; returns a header line and the results."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    try:
        body = process_text(text)
    except ValueError as exc:
        raise ValueError(f"文件 {os.fspath(path)} 格式不正确: {exc}") from exc
    return [f"=== 处理数据来自: {os.fspath(path)} ===", *body]