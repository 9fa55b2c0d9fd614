"""A tiny command interpreter: split a line into arguments and run it."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

MAX_ARGS = 10

_ARGUMENT = re.compile(r'"([^"]*)"?|[^ \t]+')
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


def shell_parse(line: str) -> list[str]:
    """Split a line on spaces and tabs, honouring double quotes.

    A quoted argument runs to the next quote or to the end of the line.
    At most ten arguments are returned.
    """
    args: list[str] = []
    for match in _ARGUMENT.finditer(line):
        quoted = match.group(1)
        args.append(quoted if quoted is not None else match.group(0))
        if len(args) >= MAX_ARGS:
            break
    return args


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def execute_command(args: Sequence[str]) -> list[str]:
    """Describe the parsed arguments and run the command they name.

    Known commands are ``help``, ``echo`` and ``add`` (with exactly two
    operands). Returns the output lines.
    """
    if not args:
        raise ValueError("no command to execute")
    lines = [f"Parsing result: Total {len(args)} parameters"]
    lines.extend(
        f"Parameter {number}: Content: {arg}, Length: {len(arg.encode())}"
        for number, arg in enumerate(args, start=1)
    )
    name = args[0]
    if name == "help":
        lines.append("This is help command")
    elif name == "echo":
        lines.append("Echo: " + "".join(f"{arg} " for arg in args[1:]))
    elif name == "add" and len(args) == 3:
        a, b = _atoi(args[1]), _atoi(args[2])
        lines.append(f"{a} + {b} = {a + b}")
    else:
        lines.append(f"Unknown command: {name}")
    return lines


def run_command_lines(lines: Iterable[str]) -> list[str]:
    """Run every non-blank line as a command and collect the output."""
    output: list[str] = []
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if not line.strip(" \t"):
            continue
        output.append(f"➡️  Input: {line}")
        args = shell_parse(line)
        if not args:
            output.append("⚠️  No valid command parsed.")
            output.append("")
            continue
        output.extend(execute_command(args))
        output.append("")
    return output