"""A minimal ``s/old/new/`` substitution, first occurrence only."""

from __future__ import annotations

MAX_LINE_LENGTH = 1024


class SedError(ValueError):
    """Raised for a substitution command that cannot be parsed."""


def parse_replace_command(cmd: str) -> tuple[str, str]:
    """Split ``s/old/new/`` into ``(old, new)``."""
    if not cmd.startswith("s/"):
        raise SedError("Invalid replace command format. Use 's/old/new/'")
    parts = cmd[2:].split("/", 2)
    if len(parts) < 3:
        raise SedError("Invalid replace command format. Use 's/old/new/'")
    return parts[0], parts[1]


def replace_first_occurrence(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old`` in ``text`` with ``new``."""
    return text.replace(old, new, 1)


def run_sed(rules: str, text: str) -> str:
    """Apply the substitution in ``rules`` to ``text``.

    Only the first 1023 characters of the text are processed.
    """
    old, new = parse_replace_command(rules)
    return replace_first_occurrence(text[: MAX_LINE_LENGTH - 1], old, new)