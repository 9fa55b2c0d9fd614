"""A small shell that runs the sed, file, translate and word-count commands."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from drillbox.elftype import NotElfError, elf_type_name, read_elf_type
from drillbox.sed import SedError, run_sed
from drillbox.translator import Dictionary, load_dictionary, translate_file
from drillbox.wordcount import count_file, format_counts

MAX_ARGS = 64
PROMPT = "mybash$ "
DICTIONARY_PATHS = (
    "../exercises/20_mybash/src/mytrans/dict.txt",
    "./src/mytrans/dict.txt",
)


def parse_input(line: str) -> list[str]:
    """Split a line on spaces and tabs; double quotes group blanks together.

    Quote characters themselves are dropped and an empty argument is never
    produced. At most 63 arguments are returned.
    """
    args: list[str] = []
    current: list[str] = []
    in_quotes = False
    for char in line:
        if len(args) >= MAX_ARGS - 1:
            break
        if char == '"':
            in_quotes = not in_quotes
        elif char in " \t" and not in_quotes:
            if current:
                args.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        args.append("".join(current))
    return args


def _show(value: str | None) -> str:
    return "(null)" if value is None else value


class Shell:
    """Runs built-in and custom commands, line by line."""

    def __init__(
        self,
        out: TextIO | None = None,
        err: TextIO | None = None,
        dictionary_paths: Sequence[str | os.PathLike] = DICTIONARY_PATHS,
        trace: bool = False,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.dictionary_paths = tuple(dictionary_paths)
        self.trace = trace
        self._commands: dict[str, tuple[int, Callable[..., int]]] = {
            "myfile": (1, self._myfile),
            "mysed": (2, self._mysed),
            "mytrans": (1, self._mytrans),
            "mywc": (1, self._mywc),
        }

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _complain(self, text: str) -> None:
        print(text, file=self.err)

    def run_line(self, line: str) -> bool:
        """Run one input line. Returns False when the shell should exit."""
        args = parse_input(line.split("\n", 1)[0])
        if not args:
            return True

        name = args[0]
        if name == "cd":
            self._cd(args)
            return True
        if name == "exit":
            return False

        arg1 = args[1] if len(args) >= 2 else None
        arg2 = args[2] if len(args) >= 3 else None
        if self.trace:
            self._say(f"cmd_name: {name}")
            self._say(f"cmd_arg1: {_show(arg1)}")
            self._say(f"cmd_arg2: {_show(arg2)}")

        entry = self._commands.get(name)
        if entry is None:
            self._complain(f"mybash: command not found: {name}")
            return True
        arity, handler = entry
        handler(*(arg1, arg2)[:arity])
        return True

    def run_script(self, path: str | os.PathLike) -> int:
        """Run every line of a script file; returns the exit status."""
        name = os.fspath(path)
        try:
            handle = open(name, encoding="utf-8", errors="replace", newline="")
        except OSError:
            self._say(f"mybash: cannot open file: {name}")
            return 1
        self._say(f"mybash: reading commands from file '{name}'")
        previous, self.trace = self.trace, True
        try:
            with handle:
                for line in handle:
                    if not self.run_line(line):
                        break
        finally:
            self.trace = previous
        return 0

    def interactive(self, stream: TextIO) -> int:
        """Prompt for and run lines from ``stream`` until end of input or exit."""
        while True:
            self.out.write(PROMPT)
            self.out.flush()
            line = stream.readline()
            if not line:
                self._say("")
                return 0
            if not self.run_line(line):
                return 0

    def _cd(self, args: list[str]) -> None:
        if len(args) < 2:
            self._complain('mybash: expected argument to "cd"')
            return
        try:
            os.chdir(args[1])
        except OSError as exc:
            self._complain(f"mybash: {exc.strerror or exc}")

    def _myfile(self, filename: str | None) -> int:
        if filename is None:
            self._complain("mybash: myfile: missing file argument")
            return 1
        self.out.flush()
        self._say(f"filepath: {filename}")
        try:
            e_type = read_elf_type(filename)
        except NotElfError:
            self._say("ELF Type: Unknown (ET_NONE) (0x0)")
            return 1
        except OSError as exc:
            self._complain(f"open: {exc.strerror or exc}")
            return 1
        except ValueError as exc:
            self._complain(f"read: {exc}")
            return 1
        self._say(f"ELF Type: {elf_type_name(e_type)} (0x{e_type:x})")
        return 0

    def _mysed(self, rules: str | None, text: str | None) -> int:
        if rules is None or text is None:
            self._complain("Error: NULL rules or str parameter")
            return 1
        self._say(f"rules: {rules}")
        self._say(f"str: {text}")
        try:
            result = run_sed(rules, text)
        except SedError as exc:
            self._complain(str(exc))
            return 1
        self._say(result)
        return 0

    def _load_dictionary(self) -> Dictionary | None:
        for path in self.dictionary_paths:
            try:
                return load_dictionary(path)
            except OSError as exc:
                self._complain(f"无法打开词典文件: {exc.strerror or exc}")
        return None

    def _mytrans(self, filename: str | None) -> int:
        self._say("=== 哈希表版英语翻译器（支持百万级数据）===")
        dictionary = self._load_dictionary()
        if dictionary is None:
            self._complain("加载词典失败，请确保 dict.txt 存在。")
            return 1
        self._say(f"词典加载完成，共计{dictionary.insertions}词条。")
        if filename is None:
            self._complain("无法打开文件 dict.txt。")
            return 1
        try:
            lines = translate_file(filename, dictionary)
        except OSError:
            self._complain("无法打开文件 dict.txt。")
            return 1
        for line in lines:
            self._say(line)
        return 0

    def _mywc(self, filename: str | None) -> int:
        if filename is None:
            self._complain("Error opening file: missing file argument")
            return 1
        try:
            counts = count_file(filename)
        except OSError as exc:
            self._complain(f"Error opening file: {exc.strerror or exc}")
            return 1
        for line in format_counts(counts):
            self._say(line)
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run a script named on the command line, or read commands from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    shell = Shell()
    if args:
        return shell.run_script(args[0])
    return shell.interactive(sys.stdin)


if __name__ == "__main__":
    sys.exit(main())