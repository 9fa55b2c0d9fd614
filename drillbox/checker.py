"""Checks exercise solutions, runs their tests and reports a score."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import TextIO

SCORE_PER_EXERCISE = 5
TOTAL_SCORE = 200
MARKER = "I AM NOT DONE"
REPORT_NAME = "test_results_summary.json"
RULE = "================================================"

GREEN = "\033[0;32m"
RED = "\033[0;31m"
YELLOW = "\033[0;33m"
BLUE = "\033[0;34m"
RESET = "\033[0m"

EXERCISE_NAMES = (
    "01_insert_sort",
    "02_merge_sort",
    "03_quick_sort",
    "04_linear_search",
    "05_binary_search",
    "06_stack_maze",
    "07_queue_maze",
    "08_circular_queue",
    "09_word_counter",
    "10_my_strcpy",
    "11_command_interpreter",
    "12_student_management",
    "13_universal_sorter",
    "14_calculator",
    "15_url_parser",
    "16_mysed",
    "17_myfile",
    "18_mywc",
    "19_mytrans",
    "20_mybash",
    "21_singly_linked_list_josephus",
    "22_doubly_circular_queue",
    "23_circular_linked_list_josephus",
    "24_prev_binary_tree",
    "25_counter_letter",
    "26_hash_counter",
    "27_asm_gcd",
    "28_operator_overflow",
    "29_swap_endian",
    "30_debug_print",
    "31_event_handler",
    "32_container_of_macro",
    "33_garray_dynamic_array",
    "34_protocol_header_parser",
    "35_elf_info_parser",
    "36_lru_cache",
    "37_bitmap_operations",
    "38_thread_safe_ring_buffer",
    "39_strtok_r_thread_safe",
    "40_bloom_filter_bitmap",
)


class Outcome(Enum):
    """The result of checking an exercise or running its test."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    NOT_COMPLETED = "NOT_COMPLETED"


@dataclass
class Exercise:
    """An exercise and whether its last check passed."""

    name: str
    completed: bool = False


def file_contains_marker(path: str | os.PathLike, marker: str) -> bool:
    """Tell whether any line of a file contains ``marker``; a missing file does not."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return any(marker in line for line in handle)
    except OSError:
        return False


def primary_source_path(name: str) -> str:
    """Return the main source file of an exercise, relative to the root."""
    if name == "20_mybash":
        return "exercises/20_mybash/src/mybash/main.c"
    return f"exercises/{name}/{name}.c"


class Checker:
    """Runs the checks for all exercises below a project root."""

    def __init__(
        self,
        root: str | os.PathLike = ".",
        out: TextIO | None = None,
        compiler: Sequence[str] = ("gcc",),
    ) -> None:
        self.root = Path(root)
        self.out = out if out is not None else sys.stdout
        self.compiler = tuple(compiler)
        self.exercises = [Exercise(name) for name in EXERCISE_NAMES]
        self.total_passed = 0
        self.total_failed = 0

    def _say(self, text: str, color: str | None = None) -> None:
        if color:
            text = f"{color}{text}{RESET}"
        print(text, file=self.out)

    def find_exercise(self, key: str) -> str | None:
        """Find an exercise by full name or by its two-digit number."""
        names = [exercise.name for exercise in self.exercises]
        if key in names:
            return key
        return next((name for name in names if name[:2] == key), None)

    def run_test(self, name: str) -> Outcome:
        """Compile and run an exercise's test program.

        Returns NOT_COMPLETED when the test is missing or will not compile.
        """
        tests_dir = self.root / "tests"
        source = f"test_{name}.c"
        binary = f"test_{name}"
        if not (tests_dir / source).exists():
            self._say(f"⚠️  没有找到测试文件: tests/{source}", YELLOW)
            return Outcome.NOT_COMPLETED

        command = [
            *self.compiler,
            "-Wall", "-Wextra", "-std=c11",
            "-o", binary, source,
            "../checker/test_framework.c", "-I../checker",
        ]
        try:
            compiled = subprocess.run(
                command, cwd=tests_dir, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL
            ).returncode == 0
        except OSError:
            compiled = False
        if not compiled:
            self._say(f"❌ 测试编译失败: {name}", RED)
            return Outcome.NOT_COMPLETED

        executable = tests_dir.resolve() / binary
        try:
            result = subprocess.run(
                [os.fspath(executable)], cwd=tests_dir, stdout=subprocess.PIPE, stderr=subprocess.STDOUT
            )
            self.out.write(result.stdout.decode("utf-8", errors="replace"))
            passed = result.returncode == 0
        except OSError:
            passed = False
        finally:
            executable.unlink(missing_ok=True)
        return Outcome.PASSED if passed else Outcome.FAILED

    def check_exercise(self, name: str) -> Outcome:
        """Check that an exercise is finished and that its test passes."""
        source = primary_source_path(name)
        self._say("")
        self._say(f"🔍 检查练习题: {name}", BLUE)
        self._say(RULE)
        if not (self.root / source).exists():
            self._say(f"❌ 文件不存在: {source}", RED)
            return Outcome.NOT_COMPLETED
        if file_contains_marker(self.root / source, MARKER):
            self._say(f"⏳ 练习题尚未完成，请移除 '{MARKER}' 标记", YELLOW)
            return Outcome.NOT_COMPLETED

        outcome = self.run_test(name)
        if outcome is Outcome.PASSED:
            self._say("✅ 练习题通过所有测试！", GREEN)
        elif outcome is Outcome.FAILED:
            self._say("❌ 练习题测试失败", RED)
        else:
            self._say("⚠️  无法运行测试", YELLOW)
        return outcome

    def list_exercises(self) -> list[tuple[str, bool]]:
        """Print every exercise with its done state; returns (name, done) pairs."""
        self._say("📚 可用的练习题:", BLUE)
        self._say(RULE)
        listing = []
        for exercise in self.exercises:
            done = not file_contains_marker(self.root / primary_source_path(exercise.name), MARKER)
            listing.append((exercise.name, done))
            if done:
                self._say(f"  {exercise.name} - {GREEN}✅ 已完成{RESET}")
            else:
                self._say(f"  {exercise.name} - {RED}❌ 未完成{RESET}")
        return listing

    def check_all(self) -> dict:
        """Check every exercise, print a summary and write the JSON report."""
        self._say("🧪 C 语言练习题检查器", BLUE)
        self._say(RULE)
        self.total_passed = 0
        self.total_failed = 0
        for exercise in self.exercises:
            outcome = self.check_exercise(exercise.name)
            exercise.completed = outcome is Outcome.PASSED
            if outcome is Outcome.PASSED:
                self.total_passed += 1
            elif outcome is Outcome.FAILED:
                self.total_failed += 1

        count = len(self.exercises)
        self._say("")
        self._say("📊 总结:", BLUE)
        self._say(f"总共 {count} 道练习题")
        self._say(f"通过 {self.total_passed} 道", GREEN)
        self._say(f"失败 {self.total_failed} 道", RED)
        self._say(f"🏆 总分数: {self.total_passed * SCORE_PER_EXERCISE}/{TOTAL_SCORE}", BLUE)

        report = self.build_report()
        self._write(self.root / REPORT_NAME, report)

        self._say("")
        if self.total_passed == count:
            self._say("🎉 恭喜！所有练习题都通过了！", GREEN)
        else:
            self._say(f"还有 {count - self.total_passed} 道练习题需要完成", YELLOW)
        return report

    def show_hint(self, name: str) -> None:
        """Print where to find an exercise's files and how to proceed."""
        readme = f"exercises/{name}/readme.md"
        self._say(f"💡 练习题提示: {name}", BLUE)
        self._say(RULE)
        self._say(f"- 源码入口: {primary_source_path(name)}")
        self._say(f"- 测试文件: tests/test_{name}.c")
        if (self.root / readme).exists():
            self._say(f"- 题目说明: {readme}")
        self._say(f"- 先移除源码里的 '{MARKER}' 标记")
        self._say("- 再阅读测试文件，按断言要求补齐实现")
        if name == "20_mybash":
            self._say("- 20_mybash 包含多个子模块，需一起通过 Makefile 构建和测试")

    def build_report(self) -> dict:
        """Return the summary report for the last full check."""
        count = len(self.exercises)
        passed = self.total_passed
        failed = self.total_failed
        rate = round(passed / count * 100.0, 1) if count else 0.0
        return {
            "test_summary": {
                "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
                "total_exercises": count,
                "passed_exercises": passed,
                "failed_exercises": failed,
                "not_completed_exercises": count - passed - failed,
                "total_score": passed * SCORE_PER_EXERCISE,
                "max_score": TOTAL_SCORE,
                "success_rate": rate,
                "score_per_exercise": SCORE_PER_EXERCISE,
            },
            "exercises": [
                {
                    "name": exercise.name,
                    "status": "PASSED" if exercise.completed else "NOT_COMPLETED",
                    "score": SCORE_PER_EXERCISE if exercise.completed else 0,
                }
                for exercise in self.exercises
            ],
        }

    def write_report(self, path: str | os.PathLike) -> bool:
        """Write the current report as JSON; returns False when the file cannot be created."""
        return self._write(path, self.build_report())

    def _write(self, path: str | os.PathLike, data: dict) -> bool:
        try:
            with open(path, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False, indent=2)
                handle.write("\n")
        except OSError:
            self._say("警告: 无法创建总体 JSON 报告文件", RED)
            return False
        self._say(f"📝 总体 JSON 报告已生成: {os.path.basename(os.fspath(path))}", GREEN)
        return True


def _show_help(checker: Checker) -> None:
    checker._say("🛠️  C 语言练习题检查器使用说明", BLUE)
    checker._say(RULE)
    for line in (
        "用法:",
        "  ./c-checker list",
        "  ./c-checker check [exercise_name|number]",
        "  ./c-checker check-all",
        "  ./c-checker hint [exercise_name|number]",
        "  ./c-checker help",
        "",
        "例如:",
        "  ./c-checker check 01",
        "  ./c-checker check 21_singly_linked_list_josephus",
        "  ./c-checker hint 40",
    ):
        checker._say(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch the checker's commands; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    checker = Checker()
    if not args:
        _show_help(checker)
        return 1

    command = args[0]
    if command == "list":
        checker.list_exercises()
        return 0
    if command == "check-all":
        checker.check_all()
        return 0
    if command in ("check", "hint"):
        if len(args) < 2:
            checker._say("错误: 请指定练习题名称或编号", RED)
            return 1
        name = checker.find_exercise(args[1])
        if name is None:
            checker._say(f"错误: 找不到练习题 '{args[1]}'", RED)
            return 1
        if command == "check":
            return 0 if checker.check_exercise(name) is Outcome.PASSED else 1
        checker.show_hint(name)
        return 0
    if command == "help":
        _show_help(checker)
        return 0

    checker._say(f"错误: 未知命令 '{command}'", RED)
    _show_help(checker)
    return 1


if __name__ == "__main__":
    sys.exit(main())