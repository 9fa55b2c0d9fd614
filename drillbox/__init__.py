"""Small programming drills, a mini shell and a checker that grades exercises."""

__version__ = "0.1.0"

__all__ = [
    "calculator",
    "checker",
    "elftype",
    "interpreter",
    "josephus",
    "maze",
    "sed",
    "shell",
    "sorter",
    "students",
    "textutils",
    "translator",
    "wordcount",
]