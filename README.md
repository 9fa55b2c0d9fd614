# drillbox

Small programming drills and a checker that grades exercise solutions.

The drills cover classic ground: sorting and searching student lists,
finding a path through a maze with a stack and with a queue, the Josephus
circle, word counting, URL query parsing, a tiny `sed`, an ELF type reader,
a dictionary translator and a little shell that ties several of these tools
together. Everything is plain Python with no third-party dependencies.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The checker

`drillbox-check` works in the current directory, which should hold an
`exercises/` tree and a `tests/` tree. An exercise counts as unfinished
while its main source file (`exercises/<name>/<name>.c`, or
`exercises/20_mybash/src/mybash/main.c` for `20_mybash`) still contains the
marker `I AM NOT DONE`.

```
drillbox-check list              # every exercise, finished or not
drillbox-check check 01          # check one exercise by number ...
drillbox-check check 16_mysed    # ... or by its full name
drillbox-check check-all         # check everything and write a report
drillbox-check hint 40           # where to look for a given exercise
drillbox-check help
```

To check a finished exercise, the checker compiles `tests/test_<name>.c`
together with `checker/test_framework.c` using `gcc`, runs the resulting
program inside `tests/`, and removes it afterwards. A missing test file or
a failed compile leaves the exercise "not completed"; a non-zero exit of
the test program counts as a failure.

Each passed exercise scores 5 points, out of 200 for all 40.
`check-all` prints a summary and writes `test_results_summary.json` with a
UTC timestamp, the totals, the success rate and the status of each exercise.

`check` exits with status 0 only when the exercise passes; a missing
argument, an unknown exercise or an unknown command exits with status 1.

From Python, `drillbox.checker.Checker(root=..., out=..., compiler=...)`
offers the same operations: `find_exercise`, `check_exercise`,
`list_exercises`, `check_all`, `show_hint`, `build_report` and
`write_report`.

## The shell

`drillbox-shell` reads commands either from a script file or, with no
argument, interactively from a `mybash$ ` prompt.

```
drillbox-shell script.txt
drillbox-shell
```

Built-in commands are `cd <dir>` and `exit`. Besides those it knows:

| command                     | what it does                                          |
|-----------------------------|-------------------------------------------------------|
| `myfile <path>`             | prints the ELF type of a file                         |
| `mysed "s/old/new/" "text"` | replaces the first occurrence of *old* in *text*      |
| `mytrans <path>`            | translates each word of a text file via a dictionary  |
| `mywc <path>`               | counts how often each word occurs in a file           |

Double quotes group words with spaces into a single argument. When running
a script, the shell also echoes each command name and its first two
arguments before running it.

`mytrans` loads its dictionary from
`../exercises/20_mybash/src/mytrans/dict.txt`, falling back to
`./src/mytrans/dict.txt`. Dictionary files hold `#word` lines each followed
by a `Trans:<translation>` line.

## Using the modules

The drills are plain functions you can call from Python:

```python
from drillbox.students import parse_students, insertion_sort, format_student
from drillbox.maze import MAZE, dfs_path, format_path
from drillbox.calculator import calculate
from drillbox.sed import run_sed

for student in insertion_sort(parse_students("Alice 85\nBob 92\nCarol 78\n")):
    print(format_student(student))

print(format_path(dfs_path(MAZE)), end="")
print(calculate(6, 3, "/"))
print(run_sed("s/unix/linux/", "unix is opensource. unix is free os."))
```

Modules at a glance:

- `drillbox.students` – `Student` and `StudentRecord`, parsing of student
  lists, insertion/merge/quick sort by score (high to low), linear and
  binary search by name
- `drillbox.maze` – `dfs_path` and `bfs_path` through a grid of 0s and 1s,
  and `format_path`
- `drillbox.josephus` – `eliminate` gives the removal order and survivor;
  `report` renders it
- `drillbox.textutils` – word counting, string copy, URL query parameters
- `drillbox.interpreter` – a quoted-argument parser and the `help`, `echo`
  and `add` commands
- `drillbox.sorter` – sorting ints, floats or strings read from a small
  text format (`process_text`, `process_file`)
- `drillbox.calculator` – the four integer operations; division truncates
  toward zero and division by zero gives 0
- `drillbox.sed` – parsing `s/old/new/` rules and applying them; bad rules
  raise `SedError`
- `drillbox.elftype` – reading the type field of an ELF header; files
  without the ELF magic raise `NotElfError`
- `drillbox.wordcount` – word frequencies and a report in hashed bucket order
- `drillbox.translator` – `Dictionary`, dictionary loading and word-by-word
  translation
- `drillbox.shell` – the `Shell` behind `drillbox-shell`
- `drillbox.checker` – the `Checker` behind `drillbox-check`

## What it does not do

The package ships no exercises, exercise test programs, test framework
sources or dictionary files; the checker and the `mytrans` command expect
those in the working directory. Grading needs `gcc` on the `PATH`. The
shell runs only its built-ins and the four commands above; it does not
start other programs, and it has no pipes, redirection or variables.