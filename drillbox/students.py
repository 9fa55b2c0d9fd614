"""Student lists: parsing, sorting by score and searching by name."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass

MAX_UNCOUNTED_STUDENTS = 50


@dataclass(frozen=True)
class Student:
    """A student's name and score."""

    name: str
    score: int


@dataclass(frozen=True)
class StudentRecord:
    """A student's id, name and age."""

    id: str
    name: str
    age: int


def parse_students(text: str) -> list[Student]:
    """Read ``name score`` pairs until the data runs out or stops matching.

    At most fifty students are read.
    """
    tokens = text.split()
    students: list[Student] = []
    for name, score in zip(tokens[::2], tokens[1::2]):
        if len(students) >= MAX_UNCOUNTED_STUDENTS:
            break
        try:
            students.append(Student(name, int(score)))
        except ValueError:
            break
    return students


def parse_counted_students(text: str, limit: int) -> list[Student]:
    """Read a student count followed by that many ``name score`` pairs.

    Raises ValueError when the count is missing, not in 1..limit, or when
    fewer students follow than the count announces.
    """
    tokens = text.split()
    if not tokens:
        raise ValueError("missing student count")
    try:
        count = int(tokens[0])
    except ValueError as exc:
        raise ValueError(f"invalid student count: {tokens[0]!r}") from exc
    if count <= 0 or count > limit:
        raise ValueError(f"invalid student count: {count} (expected 1-{limit})")
    body = tokens[1:]
    if len(body) < 2 * count:
        raise ValueError(f"expected {count} students, data is incomplete")
    try:
        return [Student(name, int(score)) for name, score in zip(body[0 : 2 * count : 2], body[1 : 2 * count : 2])]
    except ValueError as exc:
        raise ValueError("invalid score in student data") from exc


def parse_student_records(text: str, count: int = 3) -> list[StudentRecord]:
    """Read ``count`` records of the form ``id name age``."""
    tokens = text.split()
    if len(tokens) < 3 * count:
        raise ValueError(f"expected {count} student records, data is incomplete")
    triples = zip(tokens[0 : 3 * count : 3], tokens[1 : 3 * count : 3], tokens[2 : 3 * count : 3])
    try:
        return [StudentRecord(sid, name, int(age)) for sid, name, age in triples]
    except ValueError as exc:
        raise ValueError("invalid age in student records") from exc


def insertion_sort(students: list[Student]) -> list[Student]:
    """Return the students ordered by score, highest first (stable)."""
    ordered: list[Student] = []
    keys: list[int] = []
    for student in students:
        position = bisect_right(keys, -student.score)
        keys.insert(position, -student.score)
        ordered.insert(position, student)
    return ordered


def merge_sort(students: list[Student]) -> list[Student]:
    """Return the students ordered by score, highest first (stable)."""
    if len(students) <= 1:
        return list(students)
    middle = len(students) // 2 + len(students) % 2
    left = merge_sort(students[:middle])
    right = merge_sort(students[middle:])
    merged: list[Student] = []
    while left and right:
        source = left if left[0].score >= right[0].score else right
        merged.append(source.pop(0))
    merged.extend(left)
    merged.extend(right)
    return merged


def quick_sort(students: list[Student]) -> list[Student]:
    """Return the students ordered by score, highest first.

    Uses the first element of each range as pivot; equal scores may be
    reordered.
    """
    items = list(students)
    ranges = [(0, len(items) - 1)]
    while ranges:
        left, right = ranges.pop()
        if left >= right:
            continue
        pivot = items[left]
        i, j = left, right
        while i < j:
            while i < j and items[j].score <= pivot.score:
                j -= 1
            if i < j:
                items[i] = items[j]
                i += 1
            while i < j and items[i].score >= pivot.score:
                i += 1
            if i < j:
                items[j] = items[i]
                j -= 1
        items[i] = pivot
        ranges.append((i + 1, right))
        ranges.append((left, i - 1))
    return items


def linear_search(students: list[Student], name: str) -> int | None:
    """Return the index of the first student called ``name``, or None."""
    return next((index for index, student in enumerate(students) if student.name == name), None)


def binary_search(students: list[Student], name: str) -> int | None:
    """Return the index of ``name`` in a list sorted by name, or None."""
    left, right = 0, len(students) - 1
    while left <= right:
        middle = left + (right - left) // 2
        current = students[middle].name
        if current == name:
            return middle
        if current < name:
            left = middle + 1
        else:
            right = middle - 1
    return None


def format_student(student: Student) -> str:
    """Render a student as ``name score``."""
    return f"{student.name} {student.score}"


def format_record(record: StudentRecord) -> str:
    """Render a record the way the management listing shows it."""
    return f"学号：{record.id}, 姓名：{record.name}, 年龄：{record.age}"