import pytest

from drillbox.students import (
    Student,
    StudentRecord,
    binary_search,
    format_record,
    format_student,
    insertion_sort,
    linear_search,
    merge_sort,
    parse_counted_students,
    parse_student_records,
    parse_students,
    quick_sort,
)

INSERT_DATA = "Alice 85\nBob 92\nCarol 78\nDavid 95\nEve 88\n"
MERGE_DATA = "5\nAlice 85\nBob 92\nCharlie 78\nDavid 96\nEve 88\n"


def test_parse_students_reads_pairs():
    students = parse_students(INSERT_DATA)
    assert students[0] == Student("Alice", 85)
    assert len(students) == 5


def test_parse_students_stops_on_bad_score():
    assert parse_students("Alice 85 Bob x Carol 78") == [Student("Alice", 85)]


def test_parse_students_caps_at_fifty():
    text = " ".join(f"s{i} {i}" for i in range(60))
    assert len(parse_students(text)) == 50


def test_insertion_sort_expected_order():
    ordered = insertion_sort(parse_students(INSERT_DATA))
    assert [format_student(s) for s in ordered] == [
        "David 95",
        "Bob 92",
        "Eve 88",
        "Alice 85",
        "Carol 78",
    ]


def test_merge_sort_expected_order():
    ordered = merge_sort(parse_counted_students(MERGE_DATA, 100))
    assert [format_student(s) for s in ordered] == [
        "David 96",
        "Bob 92",
        "Eve 88",
        "Alice 85",
        "Charlie 78",
    ]


def test_quick_sort_expected_order():
    ordered = quick_sort(parse_counted_students(MERGE_DATA, 100))
    assert [s.score for s in ordered] == [96, 92, 88, 85, 78]


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort, quick_sort])
def test_sorters_descending_and_permutation(sorter):
    data = [Student(f"n{i}", (i * 37) % 11) for i in range(30)]
    result = sorter(data)
    scores = [s.score for s in result]
    assert scores == sorted(scores, reverse=True)
    assert sorted(result, key=lambda s: s.name) == sorted(data, key=lambda s: s.name)


@pytest.mark.parametrize("sorter", [insertion_sort, merge_sort])
def test_stable_sorters_keep_ties_in_order(sorter):
    data = [Student("a", 5), Student("b", 7), Student("c", 5), Student("d", 7)]
    assert [s.name for s in sorter(data)] == ["b", "d", "a", "c"]


def test_sorters_do_not_modify_input():
    data = parse_students(INSERT_DATA)
    copy = list(data)
    quick_sort(data)
    merge_sort(data)
    insertion_sort(data)
    assert data == copy


@pytest.mark.parametrize("text", ["", "0 Alice 1", "101", "abc"])
def test_counted_students_invalid_count(text):
    with pytest.raises(ValueError):
        parse_counted_students(text, 100)


def test_counted_students_incomplete():
    with pytest.raises(ValueError):
        parse_counted_students("3 Alice 1 Bob 2", 50)


def test_linear_search_finds_david():
    students = parse_counted_students(MERGE_DATA, 50)
    index = linear_search(students, "David")
    assert index == 3
    assert students[index] == Student("David", 96)


def test_linear_search_missing():
    assert linear_search(parse_students(INSERT_DATA), "Zoe") is None


def test_binary_search_sorted_names():
    students = parse_counted_students("5 Alice 85 Bob 92 Carol 78 David 95 Eve 88", 50)
    assert binary_search(students, "David") == 3
    assert binary_search(students, "Alice") == 0
    assert binary_search(students, "Eve") == 4
    assert binary_search(students, "Frank") is None
    assert binary_search([], "David") is None


def test_student_records_and_format():
    records = parse_student_records("S001 Alice 20\nS002 Bob 21\nS003 Carol 19\n")
    assert records[2] == StudentRecord("S003", "Carol", 19)
    assert [format_record(r) for r in records] == [
        "学号：S001, 姓名：Alice, 年龄：20",
        "学号：S002, 姓名：Bob, 年龄：21",
        "学号：S003, 姓名：Carol, 年龄：19",
    ]


def test_student_records_incomplete():
    with pytest.raises(ValueError):
        parse_student_records("S001 Alice 20", 2)