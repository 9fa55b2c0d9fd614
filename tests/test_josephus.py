import pytest

from drillbox.josephus import eliminate, report


def test_fifty_people_interval_five():
    removed, survivor = eliminate(50, 5)
    assert len(removed) == 49
    assert survivor == 19
    assert removed[0] == 5
    assert removed[1] == 10
    assert removed[9] == 50
    assert removed[10] == 6
    assert removed[48] == 36


def test_removed_ids_unique_and_in_range():
    removed, survivor = eliminate(50, 5)
    assert len(set(removed)) == 49
    assert all(1 <= person <= 50 for person in removed)
    assert set(removed) | {survivor} == set(range(1, 51))


def test_report_lines():
    lines = report(50, 5)
    assert lines[0] == "淘汰: 5"
    assert lines[-1] == "最后剩下的人是: 19"
    assert len(lines) == 50


def test_single_person():
    assert eliminate(1, 5) == ([], 1)


def test_interval_one_removes_in_order():
    assert eliminate(4, 1) == ([1, 2, 3], 4)


@pytest.mark.parametrize("total, interval", [(0, 5), (5, 0)])
def test_invalid_arguments(total, interval):
    with pytest.raises(ValueError):
        eliminate(total, interval)