import pytest

from sketchbook.pancake import format_steps, main, pancake_sort

SAMPLES = [
    [2, 1, 2, 4, 5, 7, 6, 9, 10, 2],
    [1, 6, 5, 12, 9, 10, 3, 4, 5, 2],
    [4, 6, 2, 5, 7, 9, 3, 4, 6, 2],
    [1, 2, 3],
    [3, 2, 1],
    [5],
    [],
    [-3, 7, -3, 0],
]


def states(report):
    body = report[len("---\n"):]
    chunks = [chunk for chunk in body.split("\n---\n") if chunk]
    return [[int(token) for token in chunk.split(": ", 1)[1].split()] for chunk in chunks]


@pytest.mark.parametrize("values", SAMPLES)
def test_sorts(values):
    assert pancake_sort(values) == sorted(values)


def test_input_not_modified():
    values = [3, 1, 2]
    pancake_sort(values)
    assert values == [3, 1, 2]


@pytest.mark.parametrize("values", SAMPLES)
def test_report_states_are_permutations(values):
    snapshots = states(format_steps(values))
    assert snapshots[0] == values
    assert snapshots[-1] == sorted(values)
    for snapshot in snapshots:
        assert sorted(snapshot) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_each_step_is_a_prefix_reversal(values):
    snapshots = states(format_steps(values))
    for before, after in zip(snapshots, snapshots[1:]):
        assert any(
            after == before[:k][::-1] + before[k:] for k in range(2, len(before) + 1)
        )


@pytest.mark.parametrize("values", [v for v in SAMPLES if len(v) > 1])
def test_step_count_bounds(values):
    flips = len(states(format_steps(values))) - 1
    assert len(values) - 1 <= flips <= 2 * (len(values) - 1)


def test_report_layout():
    report = format_steps([2, 1])
    assert report.startswith("---\nInitial list: 2 1 \n---\n")
    assert report.endswith("1 2 \n---\n")


def test_main_uses_example(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_steps([2, 1, 2, 4, 5, 7, 6, 9, 10, 2])


def test_main_with_arguments(capsys):
    assert main(["3", "1", "2"]) == 0
    assert states(capsys.readouterr().out)[-1] == [1, 2, 3]