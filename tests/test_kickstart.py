import pytest

from contestsolutions.kickstart import (
    count_l_shaped_plots,
    increasing_substring_lengths,
    k_goodness_operations,
    rabbit_house_boxes,
    run,
    smaller_strings,
)

SAMPLE_PLOTS_SMALL = [[1, 0, 0], [1, 0, 1], [1, 0, 0], [1, 1, 0]]
SAMPLE_PLOTS_LARGE = [
    [1, 0, 0, 0],
    [1, 0, 0, 1],
    [1, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 0, 1, 0],
    [1, 1, 1, 0],
]


def _rotate(grid):
    return [list(row) for row in zip(*grid[::-1])]


def test_increasing_substring_strictly_increasing():
    text = "ABCDEFG"
    assert increasing_substring_lengths(text) == list(range(1, len(text) + 1))


def test_increasing_substring_constant_string():
    assert increasing_substring_lengths("ZZZZ") == [1] * 4


def test_increasing_substring_step_invariant():
    text = "ABBCDAXYZB"
    lengths = increasing_substring_lengths(text)
    assert len(lengths) == len(text)
    assert lengths[0] == 1
    for prev_char, char, prev_len, length in zip(text, text[1:], lengths, lengths[1:]):
        assert length == (prev_len + 1 if char > prev_char else 1)


def test_increasing_substring_empty():
    assert increasing_substring_lengths("") == []


def test_k_goodness_palindrome_needs_k_changes():
    assert k_goodness_operations("ABCBA", 2) == 2
    assert k_goodness_operations("ABBA", 1) == 1


def test_k_goodness_symmetric_in_reversal():
    assert k_goodness_operations("ABCAA", 1) == k_goodness_operations("AACBA", 1)


def test_k_goodness_middle_letter_ignored():
    assert k_goodness_operations("ABXBA", 3) == k_goodness_operations("ABYBA", 3)


def test_l_shaped_samples():
    assert count_l_shaped_plots(SAMPLE_PLOTS_SMALL) == 1
    assert count_l_shaped_plots(SAMPLE_PLOTS_LARGE) == 9


@pytest.mark.parametrize("grid", [SAMPLE_PLOTS_SMALL, SAMPLE_PLOTS_LARGE])
def test_l_shaped_rotation_invariant(grid):
    expected = count_l_shaped_plots(grid)
    rotated = grid
    for _ in range(3):
        rotated = _rotate(rotated)
        assert count_l_shaped_plots(rotated) == expected


def test_l_shaped_all_zero_grid():
    assert count_l_shaped_plots([[0] * 5 for _ in range(5)]) == 0


def test_l_shaped_rejects_bad_grids():
    with pytest.raises(ValueError):
        count_l_shaped_plots([])
    with pytest.raises(ValueError):
        count_l_shaped_plots([[1, 0], [1]])
    with pytest.raises(ValueError):
        count_l_shaped_plots([[2, 0]])


def test_rabbit_house_sample():
    assert rabbit_house_boxes([[0, 0, 0], [0, 2, 0], [0, 0, 0]]) == 4


def test_rabbit_house_already_safe():
    assert rabbit_house_boxes([[3, 4, 3]]) == 0


def test_rabbit_house_offset_invariant():
    grid = [[3, 0, 0], [0, 5, 1], [2, 0, 7]]
    shifted = [[value + 10 for value in row] for row in grid]
    assert rabbit_house_boxes(grid) == rabbit_house_boxes(shifted)


def test_rabbit_house_does_not_modify_input():
    grid = [[5, 0], [0, 0]]
    rabbit_house_boxes(grid)
    assert grid == [[5, 0], [0, 0]]


def test_smaller_strings_first_letter():
    assert smaller_strings(1, "c") == ord("c") - ord("a")
    assert smaller_strings(3, "cab") == smaller_strings(1, "c") + 1


def test_smaller_strings_empty_raises():
    with pytest.raises(ValueError):
        smaller_strings(0, "")


def test_run_k_goodness_format():
    output = run("k-goodness-string", "2\n5 1\nABCAA\n4 2\nABAA\n")
    assert output == (
        f"Case #1: {k_goodness_operations('ABCAA', 1)}\n"
        f"Case #2: {k_goodness_operations('ABAA', 2)}\n"
    )


def test_run_increasing_substring_format():
    output = run("increasing-substring", "1\n4\nABBC\n")
    lengths = increasing_substring_lengths("ABBC")
    assert output == "Case #1: " + "".join(f"{n} " for n in lengths) + "\n"


def test_run_l_shaped_matches_function():
    text = "1\n4 3\n1 0 0\n1 0 1\n1 0 0\n1 1 0\n"
    assert run("l-shaped-plots", text) == (
        f"Case #1: {count_l_shaped_plots(SAMPLE_PLOTS_SMALL)}\n"
    )


def test_run_errors():
    with pytest.raises(ValueError):
        run("no-such-problem", "1\n")
    with pytest.raises(ValueError):
        run("rabbit-house", "1\n2 2\n1 2\n")