from functools import reduce
from itertools import combinations, combinations_with_replacement, groupby, permutations, product
from math import comb

import pytest

from contestsolutions.div2_a import (
    and_then_there_were_k,
    can_rearrange,
    distinct_triangle_areas,
    dungeon_beatable,
    generate_string,
    maximize_sum_integer,
    min_steps_nonzero,
    omkar_nice_array,
    pretty_permutation,
    run,
    strange_partition,
    total_dissatisfaction,
)


def _and_range(low, high):
    return reduce(lambda acc, value: acc & value, range(low, high + 1))


@pytest.mark.parametrize("n", range(1, 70))
def test_and_then_there_were_k_is_largest(n):
    k = and_then_there_were_k(n)
    assert _and_range(k, n) == 0
    assert _and_range(k + 1, n) != 0


def test_and_then_there_were_k_rejects_zero():
    with pytest.raises(ValueError):
        and_then_there_were_k(0)


@pytest.mark.parametrize(
    "a, b, x",
    [
        ([1, 2, 3], [1, 1, 2], 4),
        ([1, 4], [2, 5], 6),
        ([1, 2, 3, 4], [1, 2, 3, 4], 4),
        ([5], [5], 5),
        ([1, 1, 3], [2, 2, 1], 4),
    ],
)
def test_can_rearrange_matches_exhaustive_search(a, b, x):
    expected = any(
        all(left + right <= x for left, right in zip(a, order))
        for order in permutations(b)
    )
    assert can_rearrange(a, b, x) is expected


def test_can_rearrange_rejects_length_mismatch():
    with pytest.raises(ValueError):
        can_rearrange([1, 2], [1], 3)


@pytest.mark.parametrize("size", range(2, 8))
def test_distinct_areas_consecutive_points(size):
    points = list(range(1, size + 1))
    assert distinct_triangle_areas(points) == len(points) - 1


@pytest.mark.parametrize("size", range(2, 7))
def test_distinct_areas_powers_of_two_all_differ(size):
    points = [2**i for i in range(size)]
    assert distinct_triangle_areas(points) == comb(size, 2)


@pytest.mark.parametrize(
    "n, x, t",
    [(n, x, t) for n in range(1, 7) for x in range(1, 5) for t in range(0, 13)],
)
def test_total_dissatisfaction_matches_definition(n, x, t):
    expected = sum(min(n - 1 - i, t // x) for i in range(n))
    assert total_dissatisfaction(n, x, t) == expected


def test_total_dissatisfaction_rejects_zero_interval():
    with pytest.raises(ValueError):
        total_dissatisfaction(3, 0, 5)


@pytest.mark.parametrize("k", range(1, 6))
def test_dungeon_balanced_health(k):
    assert dungeon_beatable(k, 7 * k, k) is True
    assert dungeon_beatable(k, 7 * k + 1, k) is False


def test_dungeon_weak_monster_fails():
    assert dungeon_beatable(1, 4, 13) is False


def _brute_steps(values):
    for steps in range(len(values) + 3):
        for chosen in combinations_with_replacement(range(len(values)), steps):
            updated = list(values)
            for index in chosen:
                updated[index] += 1
            if sum(updated) != 0 and all(updated):
                return steps
    raise AssertionError("no solution found")


@pytest.mark.parametrize(
    "values",
    [[2, -1, -1], [-1, 0, 0, 1], [-1, 2], [0, -2, 1], [0, 0], [-1, 1], [-2, 0, 0], [3]],
)
def test_min_steps_nonzero_matches_search(values):
    assert min_steps_nonzero(values) == _brute_steps(values)


def test_omkar_negative_has_no_answer():
    assert omkar_nice_array([3, -1, 5]) is None


def test_omkar_array_is_nice_and_contains_input():
    values = [3, 0, 9]
    nice = omkar_nice_array(values)
    members = set(nice)
    assert set(values) <= members
    assert all(abs(a - b) in members for a, b in combinations(nice, 2))


@pytest.mark.parametrize("n", range(2, 12))
def test_pretty_permutation_is_minimal_derangement(n):
    perm = pretty_permutation(n)
    assert sorted(perm) == list(range(1, n + 1))
    assert all(value != position for position, value in enumerate(perm, 1))
    moved = sum(abs(value - position) for position, value in enumerate(perm, 1))
    assert moved == (n if n % 2 == 0 else n + 1)


def test_pretty_permutation_rejects_single():
    with pytest.raises(ValueError):
        pretty_permutation(1)


def _compressed_value(a, b):
    digits = [str(int(x) + int(y)) for x, y in zip(a, b)]
    return int("".join(key for key, _ in groupby(digits)))


@pytest.mark.parametrize("b", ["".join(bits) for n in range(1, 5) for bits in product("01", repeat=n)])
def test_maximize_sum_integer_is_optimal(b):
    chosen = maximize_sum_integer(b)
    assert len(chosen) == len(b)
    best = max(_compressed_value("".join(a), b) for a in product("01", repeat=len(b)))
    assert _compressed_value(chosen, b) == best


def test_maximize_sum_integer_rejects_empty():
    with pytest.raises(ValueError):
        maximize_sum_integer("")


def test_strange_partition_example():
    assert strange_partition([3, 6, 9], 3) == (6, 6)


@pytest.mark.parametrize("values", [[1], [2, 5, 7], [10, 1, 1, 4]])
def test_strange_partition_invariants(values):
    low, high = strange_partition(values, 4)
    assert low <= high
    assert high >= len(values)
    assert strange_partition(values, 1) == (sum(values), sum(values))


def test_strange_partition_rejects_zero_divisor():
    with pytest.raises(ValueError):
        strange_partition([1, 2], 0)


def _longest_palindrome(s):
    return max(
        j - i
        for i in range(len(s))
        for j in range(i + 1, len(s) + 1)
        if s[i:j] == s[i:j][::-1]
    )


@pytest.mark.parametrize("n, k", [(n, k) for n in range(1, 10) for k in range(1, n + 1)])
def test_generate_string_palindrome_bound(n, k):
    s = generate_string(n, k)
    assert len(s) == n
    assert set(s) <= set("abc")
    assert _longest_palindrome(s) == k


def test_run_pretty_permutations():
    assert run("pretty-permutations", "1\n2\n") == "2 1 \n"


def test_run_dungeon():
    assert run("dungeon", "2\n3 2 4\n1 1 1\n") == "YES\nNO\n"


def test_run_omkar_formats_both_outcomes():
    output = run("omkar-and-bad-story", "2\n3\n3 0 9\n2\n-1 4\n")
    assert output.startswith("YES\n101\n0 1 2 ")
    assert output.endswith(" 100 \nNO\n")


def test_run_array_rearrangement_agrees_with_function():
    output = run("array-rearrangement", "2\n3 4\n1 2 3\n1 1 2\n2 6\n1 4\n2 5\n")
    expected = [
        "Yes" if can_rearrange([1, 2, 3], [1, 1, 2], 4) else "No",
        "Yes" if can_rearrange([1, 4], [2, 5], 6) else "No",
    ]
    assert output.splitlines() == expected


def test_run_unknown_problem():
    with pytest.raises(ValueError):
        run("no-such-problem", "1\n")


def test_run_truncated_input():
    with pytest.raises(ValueError):
        run("contest-start", "1\n4 2\n")