"""Solutions to Codeforces Div. 3 "C" and "D" problems."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterable, Sequence

from .kickstart import _Tokens

__all__ = [
    "sum_of_2020_and_2021",
    "count_pairs_in_range",
    "unique_number",
    "min_merge_operations",
    "run",
]

_VERDICT = {True: "YES\n", False: "NO\n"}


def sum_of_2020_and_2021(n: int) -> bool:
    """Whether ``n`` is a sum of some 2020s and some 2021s."""
    if n < 0:
        raise ValueError("n must not be negative")
    return any((n - 2021 * count) % 2020 == 0 for count in range(n // 2021 + 1))


def count_pairs_in_range(values: Iterable[int], low: int, high: int) -> int:
    """Number of pairs ``i < j`` with ``low <= a_i + a_j <= high``."""
    ordered = sorted(values)
    total = 0
    for i, value in enumerate(ordered):
        up = bisect_right(ordered, high - value)
        down = bisect_left(ordered, low - value)
        if down <= i < up:
            down += 1
        if up > down:
            total += up - down
    return total // 2


def unique_number(x: int) -> str | None:
    """Smallest number with distinct digits summing to ``x``, or ``None``."""
    if x < 0:
        raise ValueError("x must not be negative")
    digits: list[int] = []
    total = 0
    for digit in range(9, 0, -1):
        if total + digit <= x:
            total += digit
            digits.append(digit)
        if total == x:
            return "".join(str(d) for d in reversed(digits))
    return None


def _merge_cost(values: Sequence[int], target: int) -> int | None:
    """Merges needed to cut ``values`` into runs each summing to ``target``."""
    cost = 0
    running = 0
    start = 0
    for index, value in enumerate(values):
        running += value
        if running == target:
            cost += index - start
            start = index + 1
            running = 0
        elif running > target:
            return None
    return cost


def min_merge_operations(values: Sequence[int]) -> int:
    """Fewest add-to-neighbour-and-remove operations making all elements equal."""
    if not values:
        raise ValueError("values must not be empty")
    total = sum(values)
    best = len(values) - 1
    divisor = 1
    while divisor * divisor <= total:
        if total % divisor == 0:
            for target in (divisor, total // divisor):
                cost = _merge_cost(values, target)
                if cost is not None:
                    best = min(best, cost)
        divisor += 1
    return best


def _numbers(tokens: _Tokens, count: int) -> list[int]:
    return [tokens.number() for _ in range(count)]


def _solve_new_year(tokens: _Tokens) -> str:
    n = tokens.number()
    return _VERDICT[sum_of_2020_and_2021(n)]


def _solve_pairs(tokens: _Tokens) -> str:
    n, low, high = _numbers(tokens, 3)
    return f"{count_pairs_in_range(_numbers(tokens, n), low, high)}\n"


def _solve_unique(tokens: _Tokens) -> str:
    answer = unique_number(tokens.number())
    return f"{-1 if answer is None else answer}\n"


def _solve_merge(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{min_merge_operations(_numbers(tokens, n))}\n"


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "ball-in-berland": _solve_new_year,
    "number-of-pairs": _solve_pairs,
    "unique-number": _solve_unique,
    "add-to-neighbour-and-remove": _solve_merge,
}


def run(problem: str, text: str) -> str:
    """Solve every test case in ``text`` and return the judge output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(solver(tokens) for _ in range(cases))