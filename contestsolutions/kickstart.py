"""Solutions to Kick Start round problems."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Sequence

__all__ = [
    "increasing_substring_lengths",
    "k_goodness_operations",
    "count_l_shaped_plots",
    "rabbit_house_boxes",
    "smaller_strings",
    "run",
]


class _Tokens:
    """Whitespace separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._iterator = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._iterator)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())

    def grid(self, rows: int, cols: int) -> list[list[int]]:
        return [[self.number() for _ in range(cols)] for _ in range(rows)]


def increasing_substring_lengths(s: str) -> list[int]:
    """Length of the longest strictly increasing substring ending at each position."""
    lengths: list[int] = []
    previous: str | None = None
    for char in s:
        if previous is not None and char > previous:
            lengths.append(lengths[-1] + 1)
        else:
            lengths.append(1)
        previous = char
    return lengths


def k_goodness_operations(s: str, k: int) -> int:
    """Minimum changes needed so exactly ``k`` mirrored positions differ."""
    mismatches = sum(
        1 for left, right in zip(s[: len(s) // 2], reversed(s)) if left != right
    )
    return abs(mismatches - k)


def _checked_grid(grid: Iterable[Sequence[int]]) -> list[list[int]]:
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows must all have the same length")
    if any(cell not in (0, 1) for row in rows for cell in row):
        raise ValueError("grid cells must be 0 or 1")
    return rows


def _l_shapes(first_arm: int, second_arm: int) -> int:
    short, long = sorted((first_arm, second_arm))
    if short < 2 or long < 4:
        return 0
    return min(short - 1, long // 2 - 1) + min(short // 2 - 1, long - 1)


def count_l_shaped_plots(grid: Iterable[Sequence[int]]) -> int:
    """Count L-shaped plots of ones whose long arm is twice the short arm."""
    rows = _checked_grid(grid)
    height, width = len(rows), len(rows[0])
    up = [[0] * width for _ in range(height)]
    left = [[0] * width for _ in range(height)]
    down = [[0] * width for _ in range(height)]
    right = [[0] * width for _ in range(height)]

    for i in range(height):
        for j in range(width):
            if rows[i][j]:
                up[i][j] = 1 + (up[i - 1][j] if i > 0 else 0)
                left[i][j] = 1 + (left[i][j - 1] if j > 0 else 0)

    for i in reversed(range(height)):
        for j in reversed(range(width)):
            if rows[i][j]:
                down[i][j] = 1 + (down[i + 1][j] if i + 1 < height else 0)
                right[i][j] = 1 + (right[i][j + 1] if j + 1 < width else 0)

    total = 0
    for i in range(height):
        for j in range(width):
            if rows[i][j] != 1:
                continue
            for vertical in (up[i][j], down[i][j]):
                for horizontal in (left[i][j], right[i][j]):
                    total += _l_shapes(horizontal, vertical)
    return total


def rabbit_house_boxes(grid: Iterable[Sequence[int]]) -> int:
    """Fewest boxes to add so neighbouring cells differ in height by at most one."""
    heights = [list(row) for row in grid]
    original = [list(row) for row in heights]
    height = len(heights)
    width = len(heights[0]) if heights else 0
    if any(len(row) != width for row in heights):
        raise ValueError("grid rows must all have the same length")

    heap = [
        (-value, -i, -j) for i, row in enumerate(heights) for j, value in enumerate(row)
    ]
    heapq.heapify(heap)
    visited: set[tuple[int, int]] = set()

    while heap:
        _, neg_i, neg_j = heapq.heappop(heap)
        i, j = -neg_i, -neg_j
        if (i, j) in visited:
            continue
        visited.add((i, j))
        current = heights[i][j]
        for ni, nj in ((i + 1, j), (i - 1, j), (i, j + 1), (i, j - 1)):
            if not (0 <= ni < height and 0 <= nj < width) or (ni, nj) in visited:
                continue
            if current - heights[ni][nj] > 1:
                heights[ni][nj] = current - 1
                heapq.heappush(heap, (-heights[ni][nj], -ni, -nj))

    return sum(
        new - old
        for new_row, old_row in zip(heights, original)
        for new, old in zip(new_row, old_row)
    )


def smaller_strings(n: int, s: str) -> int:
    """Answer derived from the first letter of ``s`` for a string of length ``n``."""
    if not s:
        raise ValueError("string must not be empty")
    offset = ord(s[0]) - ord("a")
    return offset if n == 1 else offset + 1


def _solve_increasing_substring(tokens: _Tokens) -> str:
    tokens.number()
    lengths = increasing_substring_lengths(tokens.word())
    return "".join(f"{length} " for length in lengths)


def _solve_k_goodness(tokens: _Tokens) -> str:
    tokens.number()
    k = tokens.number()
    return str(k_goodness_operations(tokens.word(), k))


def _solve_l_shaped(tokens: _Tokens) -> str:
    rows, cols = tokens.number(), tokens.number()
    return str(count_l_shaped_plots(tokens.grid(rows, cols)))


def _solve_rabbit_house(tokens: _Tokens) -> str:
    rows, cols = tokens.number(), tokens.number()
    return str(rabbit_house_boxes(tokens.grid(rows, cols)))


def _solve_smaller_strings(tokens: _Tokens) -> str:
    n = tokens.number()
    tokens.number()
    return str(smaller_strings(n, tokens.word()))


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "increasing-substring": _solve_increasing_substring,
    "k-goodness-string": _solve_k_goodness,
    "l-shaped-plots": _solve_l_shaped,
    "rabbit-house": _solve_rabbit_house,
    "smaller-strings": _solve_smaller_strings,
}


def run(problem: str, text: str) -> str:
    """Solve every test case in ``text`` and return the judge output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    tokens = _Tokens(text)
    cases = tokens.number()
    return "".join(
        f"Case #{case}: {solver(tokens)}\n" for case in range(1, cases + 1)
    )