"""Solutions to Codeforces Div. 2 "B" problems."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate, count, cycle, product
from math import prod
from string import ascii_lowercase

from .kickstart import _Tokens

__all__ = [
    "is_prime",
    "different_divisors",
    "elimination_cutoff",
    "pawn_game",
    "max_diversity",
    "love_song_lengths",
    "maximum_product",
    "pleasant_pairs",
    "mex_string",
    "strange_list_sum",
    "run",
]


def is_prime(n: int) -> bool:
    """Primality test by trial division over 6k +/- 1 candidates."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= n:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def _next_prime(start: int) -> int:
    return next(value for value in count(start) if is_prime(value))


def different_divisors(d: int) -> int:
    """Smallest number with at least four divisors, any two differing by at least ``d``."""
    if d < 1:
        raise ValueError("d must be positive")
    first = _next_prime(1 + d)
    second = _next_prime(first + d)
    return first * second


def elimination_cutoff(a: int, b: int, c: int, d: int) -> int:
    """Smallest possible cutoff score of the olympiad elimination stage."""
    return max(a + b, c + d)


def pawn_game(enemy: str, gregor: str) -> int:
    """Most of Gregor's pawns that can reach the first row.

    ``enemy`` and ``gregor`` are strings of ``0`` and ``1`` marking pawns in
    the enemy row and in Gregor's row.
    """
    if len(enemy) != len(gregor):
        raise ValueError("rows must have the same length")
    if set(enemy + gregor) - {"0", "1"}:
        raise ValueError("rows must consist of 0 and 1")
    board = [int(cell) for cell in enemy]
    width = len(board)
    reached = 0
    for i, pawn in enumerate(gregor):
        if pawn != "1":
            continue
        if i > 0 and board[i - 1] == 1:
            board[i - 1] = -1
        elif board[i] == 0:
            board[i] = -1
        elif i < width - 1 and board[i + 1] == 1:
            board[i + 1] = -1
        else:
            continue
        reached += 1
    return reached


def max_diversity(notes: Iterable[int]) -> int:
    """Most distinct notes reachable when each note may be raised by one."""
    ordered = sorted(notes)
    if not ordered:
        raise ValueError("notes must not be empty")
    previous = ordered[0]
    seen = {previous}
    for value in ordered[1:]:
        if value == previous:
            value += 1
        seen.add(value)
        previous = value
    return len(seen)


def love_song_lengths(s: str, queries: Iterable[tuple[int, int]]) -> list[int]:
    """Length of the expanded song for each 1-based inclusive ``(l, r)`` query."""
    prefix = list(accumulate((ord(char) - ord("a") + 1 for char in s), initial=0))
    lengths = []
    for left, right in queries:
        if not 1 <= left <= right <= len(s):
            raise ValueError(f"query out of range: {left} {right}")
        lengths.append(prefix[right] - prefix[left - 1])
    return lengths


def maximum_product(values: Sequence[int]) -> int:
    """Largest product of five elements of ``values``."""
    if len(values) < 5:
        raise ValueError("at least five values are needed")
    ordered = sorted(values)
    candidates = (
        prod(ordered[-5:]),
        prod(ordered[:2]) * prod(ordered[-3:]),
        prod(ordered[:4]) * ordered[-1],
    )
    return max(candidates)


def pleasant_pairs(values: Sequence[int]) -> int:
    """Number of 1-based pairs ``i < j`` with ``a_i * a_j == i + j``."""
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    n = len(values)
    arr = [0, *values]
    pairs = 0
    for i in range(1, n):
        k = arr[i]
        pairs += sum(
            1
            for j in range(k - i % k, n + 1, k)
            if j > i and arr[j] * k == i + j
        )
    return pairs


def mex_string(s: str) -> str | None:
    """Shortest, then lexicographically first, string of length up to three absent from ``s``.

    Returns ``None`` when every such string occurs in ``s``.
    """
    for length in range(1, 4):
        present = {s[i : i + length] for i in range(len(s) - length + 1)}
        for letters in product(ascii_lowercase, repeat=length):
            candidate = "".join(letters)
            if candidate not in present:
                return candidate
    return None


def strange_list_sum(values: Sequence[int], x: int) -> int:
    """Sum of the list after the robot stops processing it."""
    if not values:
        raise ValueError("values must not be empty")
    if x < 2:
        raise ValueError("x must be at least 2")
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    current = list(values)
    total = sum(values)
    for i in cycle(range(len(current))):
        if current[i] % x:
            break
        total += values[i]
        current[i] //= x
    return total


def _numbers(tokens: _Tokens, count_: int) -> list[int]:
    return [tokens.number() for _ in range(count_)]


def _solve_divisors(tokens: _Tokens) -> str:
    return f"{different_divisors(tokens.number())}\n"


def _solve_elimination(tokens: _Tokens) -> str:
    return f"{elimination_cutoff(*_numbers(tokens, 4))}\n"


def _solve_pawns(tokens: _Tokens) -> str:
    tokens.number()
    enemy = tokens.word()
    gregor = tokens.word()
    return f"{pawn_game(enemy, gregor)}\n"


def _solve_enhancements(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{max_diversity(_numbers(tokens, n))}\n"


def _solve_love_song(tokens: _Tokens) -> str:
    tokens.number()
    queries = tokens.number()
    song = tokens.word()
    pairs = [(tokens.number(), tokens.number()) for _ in range(queries)]
    return "".join(f"{length}\n" for length in love_song_lengths(song, pairs))


def _solve_product(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{maximum_product(_numbers(tokens, n))}\n"


def _solve_pleasant(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{pleasant_pairs(_numbers(tokens, n))}\n"


def _solve_mex(tokens: _Tokens) -> str:
    tokens.number()
    answer = mex_string(tokens.word())
    return "" if answer is None else answer + "\n"


def _solve_strange_list(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    return f"{strange_list_sum(_numbers(tokens, n), x)}\n"


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "different-divisors": _solve_divisors,
    "elimination": _solve_elimination,
    "pawn-game": _solve_pawns,
    "last-minute-enhancements": _solve_enhancements,
    "love-song": _solve_love_song,
    "maximum-product": _solve_product,
    "pleasant-pairs": _solve_pleasant,
    "prinzessin-der-verurteilung": _solve_mex,
    "strange-list": _solve_strange_list,
}

_SINGLE_CASE = {"love-song"}


def run(problem: str, text: str) -> str:
    """Solve every test case in ``text`` and return the judge output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    tokens = _Tokens(text)
    cases = 1 if problem in _SINGLE_CASE else tokens.number()
    return "".join(solver(tokens) for _ in range(cases))