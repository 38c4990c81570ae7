"""Solutions to Codeforces Div. 2 "A" problems."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import combinations

from .kickstart import _Tokens

__all__ = [
    "and_then_there_were_k",
    "can_rearrange",
    "distinct_triangle_areas",
    "total_dissatisfaction",
    "dungeon_beatable",
    "min_steps_nonzero",
    "omkar_nice_array",
    "pretty_permutation",
    "maximize_sum_integer",
    "strange_partition",
    "generate_string",
    "run",
]


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def and_then_there_were_k(n: int) -> int:
    """Largest k such that n & (n-1) & ... & k equals zero."""
    if n < 1:
        raise ValueError("n must be positive")
    smeared = n
    for shift in (1, 2, 4, 8, 16):
        smeared |= smeared >> shift
    return (smeared ^ (smeared >> 1)) - 1


def can_rearrange(a: Sequence[int], b: Sequence[int], x: int) -> bool:
    """Whether ``b`` can be reordered so that every ``a[i] + b[i] <= x``."""
    if len(a) != len(b):
        raise ValueError("arrays must have the same length")
    pairs = zip(sorted(a), sorted(b, reverse=True))
    return all(left + right <= x for left, right in pairs)


def distinct_triangle_areas(xs: Iterable[int]) -> int:
    """Number of distinct pairwise distances between the given points."""
    return len({abs(second - first) for first, second in combinations(xs, 2)})


def total_dissatisfaction(n: int, x: int, t: int) -> int:
    """Total dissatisfaction of ``n`` participants starting every ``x`` minutes."""
    if x < 1:
        raise ValueError("x must be positive")
    limit = x * (n - 1)
    k = _trunc_div(limit - t, x)
    last = 0
    if k >= 0:
        if t + k * x < limit:
            k += 1
        last = t + k * x
        tail = _trunc_div(t + limit - last, x)
    else:
        tail = n - 1
    triangle = tail * (tail + 1) // 2
    middle = _trunc_div(t, x) * _trunc_div(last - t, x)
    return triangle + middle if middle >= 0 else triangle


def dungeon_beatable(a: int, b: int, c: int) -> bool:
    """Whether all three monsters can die on the same enhanced shot."""
    total = a + b + c
    return total % 9 == 0 and min(a, b, c) >= total // 9


def min_steps_nonzero(values: Sequence[int]) -> int:
    """Fewest increments making both the sum and the product non-zero."""
    zeros = sum(1 for value in values if value == 0)
    total = sum(values)
    if zeros == 0:
        return 0 if total != 0 else 1
    if total < 0 and zeros == -total:
        return zeros + 1
    return zeros


def omkar_nice_array(values: Iterable[int]) -> list[int] | None:
    """A nice array containing ``values``, or ``None`` when none exists."""
    if any(value < 0 for value in values):
        return None
    return list(range(101))


def pretty_permutation(n: int) -> list[int]:
    """A permutation of 1..n with no fixed points and minimal total movement."""
    if n < 2:
        raise ValueError("n must be at least 2")
    result = list(range(1, n + 1))
    for i in range(0, n - 1, 2):
        result[i], result[i + 1] = result[i + 1], result[i]
    if n % 2:
        result[-2], result[-1] = result[-1], result[-2]
    return result


def maximize_sum_integer(b: str) -> str:
    """Binary string ``a`` maximising the compressed digit-wise sum with ``b``."""
    if not b:
        raise ValueError("string must not be empty")
    previous = int(b[0]) + 1
    chosen = ["1"]
    for char in b[1:]:
        digit = 1 if char == "1" else 0
        if digit + 1 != previous:
            previous = digit + 1
            chosen.append("1")
        else:
            previous = digit
            chosen.append("0")
    return "".join(chosen)


def strange_partition(values: Sequence[int], x: int) -> tuple[int, int]:
    """Minimum and maximum beauty obtainable by merging neighbouring elements."""
    if x < 1:
        raise ValueError("x must be positive")
    merged = _ceil_div(sum(values), x)
    separate = sum(_ceil_div(value, x) for value in values)
    return min(merged, separate), max(merged, separate)


def generate_string(n: int, k: int) -> str:
    """String of length ``n`` whose longest palindromic substring has length ``k``."""
    pattern = "bca"
    rest = max(n - k, 0)
    return "a" * k + (pattern * (rest // 3 + 1))[:rest]


def _numbers(tokens: _Tokens, count: int) -> list[int]:
    return [tokens.number() for _ in range(count)]


def _spaced(values: Iterable[int]) -> str:
    return "".join(f"{value} " for value in values) + "\n"


def _solve_and_then(tokens: _Tokens) -> str:
    return f"{and_then_there_were_k(tokens.number())}\n"


def _solve_array(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    a = _numbers(tokens, n)
    b = _numbers(tokens, n)
    return "Yes\n" if can_rearrange(a, b, x) else "No\n"


def _solve_bovine(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{distinct_triangle_areas(_numbers(tokens, n))}\n"


def _solve_contest(tokens: _Tokens) -> str:
    n, x, t = tokens.number(), tokens.number(), tokens.number()
    return f"{total_dissatisfaction(n, x, t)}\n"


def _solve_dungeon(tokens: _Tokens) -> str:
    a, b, c = _numbers(tokens, 3)
    return "YES\n" if dungeon_beatable(a, b, c) else "NO\n"


def _solve_non_zero(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{min_steps_nonzero(_numbers(tokens, n))}\n"


def _solve_omkar(tokens: _Tokens) -> str:
    n = tokens.number()
    nice = omkar_nice_array(_numbers(tokens, n))
    if nice is None:
        return "NO\n"
    return f"YES\n{len(nice)}\n" + _spaced(nice)


def _solve_pretty(tokens: _Tokens) -> str:
    return _spaced(pretty_permutation(tokens.number()))


def _solve_puzzle(tokens: _Tokens) -> str:
    tokens.number()
    return maximize_sum_integer(tokens.word()) + "\n"


def _solve_strange_partition(tokens: _Tokens) -> str:
    n, x = tokens.number(), tokens.number()
    low, high = strange_partition(_numbers(tokens, n), x)
    return f"{low} {high}\n"


def _solve_string_generation(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return generate_string(n, k) + "\n"


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "and-then-there-were-k": _solve_and_then,
    "array-rearrangement": _solve_array,
    "bovine-dilemma": _solve_bovine,
    "contest-start": _solve_contest,
    "dungeon": _solve_dungeon,
    "non-zero": _solve_non_zero,
    "omkar-and-bad-story": _solve_omkar,
    "pretty-permutations": _solve_pretty,
    "puzzle-from-the-future": _solve_puzzle,
    "strange-partition": _solve_strange_partition,
    "string-generation": _solve_string_generation,
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