"""Solutions to Codeforces Educational round problems."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .kickstart import _Tokens

__all__ = [
    "find_the_array",
    "robot_commands",
    "strange_functions",
    "jumps",
    "toy_blocks",
    "run",
]


def find_the_array(s: int) -> int:
    """Smallest size of a beautiful array whose elements sum to ``s``."""
    if s < 1:
        raise ValueError("s must be positive")
    sizes = [1, 2, 2]
    while len(sizes) < s:
        sizes.append(1 + min(sizes[-3:]))
    return sizes[s - 1]


def robot_commands(x: int, y: int) -> int:
    """Fewest commands to reach ``(x, y)`` without repeating a command twice in a row."""
    if x < 0 or y < 0:
        raise ValueError("coordinates must not be negative")
    if x == y:
        return x + y
    return 2 * max(x, y) - 1


def strange_functions(n: str | int) -> int:
    """Number of distinct values of g(x) for x up to ``n``: the digit count of ``n``."""
    digits = str(n).strip()
    if not digits.isdigit():
        raise ValueError("n must be a positive decimal number")
    return len(digits)


def jumps(x: int) -> int:
    """Fewest jumps needed to reach point ``x`` from zero."""
    if x < 1:
        raise ValueError("x must be positive")
    count = 1
    while count < x and count * (count + 1) < 2 * x:
        count += 1
    if count * (count + 1) // 2 == x + 1:
        return count + 1
    return count


def toy_blocks(blocks: Sequence[int]) -> int:
    """Fewest extra blocks so any box can be spread evenly over the others."""
    n = len(blocks)
    if n < 2:
        raise ValueError("at least two boxes are needed")
    total = sum(blocks)
    per_box = max(-(-total // (n - 1)), max(blocks))
    return (n - 1) * per_box - total


def _solve_find_array(tokens: _Tokens) -> str:
    return f"{find_the_array(tokens.number())}\n"


def _solve_robot(tokens: _Tokens) -> str:
    x, y = tokens.number(), tokens.number()
    return f"{robot_commands(x, y)}\n"


def _solve_strange(tokens: _Tokens) -> str:
    return f"{strange_functions(tokens.word())}\n"


def _solve_jumps(tokens: _Tokens) -> str:
    return f"{jumps(tokens.number())}\n"


def _solve_toy_blocks(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{toy_blocks([tokens.number() for _ in range(n)])}\n"


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "find-the-array": _solve_find_array,
    "robot-program": _solve_robot,
    "strange-functions": _solve_strange,
    "jumps": _solve_jumps,
    "toy-blocks": _solve_toy_blocks,
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