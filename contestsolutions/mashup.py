"""Solutions to problems from a Codeforces practice mashup."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .kickstart import _Tokens

__all__ = [
    "sasha_wins",
    "first_player_wins",
    "stairs",
    "run",
]


def sasha_wins(n: int, k: int) -> bool:
    """Whether Sasha makes more moves than Lena with ``n`` sticks, ``k`` per move."""
    if k < 1:
        raise ValueError("k must be positive")
    if n < k:
        return True
    return (n // k) % 2 == 1


def first_player_wins(first: Iterable[int], second: Iterable[int]) -> bool:
    """Whether the player holding ``first`` wins the card game against ``second``."""
    first_cards = list(first)
    second_cards = list(second)
    if not first_cards or not second_cards:
        raise ValueError("each player needs at least one card")
    return max(first_cards) > max(second_cards)


def _integer_cube_root(n: int) -> int:
    if n == 0:
        return 0
    estimate = 1 << ((n.bit_length() + 2) // 3)
    while True:
        better = (2 * estimate + n // (estimate * estimate)) // 3
        if better >= estimate:
            return estimate
        estimate = better


def stairs(n: int) -> int:
    """Largest whole number whose cube does not exceed ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _integer_cube_root(n)


def _solve_sticks(tokens: _Tokens) -> str:
    n, k = tokens.number(), tokens.number()
    return "YES\n" if sasha_wins(n, k) else "NO\n"


def _solve_card_game(tokens: _Tokens) -> str:
    tokens.number()
    first_count, second_count = tokens.number(), tokens.number()
    first = [tokens.number() for _ in range(first_count)]
    second = [tokens.number() for _ in range(second_count)]
    return "YES\n" if first_player_wins(first, second) else "NO\n"


def _solve_stairs(tokens: _Tokens) -> str:
    return f"{stairs(tokens.number())}\n"


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "sasha-and-sticks": _solve_sticks,
    "card-game": _solve_card_game,
    "stairs": _solve_stairs,
}

_SINGLE_CASE = {"sasha-and-sticks"}


def run(problem: str, text: str) -> str:
    """Solve every test case in ``text`` and return the judge output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    tokens = _Tokens(text)
    cases = 1 if problem in _SINGLE_CASE else tokens.number()
    return "".join(solver(tokens) for _ in range(cases))