"""Solutions to Codeforces Div. 2 "C" problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
from itertools import pairwise

from .kickstart import _Tokens

__all__ = [
    "NobleNetwork",
    "challenging_cliffs",
    "run",
]


def challenging_cliffs(heights: Iterable[int]) -> list[int]:
    """Order mountains so the ends are as close as possible and climbs are maximal.

    The two heights with the smallest difference (the first such pair in
    sorted order) start and end the route; in between come the taller
    mountains followed by the rest.
    """
    ordered = sorted(heights)
    if len(ordered) < 2:
        raise ValueError("at least two heights are needed")
    gaps = [higher - lower for lower, higher in pairwise(ordered)]
    first = gaps.index(min(gaps))
    low, high = ordered[first], ordered[first + 1]
    rest = ordered[:first] + ordered[first + 2 :]
    return [
        low,
        *(height for height in rest if height > low),
        *(height for height in rest if height <= low),
        high,
    ]


class NobleNetwork:
    """Friendships among ``n`` nobles ranked by power 1..n.

    A noble survives when none of their friends is more powerful.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError("there must be at least one noble")
        self._size = n
        self._stronger_friends: Counter[int] = Counter()
        self._survivors = n

    def _weaker(self, u: int, v: int) -> int:
        for noble in (u, v):
            if not 1 <= noble <= self._size:
                raise ValueError(f"no such noble: {noble}")
        if u == v:
            raise ValueError("a noble cannot befriend themselves")
        return min(u, v)

    def add_friendship(self, u: int, v: int) -> None:
        """Record a friendship between nobles ``u`` and ``v``."""
        weaker = self._weaker(u, v)
        self._stronger_friends[weaker] += 1
        if self._stronger_friends[weaker] == 1:
            self._survivors -= 1

    def remove_friendship(self, u: int, v: int) -> None:
        """Forget a friendship between nobles ``u`` and ``v``."""
        weaker = self._weaker(u, v)
        if self._stronger_friends[weaker] == 0:
            raise ValueError(f"no friendship between {u} and {v}")
        self._stronger_friends[weaker] -= 1
        if self._stronger_friends[weaker] == 0:
            self._survivors += 1

    def count_survivors(self) -> int:
        """Number of nobles left once the killing process ends."""
        return self._survivors


def _solve_cliffs(tokens: _Tokens) -> str:
    n = tokens.number()
    heights = [tokens.number() for _ in range(n)]
    return "".join(f"{height} " for height in challenging_cliffs(heights)) + "\n"


def _solve_web_of_lies(tokens: _Tokens) -> str:
    network = NobleNetwork(tokens.number())
    for _ in range(tokens.number()):
        network.add_friendship(tokens.number(), tokens.number())
    answers = []
    for _ in range(tokens.number()):
        operation = tokens.number()
        if operation == 1:
            network.add_friendship(tokens.number(), tokens.number())
        elif operation == 2:
            network.remove_friendship(tokens.number(), tokens.number())
        else:
            answers.append(f"{network.count_survivors()}\n")
    return "".join(answers)


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "challenging-cliffs": _solve_cliffs,
    "web-of-lies": _solve_web_of_lies,
}

_SINGLE_CASE = {"web-of-lies"}


def run(problem: str, text: str) -> str:
    """Solve every test case in ``text`` and return the judge output."""
    try:
        solver = _SOLVERS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem}") from None
    tokens = _Tokens(text)
    cases = 1 if problem in _SINGLE_CASE else tokens.number()
    return "".join(solver(tokens) for _ in range(cases))