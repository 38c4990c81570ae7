"""Solutions to Codeforces Div. 3 "A" and "B" problems."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence

from .kickstart import _Tokens

__all__ = [
    "cards_for_friends",
    "favorite_sequence",
    "has_odd_divisor",
    "special_permutation",
    "stone_game_moves",
    "friends_and_candies",
    "fair_division",
    "ordinary_numbers",
    "unique_bid_winner",
    "run",
]

_VERDICT = {True: "YES\n", False: "NO\n"}


def _power_of_two_part(value: int) -> int:
    return value & -value


def cards_for_friends(w: int, h: int, n: int) -> bool:
    """Whether a ``w`` x ``h`` sheet can be halved into at least ``n`` pieces."""
    if w < 1 or h < 1:
        raise ValueError("sheet sides must be positive")
    if n == 1:
        return True
    return _power_of_two_part(w) * _power_of_two_part(h) >= n


def favorite_sequence(b: Sequence[int]) -> list[int]:
    """Recover the sequence written alternately from the left and the right."""
    n = len(b)
    result: list[int] = []
    for i in range(n // 2):
        result.extend((b[i], b[n - i - 1]))
    if n % 2:
        result.append(b[n // 2])
    return result


def has_odd_divisor(n: int) -> bool:
    """Whether ``n`` has an odd divisor greater than one."""
    if n < 1:
        raise ValueError("n must be positive")
    return n & (n - 1) != 0


def special_permutation(n: int) -> list[int]:
    """A permutation of 1..n in which no value sits at its own position."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if n % 2 == 0:
        return list(range(n, 0, -1))
    slots = list(range(n + 1))
    middle = (n + 1) // 2
    slots[middle], slots[middle - 1] = slots[middle - 1], slots[middle]
    return slots[n:0:-1]


def stone_game_moves(powers: Sequence[int]) -> int:
    """Fewest removals from either end that destroy both the weakest and strongest stone."""
    if not powers:
        raise ValueError("powers must not be empty")
    n = len(powers)
    strongest = powers.index(max(powers))
    weakest = powers.index(min(powers))
    left, right = min(strongest, weakest), max(strongest, weakest)
    both_sides = (n - right) + (left + 1)
    from_left = right + 1
    from_right = n - left
    return min(both_sides, from_left, from_right)


def friends_and_candies(candies: Sequence[int]) -> int | None:
    """Fewest friends whose candies must be redistributed, or ``None`` if impossible."""
    if not candies:
        raise ValueError("candies must not be empty")
    total = sum(candies)
    if total % len(candies):
        return None
    average = total // len(candies)
    return sum(1 for amount in candies if amount > average)


def fair_division(weights: Sequence[int]) -> bool:
    """Whether the candies can be split into two halves of equal weight."""
    total = sum(weights)
    n = len(weights)
    if n == 1 or total % 2:
        return False
    if n % 2 and not any(weight == 1 for weight in weights):
        return False
    return True


def ordinary_numbers(n: int) -> int:
    """Count of numbers from 1 to ``n`` made of a single repeated digit."""
    return sum(
        1
        for digit in "123456789"
        for length in range(1, 11)
        if int(digit * length) <= n
    )


def unique_bid_winner(bids: Iterable[int]) -> int | None:
    """1-based position of the smallest unique bid, or ``None`` when there is none."""
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, bid in enumerate(bids, start=1):
        positions[bid].append(index)
    for bid in sorted(positions):
        if len(positions[bid]) == 1:
            return positions[bid][0]
    return None


def _numbers(tokens: _Tokens, count: int) -> list[int]:
    return [tokens.number() for _ in range(count)]


def _or_minus_one(value: int | None) -> str:
    return f"{-1 if value is None else value}\n"


def _solve_cards(tokens: _Tokens) -> str:
    w, h, n = _numbers(tokens, 3)
    return _VERDICT[cards_for_friends(w, h, n)]


def _solve_favorite(tokens: _Tokens) -> str:
    n = tokens.number()
    result = favorite_sequence(_numbers(tokens, n))
    paired = "".join(f"{value} " for value in result[: 2 * (n // 2)])
    middle = str(result[-1]) if n % 2 else ""
    return paired + middle + "\n"


def _solve_odd_divisor(tokens: _Tokens) -> str:
    return _VERDICT[has_odd_divisor(tokens.number())]


def _solve_special(tokens: _Tokens) -> str:
    permutation = special_permutation(tokens.number())
    return "".join(f"{value} " for value in permutation) + "\n"


def _solve_stone_game(tokens: _Tokens) -> str:
    n = tokens.number()
    return f"{stone_game_moves(_numbers(tokens, n))}\n"


def _solve_candies(tokens: _Tokens) -> str:
    n = tokens.number()
    return _or_minus_one(friends_and_candies(_numbers(tokens, n)))


def _solve_fair(tokens: _Tokens) -> str:
    n = tokens.number()
    return _VERDICT[fair_division(_numbers(tokens, n))]


def _solve_ordinary(tokens: _Tokens) -> str:
    return f"{ordinary_numbers(tokens.number())}\n"


def _solve_unique_bid(tokens: _Tokens) -> str:
    n = tokens.number()
    return _or_minus_one(unique_bid_winner(_numbers(tokens, n)))


_SOLVERS: dict[str, Callable[[_Tokens], str]] = {
    "cards-for-friends": _solve_cards,
    "favorite-sequence": _solve_favorite,
    "odd-divisor": _solve_odd_divisor,
    "special-permutation": _solve_special,
    "stone-game": _solve_stone_game,
    "friends-and-candies": _solve_candies,
    "fair-division": _solve_fair,
    "ordinary-numbers": _solve_ordinary,
    "unique-bid-auction": _solve_unique_bid,
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