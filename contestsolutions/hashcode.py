"""Solutions to Hash Code qualification and practice problems."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Sequence
from dataclasses import dataclass, field

__all__ = [
    "Street",
    "TrafficProblem",
    "parse_traffic_problem",
    "schedule_traffic_signals",
    "format_schedule",
    "deliver_pizzas",
    "format_deliveries",
    "run",
]


@dataclass(frozen=True)
class Street:
    """A one-way street between two intersections."""

    name: str
    start: int
    end: int
    duration: int


@dataclass
class TrafficProblem:
    """A traffic signalling problem: streets and the routes of cars."""

    duration: int
    intersections: int
    bonus: int
    streets: dict[str, Street] = field(default_factory=dict)
    routes: list[list[str]] = field(default_factory=list)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._iterator = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._iterator)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self) -> int:
        return int(self.word())


def parse_traffic_problem(text: str) -> TrafficProblem:
    """Read a traffic signalling problem from its text form."""
    tokens = _Tokens(text)
    duration = tokens.number()
    intersections = tokens.number()
    street_count = tokens.number()
    car_count = tokens.number()
    bonus = tokens.number()
    problem = TrafficProblem(duration=duration, intersections=intersections, bonus=bonus)
    for _ in range(street_count):
        start, end = tokens.number(), tokens.number()
        name = tokens.word()
        problem.streets[name] = Street(name, start, end, tokens.number())
    for _ in range(car_count):
        length = tokens.number()
        problem.routes.append([tokens.word() for _ in range(length)])
    return problem


def schedule_traffic_signals(problem: TrafficProblem) -> dict[int, dict[str, int]]:
    """Green-light seconds per incoming street, grouped by intersection.

    Each street gets one second for every car that drives along it before its
    final street. Intersections and streets come out in sorted order.
    """
    seconds: Counter[str] = Counter()
    streets_at: defaultdict[int, set[str]] = defaultdict(set)
    for route in problem.routes:
        for name in route[:-1]:
            try:
                street = problem.streets[name]
            except KeyError:
                raise ValueError(f"route uses unknown street: {name}") from None
            streets_at[street.end].add(name)
            seconds[name] += 1
    return {
        intersection: {name: seconds[name] for name in sorted(streets_at[intersection])}
        for intersection in sorted(streets_at)
    }


def format_schedule(schedule: dict[int, dict[str, int]]) -> str:
    """Render a signal schedule in submission format."""
    lines = [str(len(schedule))]
    for intersection, streets in schedule.items():
        lines.append(str(intersection))
        lines.append(str(len(streets)))
        lines.extend(f"{name} {time}" for name, time in streets.items())
    return "\n".join(lines) + "\n"


def deliver_pizzas(
    pizza_count: int, teams_of_two: int, teams_of_three: int, teams_of_four: int
) -> list[tuple[int, ...]]:
    """Hand out pizzas in order, preferring the smallest team that can be served."""
    deliveries: list[tuple[int, ...]] = []
    remaining = pizza_count
    next_pizza = 0
    teams = {2: teams_of_two, 3: teams_of_three, 4: teams_of_four}
    while remaining > 0:
        if all(count <= 0 for count in teams.values()):
            break
        size = next(
            (s for s, count in teams.items() if count > 0 and remaining >= s), None
        )
        if size is None:
            break
        deliveries.append(tuple(range(next_pizza, next_pizza + size)))
        next_pizza += size
        remaining -= size
        teams[size] -= 1
    return deliveries


def format_deliveries(deliveries: Sequence[Sequence[int]]) -> str:
    """Render pizza deliveries in submission format."""
    lines = [f"{len(deliveries)}\n"]
    for delivery in deliveries:
        lines.append(f"{len(delivery)} " + "".join(f"{p} " for p in delivery) + "\n")
    return "".join(lines)


def _parse_pizza_input(text: str) -> tuple[int, int, int, int]:
    tokens = _Tokens(text)
    pizzas = tokens.number()
    teams = (tokens.number(), tokens.number(), tokens.number())
    for _ in range(pizzas):
        for _ in range(tokens.number()):
            tokens.word()
    return (pizzas, *teams)


def run(problem: str, text: str) -> str:
    """Solve ``problem`` ("traffic-signals" or "pizza-delivery") for ``text``."""
    if problem == "traffic-signals":
        return format_schedule(schedule_traffic_signals(parse_traffic_problem(text)))
    if problem == "pizza-delivery":
        return format_deliveries(deliver_pizzas(*_parse_pizza_input(text)))
    raise ValueError(f"unknown problem: {problem}")