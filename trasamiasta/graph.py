"""Road network between cities and shortest-route search."""

from __future__ import annotations

import heapq
import math
import re
from dataclasses import dataclass
from itertools import pairwise
from os import PathLike
from typing import Iterable, Iterator

NO_ROUTE_TEXT = "Brak dostępnej ścieżki."
UNKNOWN_CITY_TEXT = "Miasto nie istnieje w grafie."
ARROW = " → "

_INTEGER = re.compile(r"[+-]?\d+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class UnknownCityError(LookupError):
    """Raised when a city asked for is not on the road map."""

    def __init__(self, city: str) -> None:
        super().__init__(UNKNOWN_CITY_TEXT)
        self.city = city


@dataclass(frozen=True)
class Route:
    """A found route: the cities in order and the total distance in km."""

    path: tuple[str, ...]
    length: int = 0

    def text(self) -> str:
        """Cities joined by arrows, or a notice that no route exists."""
        return ARROW.join(self.path) if self.path else NO_ROUTE_TEXT

    def length_text(self) -> str:
        """Total distance such as ``"265 km"``, empty when there is no route."""
        return f"{self.length} km" if self.path else ""


class RoadMap:
    """Undirected weighted graph of cities joined by roads."""

    def __init__(self) -> None:
        self._roads: dict[str, list[tuple[str, int]]] = {}

    def __contains__(self, city: object) -> bool:
        return city in self._roads

    def __len__(self) -> int:
        return len(self._roads)

    def __iter__(self) -> Iterator[str]:
        return iter(self.cities())

    def add_road(self, origin: str, destination: str, distance: int) -> None:
        """Add a road usable in both directions."""
        self._roads.setdefault(origin, []).append((destination, distance))
        self._roads.setdefault(destination, []).append((origin, distance))

    def cities(self) -> list[str]:
        """All cities in sorted order."""
        return sorted(self._roads)

    def neighbours(self, city: str) -> list[tuple[str, int]]:
        """Roads leaving ``city`` as (neighbour, distance) pairs, in insertion order."""
        return list(self._roads.get(city, ()))

    def distance(self, origin: str, destination: str) -> int | None:
        """Distance of the first road from ``origin`` to ``destination``, or None."""
        return next(
            (weight for city, weight in self._roads.get(origin, ()) if city == destination),
            None,
        )

    def shortest_path(self, start: str, end: str) -> list[str]:
        """Cities on the shortest route from ``start`` to ``end``; empty if unreachable."""
        dist: dict[str, float] = {city: math.inf for city in self._roads}
        dist[start] = 0
        previous: dict[str, str] = {}
        visited: set[str] = set()
        queue: list[tuple[float, str]] = [(0, start)]

        while queue:
            _, current = heapq.heappop(queue)
            if current in visited:
                continue
            visited.add(current)
            for neighbour, weight in self._roads.get(current, ()):
                candidate = dist[current] + weight
                if candidate < dist.get(neighbour, math.inf):
                    dist[neighbour] = candidate
                    previous[neighbour] = current
                    heapq.heappush(queue, (candidate, neighbour))

        reversed_path: list[str] = []
        seen: set[str] = set()
        node = end
        while node in previous:
            if node in seen:
                return []
            seen.add(node)
            reversed_path.append(node)
            node = previous[node]

        if node != start:
            return []
        reversed_path.append(start)
        reversed_path.reverse()
        return reversed_path

    def path_length(self, path: Iterable[str]) -> int:
        """Sum of road distances along ``path``; missing roads count as zero."""
        return sum(self.distance(a, b) or 0 for a, b in pairwise(path))

    def route(self, start: str, end: str) -> Route:
        """Shortest route between two cities on the map."""
        for city in (start, end):
            if city not in self._roads:
                raise UnknownCityError(city)
        path = self.shortest_path(start, end)
        return Route(tuple(path), self.path_length(path) if path else 0)


def _to_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        return 0
    value = int(text)
    return value if _INT_MIN <= value <= _INT_MAX else 0


def parse_roads(lines: Iterable[str]) -> RoadMap:
    """Build a road map from lines of the form ``FROM TO DISTANCE``.

    Blank lines and lines that do not split into exactly three parts on
    single spaces are skipped; a distance that is not an integer counts as 0.
    """
    road_map = RoadMap()
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        parts = line.split(" ")
        if len(parts) != 3:
            continue
        origin, destination, distance_text = parts
        road_map.add_road(origin, destination, _to_int(distance_text))
    return road_map


def load_road_map(path: str | PathLike[str]) -> RoadMap:
    """Read a road map from a text file; raises OSError if it cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        return parse_roads(handle)