"""Map geometry: where cities sit and which lines are drawn between them."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Mapping

from trasamiasta.graph import RoadMap

Point = tuple[float, float]

CITY_COORDINATES: dict[str, Point] = {
    "Szczecin": (100.0, 100.0),
    "Gdansk": (450.0, 50.0),
    "Olsztyn": (580.0, 100.0),
    "Bialystok": (700.0, 130.0),
    "Poznan": (250.0, 200.0),
    "Warszawa": (530.0, 220.0),
    "Lodz": (370.0, 230.0),
    "Lublin": (630.0, 300.0),
    "Wroclaw": (260.0, 330.0),
    "Katowice": (370.0, 370.0),
    "Krakow": (470.0, 380.0),
    "Rzeszow": (580.0, 400.0),
}

ORIGIN: Point = (0.0, 0.0)
EDGE_LABEL_OFFSET: Point = (4.0, -12.0)
CITY_LABEL_OFFSET: Point = (10.0, -18.0)


def city_positions(cities: Iterable[str]) -> dict[str, Point]:
    """Map coordinates of those cities that have a fixed place on the map."""
    return {city: CITY_COORDINATES[city] for city in cities if city in CITY_COORDINATES}


@dataclass(frozen=True)
class Edge:
    """A road drawn between two placed cities."""

    origin: str
    destination: str
    distance: int
    start: Point
    end: Point

    def label_position(self) -> Point:
        """Where the distance label goes: just off the middle of the line."""
        return (
            (self.start[0] + self.end[0]) / 2 + EDGE_LABEL_OFFSET[0],
            (self.start[1] + self.end[1]) / 2 + EDGE_LABEL_OFFSET[1],
        )


def visible_edges(road_map: RoadMap, positions: Mapping[str, Point]) -> list[Edge]:
    """Roads whose both ends are placed, each pair of cities drawn once."""
    drawn: set[tuple[str, str]] = set()
    edges: list[Edge] = []
    for origin in road_map.cities():
        if origin not in positions:
            continue
        for destination, distance in road_map.neighbours(origin):
            if destination not in positions:
                continue
            key = (min(origin, destination), max(origin, destination))
            if key in drawn:
                continue
            drawn.add(key)
            edges.append(
                Edge(origin, destination, distance, positions[origin], positions[destination])
            )
    return edges


def path_segments(path: Iterable[str], positions: Mapping[str, Point]) -> list[tuple[Point, Point]]:
    """Line segments joining consecutive cities of a path; unplaced cities sit at the origin."""
    return [
        (positions.get(a, ORIGIN), positions.get(b, ORIGIN)) for a, b in pairwise(path)
    ]


def city_label_position(position: Point) -> Point:
    """Where a city's name is drawn relative to its marker."""
    return (position[0] + CITY_LABEL_OFFSET[0], position[1] + CITY_LABEL_OFFSET[1])