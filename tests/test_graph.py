import pytest

from trasamiasta.graph import (
    NO_ROUTE_TEXT,
    RoadMap,
    Route,
    UnknownCityError,
    load_road_map,
    parse_roads,
)


@pytest.fixture
def triangle():
    road_map = RoadMap()
    road_map.add_road("A", "B", 1)
    road_map.add_road("B", "C", 1)
    road_map.add_road("A", "C", 5)
    road_map.add_road("X", "Y", 3)
    return road_map


def test_add_road_is_bidirectional():
    road_map = RoadMap()
    road_map.add_road("A", "B", 5)
    assert road_map.neighbours("A") == [("B", 5)]
    assert road_map.neighbours("B") == [("A", 5)]


def test_cities_are_sorted(triangle):
    assert triangle.cities() == sorted(["A", "B", "C", "X", "Y"])


def test_neighbours_of_unknown_city_is_empty(triangle):
    assert triangle.neighbours("Nowhere") == []


def test_distance_between_unconnected_cities_is_none(triangle):
    assert triangle.distance("A", "X") is None
    assert triangle.distance("A", "C") == 5


def test_shortest_path_takes_cheaper_detour(triangle):
    assert triangle.shortest_path("A", "C") == ["A", "B", "C"]


def test_shortest_path_consecutive_cities_are_adjacent(triangle):
    path = triangle.shortest_path("C", "A")
    assert path[0] == "C" and path[-1] == "A"
    assert all(triangle.distance(a, b) is not None for a, b in zip(path, path[1:]))


def test_unreachable_city_gives_empty_path(triangle):
    assert triangle.shortest_path("A", "Y") == []


def test_path_to_itself_is_single_city(triangle):
    assert triangle.shortest_path("B", "B") == ["B"]


def test_ties_are_broken_by_city_name():
    road_map = RoadMap()
    road_map.add_road("A", "C", 1)
    road_map.add_road("A", "B", 1)
    road_map.add_road("C", "D", 1)
    road_map.add_road("B", "D", 1)
    assert road_map.shortest_path("A", "D") == ["A", "B", "D"]


def test_route_length_matches_path_length(triangle):
    route = triangle.route("A", "C")
    assert route.path == ("A", "B", "C")
    assert route.length == triangle.path_length(route.path)
    assert route.length == 2


def test_route_texts(triangle):
    route = triangle.route("A", "C")
    assert route.text() == "A → B → C"
    assert route.length_text() == f"{route.length} km"


def test_route_without_path_reports_no_route(triangle):
    route = triangle.route("A", "X")
    assert route.path == ()
    assert route.text() == NO_ROUTE_TEXT
    assert route.length_text() == ""


def test_route_with_unknown_city_raises(triangle):
    with pytest.raises(UnknownCityError) as info:
        triangle.route("A", "Atlantis")
    assert info.value.city == "Atlantis"


def test_path_length_ignores_missing_roads(triangle):
    assert triangle.path_length(["A", "X"]) == 0


def test_empty_route_object():
    assert Route(()).text() == NO_ROUTE_TEXT


def test_parse_skips_blank_and_malformed_lines():
    road_map = parse_roads(["", "   ", "A B 5", "A B", "A  B 7", "C D E F"])
    assert road_map.cities() == ["A", "B"]
    assert road_map.neighbours("A") == [("B", 5)]


def test_parse_non_numeric_distance_is_zero():
    road_map = parse_roads(["A B abc\n"])
    assert road_map.neighbours("A") == [("B", 0)]


def test_parse_trims_line_whitespace():
    road_map = parse_roads(["  A B 12  \n"])
    assert road_map.distance("B", "A") == 12


def test_load_road_map_reads_file(tmp_path):
    source = tmp_path / "miasta.txt"
    source.write_text("Gdansk Olsztyn 170\nOlsztyn Warszawa 215\n", encoding="utf-8")
    road_map = load_road_map(source)
    assert road_map.shortest_path("Gdansk", "Warszawa") == ["Gdansk", "Olsztyn", "Warszawa"]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_road_map(tmp_path / "missing.txt")