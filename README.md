# trasamiasta

Finds the shortest road route between two cities and shows it on a
simple map. Roads are read from a plain text file and routes are found
with Dijkstra's algorithm.

## Installing

```
pip install .
```

The map window uses Tkinter from the standard library; no other
packages are needed. To run the tests:

```
pip install ".[test]"
pytest
```

## The road file

Each non-empty line describes one road, usable in both directions:

```
Szczecin Poznan 230
Poznan Warszawa 310
Szczecin Gdansk 350
Gdansk Warszawa 340
```

A line is stripped of surrounding whitespace and must split on single
spaces into exactly three fields: the first city, the second city and
the distance in kilometres. Blank lines and lines with a different
number of fields are skipped. A distance that is not a whole number
(or does not fit in a 32-bit signed integer) counts as 0. The file is
read as UTF-8.

## The command

```
trasamiasta [FILE] [--start CITY --end CITY]
```

`FILE` defaults to `miasta.txt` in the current directory.

With `--start` and `--end`, the route is printed instead of opening a
window:

```
trasamiasta miasta.txt --start Szczecin --end Warszawa
```

```
Szczecin → Poznan → Warszawa
540 km
```

When the two cities are not connected, only `Brak dostępnej ścieżki.`
is printed. If the file cannot be opened, or either city is not in it,
a message goes to standard error and the exit status is 1. Giving only
one of `--start` and `--end` is a usage error.

## The window

```
trasamiasta
```

Without `--start` and `--end` the command opens the map window and
loads the roads from the file. If the file cannot be opened, an error
dialog is shown and the map stays empty. If `ikona.png` is in the
current directory it is used as the window icon.

Choose a start and an end city and press "Znajdź trasę" to see the
route, its length in kilometres, and the route drawn in red on the map.
Twelve Polish cities (Szczecin, Gdansk, Olsztyn, Bialystok, Poznan,
Warszawa, Lodz, Lublin, Wroclaw, Katowice, Krakow, Rzeszow) have fixed
places on the map; roads to other cities are still used for routing but
are not drawn.

## Using it from Python

```python
from trasamiasta.graph import parse_roads

road_map = parse_roads([
    "Szczecin Poznan 230",
    "Poznan Warszawa 310",
    "Szczecin Gdansk 350",
    "Gdansk Warszawa 340",
])

path = road_map.shortest_path("Szczecin", "Warszawa")
print(path)                        # ['Szczecin', 'Poznan', 'Warszawa']
print(road_map.path_length(path))  # 540

route = road_map.route("Szczecin", "Warszawa")
print(route.text())         # Szczecin → Poznan → Warszawa
print(route.length_text())  # 540 km
```

`trasamiasta.graph` provides:

- `RoadMap` with `add_road`, `cities` (sorted), `neighbours`,
  `distance`, `shortest_path`, `path_length` and `route`. It also
  supports `in`, `len()` and iteration over its cities.
- `Route`, holding `path` and `length`, with `text()` and
  `length_text()`.
- `parse_roads(lines)` and `load_road_map(path)`, which read the format
  above; `load_road_map` raises `OSError` if the file cannot be opened.
- `UnknownCityError`, raised by `RoadMap.route` when either city is not
  on the map. When two cities are not connected, `shortest_path`
  returns an empty list and `route` returns a `Route` with an empty
  path.

`trasamiasta.scene` computes the map geometry, so the drawing can be
reproduced with any toolkit: `city_positions`, `visible_edges` (each
road between two placed cities once, as `Edge` objects with
`label_position()`), `path_segments` and `city_label_position`.

`trasamiasta.app` provides `route_report(road_map, start, end)`, which
returns the text printed by the command, and `MainWindow`, which keeps
the selected cities (`start`, `end`), the result texts (`path_text`,
`length_text`) and the list of drawn items. It can be used without a
display; given a Tkinter canvas it also draws on it.