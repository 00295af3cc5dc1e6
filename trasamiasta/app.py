"""Main window of the city route finder and its command entry point."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Iterable, Mapping, NamedTuple, Sequence

from trasamiasta.graph import RoadMap, Route, UnknownCityError, load_road_map
from trasamiasta.scene import (
    Point,
    city_label_position,
    city_positions,
    path_segments,
    visible_edges,
)

DEFAULT_MAP_FILE = "miasta.txt"
ICON_FILE = "ikona.png"
WINDOW_TITLE = "TrasaMiasta"

EDGE_COLOUR = "#b4b4b4"
EDGE_LABEL_COLOUR = "#808080"
CITY_OUTLINE_COLOUR = "#000080"
CITY_FILL_COLOUR = "#55aaff"
CITY_LABEL_COLOUR = "#000000"
PATH_COLOUR = "#ff3333"

EDGE_FONT = ("Segoe UI", 9)
CITY_FONT = ("Segoe UI", 12, "bold")
CITY_RADIUS = 5.0


class _Item(NamedTuple):
    kind: str
    coords: tuple[float, ...]
    colour: str
    text: str = ""
    fill: str = ""
    width: float = 1.0
    font: tuple[Any, ...] = ()
    cap: str = "butt"


class MainWindow:
    """State of the map window: selected cities, result texts and drawn items.

    When given a tkinter canvas, everything drawn is also rendered on it.
    """

    def __init__(
        self,
        road_map: RoadMap,
        positions: Mapping[str, Point] | None = None,
        canvas: Any = None,
    ) -> None:
        self.road_map = road_map
        self.positions = dict(positions) if positions is not None else city_positions(road_map.cities())
        cities = road_map.cities()
        self.start = cities[0] if cities else ""
        self.end = cities[0] if cities else ""
        self.path_text = ""
        self.length_text = ""
        self.items: list[_Item] = []
        self._canvas = canvas
        self.draw_graph()

    def find_path(self) -> Route:
        """Find the route between the selected cities and show it."""
        route = self.road_map.route(self.start, self.end)
        self.path_text = route.text()
        self.length_text = route.length_text()
        if route.path:
            self.draw_graph()
            self.draw_path(route.path)
        return route

    def draw_graph(self) -> None:
        """Redraw all roads with their distances and all placed cities."""
        self.items.clear()
        if self._canvas is not None:
            self._canvas.delete("all")

        for edge in visible_edges(self.road_map, self.positions):
            self._add(_Item("line", (*edge.start, *edge.end), EDGE_COLOUR, width=1.5))
            self._add(
                _Item(
                    "text",
                    edge.label_position(),
                    EDGE_LABEL_COLOUR,
                    text=f"{edge.distance} km",
                    font=EDGE_FONT,
                )
            )

        for city in self.road_map.cities():
            position = self.positions.get(city)
            if position is None:
                continue
            x, y = position
            self._add(
                _Item(
                    "ellipse",
                    (x - CITY_RADIUS, y - CITY_RADIUS, x + CITY_RADIUS, y + CITY_RADIUS),
                    CITY_OUTLINE_COLOUR,
                    fill=CITY_FILL_COLOUR,
                )
            )
            self._add(
                _Item("text", city_label_position(position), CITY_LABEL_COLOUR, text=city, font=CITY_FONT)
            )

    def draw_path(self, path: Iterable[str]) -> None:
        """Draw a thick red line along the given route."""
        for start, end in path_segments(path, self.positions):
            self._add(_Item("line", (*start, *end), PATH_COLOUR, width=3.0, cap="round"))

    def _add(self, item: _Item) -> None:
        self.items.append(item)
        if self._canvas is not None:
            self._render(item)

    def _render(self, item: _Item) -> None:
        canvas = self._canvas
        if item.kind == "line":
            canvas.create_line(*item.coords, fill=item.colour, width=item.width, capstyle=item.cap)
        elif item.kind == "text":
            x, y = item.coords
            canvas.create_text(x, y, text=item.text, anchor="nw", fill=item.colour, font=item.font)
        elif item.kind == "ellipse":
            canvas.create_oval(*item.coords, outline=item.colour, fill=item.fill)


def route_report(road_map: RoadMap, start: str, end: str) -> str:
    """Route between two cities as text: the cities, then the total length."""
    route = road_map.route(start, end)
    lines = [route.text()]
    if route.path:
        lines.append(route.length_text())
    return "\n".join(lines)


def _run_window(map_file: str) -> int:
    import tkinter as tk
    from tkinter import messagebox, ttk

    root = tk.Tk()
    root.title(WINDOW_TITLE)
    try:
        root.iconphoto(True, tk.PhotoImage(file=ICON_FILE))
    except tk.TclError:
        pass

    try:
        road_map = load_road_map(map_file)
    except OSError:
        messagebox.showerror("Błąd", f"Nie można otworzyć pliku: {map_file}", parent=root)
        road_map = RoadMap()

    canvas = tk.Canvas(root, width=820, height=460, background="white")
    canvas.pack(fill="both", expand=True)

    controls = ttk.Frame(root, padding=8)
    controls.pack(fill="x")

    cities = road_map.cities()
    start_box = ttk.Combobox(controls, values=cities, state="readonly")
    end_box = ttk.Combobox(controls, values=cities, state="readonly")
    if cities:
        start_box.current(0)
        end_box.current(0)

    window = MainWindow(road_map, canvas=canvas)
    path_var = tk.StringVar()
    length_var = tk.StringVar()

    def on_find() -> None:
        window.start = start_box.get()
        window.end = end_box.get()
        try:
            window.find_path()
        except UnknownCityError as error:
            messagebox.showwarning("Błąd!", str(error), parent=root)
            return
        path_var.set(window.path_text)
        length_var.set(window.length_text)

    button = ttk.Button(controls, text="Znajdź trasę", command=on_find)

    ttk.Label(controls, text="Start:").grid(row=0, column=0, sticky="w")
    start_box.grid(row=0, column=1, padx=4)
    ttk.Label(controls, text="Cel:").grid(row=0, column=2, sticky="w")
    end_box.grid(row=0, column=3, padx=4)
    button.grid(row=0, column=4, padx=4)
    ttk.Label(controls, text="Trasa:").grid(row=1, column=0, sticky="w")
    ttk.Label(controls, textvariable=path_var).grid(row=1, column=1, columnspan=4, sticky="w")
    ttk.Label(controls, text="Długość:").grid(row=2, column=0, sticky="w")
    ttk.Label(controls, textvariable=length_var).grid(row=2, column=1, columnspan=4, sticky="w")

    root.mainloop()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Open the map window, or print one route when --start and --end are given."""
    parser = argparse.ArgumentParser(prog="trasamiasta", description="Najkrótsza trasa między miastami.")
    parser.add_argument("file", nargs="?", default=DEFAULT_MAP_FILE, help="plik z drogami")
    parser.add_argument("--start", help="miasto początkowe")
    parser.add_argument("--end", help="miasto końcowe")
    args = parser.parse_args(argv)

    if args.start is None and args.end is None:
        return _run_window(args.file)
    if args.start is None or args.end is None:
        parser.error("--start i --end muszą być podane razem")

    try:
        road_map = load_road_map(args.file)
    except OSError:
        print(f"Nie można otworzyć pliku: {args.file}", file=sys.stderr)
        return 1
    try:
        print(route_report(road_map, args.start, args.end))
    except UnknownCityError as error:
        print(error, file=sys.stderr)
        return 1
    return 0