"""
HEX Grid Generator v1

A single-file Python library and command line tool that tessellates a geographic
bounding box into flat-top hexagons (or the six triangles composing each
hexagon) aligned on an odd-q offset grid, and writes the cells as a GeoJSON
FeatureCollection.

Usage:
    python hex_grid.py --bbox -96 31 -84 40 --cell_side 50 --units miles
    python hex_grid.py --bbox -96 31 -84 40 --cell_side 50 --triangles --debug
    python hex_grid.py --import_settings settings.json
    python hex_grid.py --export_settings settings.json

Library:
    >>> from hex_grid import hex_grid
    >>> grid = hex_grid([-96, 31, -84, 40], 50, {"units": "miles"})
"""

import argparse
import json
import math
import numbers
import os
import re
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple



Position = List[float]
Feature = Dict[str, Any]


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class HexGridError(ValueError):
    """Base class for argument validation failures."""


class MissingArgumentError(HexGridError):
    """A required argument (bbox or cell side) was not supplied."""


class InvalidTypeError(HexGridError, TypeError):
    """An argument has the wrong type or is not a finite number."""


class InvalidShapeError(HexGridError):
    """The bounding box does not contain exactly four values."""


class InvalidUnitError(HexGridError):
    """The requested distance unit is not supported."""


# ---------------------------------------------------------------------------
# FeatureFactory
# ---------------------------------------------------------------------------
class FeatureFactory:
    """Builds GeoJSON-shaped point, polygon and feature collection objects."""

    def point(self, coordinates: Sequence[float], properties: Optional[Dict] = None) -> Feature:
        """Create a Point feature.

        Args:
            coordinates: An (x, y) position.
            properties: Optional properties mapping.

        Returns:
            A GeoJSON Feature dictionary with Point geometry.
        """
        return self._feature({"type": "Point", "coordinates": list(coordinates)}, properties)

    def polygon(self, rings: List[List[Position]], properties: Optional[Dict] = None) -> Feature:
        """Create a Polygon feature.

        The properties object is attached as-is, so callers that pass the same
        mapping to several polygons share it between them.

        Args:
            rings: List of linear rings, each a list of positions.
            properties: Optional properties mapping.

        Returns:
            A GeoJSON Feature dictionary with Polygon geometry.

        Raises:
            ValueError: If a ring has fewer than 4 positions or is not closed.
        """
        for ring in rings:
            if len(ring) < 4:
                raise ValueError("Each LinearRing of a Polygon must have 4 or more Positions.")
            if list(ring[-1]) != list(ring[0]):
                raise ValueError("First and last Position are not equivalent.")
        return self._feature({"type": "Polygon", "coordinates": rings}, properties)

    def feature_collection(self, features: Optional[List[Feature]] = None) -> Dict[str, Any]:
        """Wrap features in a FeatureCollection.

        Args:
            features: Features to include (a new empty list if omitted).

        Returns:
            A GeoJSON FeatureCollection dictionary.
        """
        return {"type": "FeatureCollection", "features": features if features is not None else []}

    def _feature(self, geometry: Dict[str, Any], properties: Optional[Dict]) -> Feature:
        return {
            "type": "Feature",
            "properties": properties if properties is not None else {},
            "geometry": geometry,
        }


# ---------------------------------------------------------------------------
# DistanceMeasurer
# ---------------------------------------------------------------------------
class DistanceMeasurer:
    """Great-circle distance between two positions on a spherical earth.

    Uses the haversine formula with the mean earth radius and converts the
    resulting central angle into the requested unit.
    """

    EARTH_RADIUS: float = 6371008.8

    # Length of one radian of arc, per unit.
    UNIT_FACTORS: Dict[str, float] = {
        "centimeters": EARTH_RADIUS * 100,
        "centimetres": EARTH_RADIUS * 100,
        "degrees": EARTH_RADIUS / 111325,
        "feet": EARTH_RADIUS * 3.28084,
        "inches": EARTH_RADIUS * 39.370,
        "kilometers": EARTH_RADIUS / 1000,
        "kilometres": EARTH_RADIUS / 1000,
        "meters": EARTH_RADIUS,
        "metres": EARTH_RADIUS,
        "miles": EARTH_RADIUS / 1609.344,
        "millimeters": EARTH_RADIUS * 1000,
        "millimetres": EARTH_RADIUS * 1000,
        "nauticalmiles": EARTH_RADIUS / 1852,
        "radians": 1.0,
        "yards": EARTH_RADIUS * 1.0936,
    }

    DEFAULT_UNITS: str = "kilometers"

    def distance(self, origin: Any, destination: Any, units: Optional[str] = None) -> float:
        """Measure the distance between two points.

        Args:
            origin: Point feature, Point geometry, or (lon, lat) position.
            destination: Point feature, Point geometry, or (lon, lat) position.
            units: Unit name (default: kilometers).

        Returns:
            The distance in the requested unit.

        Raises:
            InvalidUnitError: If the unit is not supported.
        """
        lon1, lat1 = self._coords(origin)
        lon2, lat2 = self._coords(destination)
        d_lat = math.radians(lat2 - lat1)
        d_lon = math.radians(lon2 - lon1)
        phi1 = math.radians(lat1)
        phi2 = math.radians(lat2)

        a = (math.sin(d_lat / 2) ** 2
             + math.sin(d_lon / 2) ** 2 * math.cos(phi1) * math.cos(phi2))
        angle = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return self.radians_to_length(angle, units)

    def radians_to_length(self, angle: float, units: Optional[str] = None) -> float:
        """Convert a central angle in radians to a length in the given unit."""
        return angle * self.factor(units)

    def factor(self, units: Optional[str] = None) -> float:
        """Return the length of one radian of arc in the given unit."""
        name = units or self.DEFAULT_UNITS
        try:
            return self.UNIT_FACTORS[name]
        except (KeyError, TypeError):
            raise InvalidUnitError(f"{name} units is invalid")

    def _coords(self, obj: Any) -> Tuple[float, float]:
        if isinstance(obj, Mapping):
            if obj.get("type") == "Feature":
                obj = obj["geometry"]
            obj = obj["coordinates"]
        return float(obj[0]), float(obj[1])


# ---------------------------------------------------------------------------
# HexagonGeometry
# ---------------------------------------------------------------------------
class HexagonGeometry:
    """Vertex computation for flat-top hexagons with independent x/y radii.

    The cosines and sines of the six vertex angles (0, 60, ..., 300 degrees)
    are computed once per instance and reused for every cell.
    """

    def __init__(self) -> None:
        angles = [2 * math.pi / 6 * i for i in range(6)]
        self._cosines: Tuple[float, ...] = tuple(math.cos(a) for a in angles)
        self._sines: Tuple[float, ...] = tuple(math.sin(a) for a in angles)

    def vertices(self, cx: float, cy: float, rx: float, ry: float) -> List[Position]:
        """Compute the 6 vertices of a flat-top hexagon centred at (cx, cy).

        Vertices start at the rightmost point (cx + rx, cy) and proceed
        counter-clockwise at 60-degree intervals.

        Args:
            cx: X coordinate of the hexagon centre.
            cy: Y coordinate of the hexagon centre.
            rx: Half of the hexagon width.
            ry: Half of the cell height.

        Returns:
            A list of 6 [x, y] positions.
        """
        return [
            [cx + rx * self._cosines[i], cy + ry * self._sines[i]]
            for i in range(6)
        ]

    def hexagon_ring(self, cx: float, cy: float, rx: float, ry: float) -> List[Position]:
        """Return the closed 7-position ring of a hexagon."""
        ring = self.vertices(cx, cy, rx, ry)
        ring.append(list(ring[0]))
        return ring

    def triangle_rings(self, cx: float, cy: float, rx: float, ry: float) -> List[List[Position]]:
        """Return the 6 closed triangle rings composing a hexagon.

        Each ring is [centre, vertex i, vertex i+1, centre], so every
        triangle shares the centroid and one hexagon edge.

        Args:
            cx: X coordinate of the hexagon centre.
            cy: Y coordinate of the hexagon centre.
            rx: Half of the hexagon width.
            ry: Half of the cell height.

        Returns:
            A list of 6 rings, each holding 4 positions.
        """
        verts = self.vertices(cx, cy, rx, ry)
        rings = []
        for i in range(6):
            rings.append([[cx, cy], list(verts[i]), list(verts[(i + 1) % 6]), [cx, cy]])
        return rings


# ---------------------------------------------------------------------------
# GridLayoutPlanner
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class GridGeometry:
    """Box-unit dimensions and fitting terms of one hexagon grid.

    Attributes:
        cell_width: Width of a cell's bounding rectangle in box units.
        cell_height: Height of a cell's bounding rectangle in box units.
        radius: Horizontal circumradius (cell_width / 2).
        hex_width: Vertex-to-vertex hexagon width.
        hex_height: Flat-to-flat hexagon height.
        x_interval: Horizontal distance between adjacent columns.
        y_interval: Vertical distance between adjacent rows.
        column_count: Index of the last column (floor fitted, may be < 0).
        row_count: Index of the last row (floor fitted, may be < 0).
        column_adjust: Horizontal centring term subtracted from each centre.
        row_adjust: Vertical centring term added to each centre.
        has_row_offset: Whether row 0 is suppressed for every column.
    """

    cell_width: float
    cell_height: float
    radius: float
    hex_width: float
    hex_height: float
    x_interval: float
    y_interval: float
    column_count: int
    row_count: int
    column_adjust: float
    row_adjust: float
    has_row_offset: bool


DistanceFunction = Callable[[Feature, Feature, Optional[str]], float]


class GridLayoutPlanner:
    """Fits a grid of flat-top hexagons inside a bounding box.

    The physical cell side is converted to box units by measuring the box's
    width along its centre row and its height along its centre column.
    """

    def __init__(
        self,
        distance: Optional[DistanceFunction] = None,
        factory: Optional[FeatureFactory] = None,
    ) -> None:
        """Initialise the planner.

        Args:
            distance: Callable measuring the distance between two Point
                features in a unit (default: haversine).
            factory: Feature factory used to build the sample points.
        """
        self._distance = distance or DistanceMeasurer().distance
        self._factory = factory or FeatureFactory()

    def plan(self, bbox: Sequence[float], cell_side: float, units: Optional[str] = None) -> GridGeometry:
        """Compute the grid geometry for a box and cell side.

        Args:
            bbox: Extent as (west, south, east, north).
            cell_side: Cell side length (hexagon circumradius) in units.
            units: Distance unit passed to the distance function.

        Returns:
            The immutable GridGeometry.
        """
        west, south, east, north = bbox
        center_y = (south + north) / 2
        center_x = (west + east) / 2

        point = self._factory.point
        x_fraction = cell_side * 2 / self._distance(point([west, center_y]), point([east, center_y]), units)
        cell_width = x_fraction * (east - west)
        y_fraction = cell_side * 2 / self._distance(point([center_x, south]), point([center_x, north]), units)
        cell_height = y_fraction * (north - south)
        radius = cell_width / 2

        hex_width = radius * 2
        hex_height = math.sqrt(3) / 2 * cell_height

        box_width = east - west
        box_height = north - south

        x_interval = 3 / 4 * hex_width
        y_interval = hex_height

        # last column's rightmost vertex must stay inside the box
        column_count = math.floor((box_width - hex_width) / (hex_width - radius / 2))
        column_adjust = (((column_count * x_interval - radius / 2) - box_width) / 2
                         - radius / 2 + x_interval / 2)

        row_count = math.floor((box_height - hex_height) / hex_height)
        row_adjust = (box_height - row_count * hex_height) / 2

        has_row_offset = row_count * hex_height - box_height > hex_height / 2
        if has_row_offset:
            row_adjust -= hex_height / 4

        return GridGeometry(
            cell_width=cell_width,
            cell_height=cell_height,
            radius=radius,
            hex_width=hex_width,
            hex_height=hex_height,
            x_interval=x_interval,
            y_interval=y_interval,
            column_count=column_count,
            row_count=row_count,
            column_adjust=column_adjust,
            row_adjust=row_adjust,
            has_row_offset=has_row_offset,
        )


# ---------------------------------------------------------------------------
# HexGridGenerator
# ---------------------------------------------------------------------------
class HexGridGenerator:
    """Emits the hexagon (or triangle) cells of an odd-q grid.

    Columns are the outer loop and rows the inner loop; odd columns are
    shifted down by half a hexagon height so adjacent columns interlock.
    """

    def __init__(
        self,
        distance: Optional[DistanceFunction] = None,
        factory: Optional[FeatureFactory] = None,
    ) -> None:
        self._factory = factory or FeatureFactory()
        self._planner = GridLayoutPlanner(distance=distance, factory=self._factory)

    @property
    def planner(self) -> GridLayoutPlanner:
        """Return the layout planner used by this generator."""
        return self._planner

    def centers(self, bbox: Sequence[float], geometry: GridGeometry) -> List[Tuple[float, float]]:
        """List the centres of every emitted cell in emission order.

        Args:
            bbox: Extent as (west, south, east, north).
            geometry: Grid geometry computed for the same box.

        Returns:
            A list of (x, y) centre tuples.
        """
        west, south = bbox[0], bbox[1]
        result = []
        for x in range(geometry.column_count + 1):
            for y in range(geometry.row_count + 1):
                is_odd = x % 2 == 1
                if y == 0 and (is_odd or geometry.has_row_offset):
                    continue

                center_x = x * geometry.x_interval + west - geometry.column_adjust
                center_y = y * geometry.y_interval + south + geometry.row_adjust
                if is_odd:
                    center_y -= geometry.hex_height / 2
                result.append((center_x, center_y))
        return result

    def generate(
        self,
        bbox: Sequence[float],
        cell_side: float,
        units: Optional[str] = None,
        properties: Optional[Dict] = None,
        triangles: bool = False,
    ) -> Dict[str, Any]:
        """Generate the grid as a FeatureCollection.

        Args:
            bbox: Extent as (west, south, east, north).
            cell_side: Cell side length in units.
            units: Distance unit (default: kilometers).
            properties: Mapping shared by every emitted feature.
            triangles: Emit 6 triangles per hexagon instead of 1 hexagon.

        Returns:
            A FeatureCollection of Polygon features.
        """
        if properties is None:
            properties = {}
        geometry = self._planner.plan(bbox, cell_side, units)
        hexagon = HexagonGeometry()
        rx = geometry.cell_width / 2
        ry = geometry.cell_height / 2

        features: List[Feature] = []
        for cx, cy in self.centers(bbox, geometry):
            if triangles:
                for ring in hexagon.triangle_rings(cx, cy, rx, ry):
                    features.append(self._factory.polygon([ring], properties))
            else:
                features.append(self._factory.polygon([hexagon.hexagon_ring(cx, cy, rx, ry)], properties))
        return self._factory.feature_collection(features)


# ---------------------------------------------------------------------------
# ArgumentValidator
# ---------------------------------------------------------------------------
class ArgumentValidator:
    """Validates the arguments of the public hex_grid entry point."""

    def options(self, options: Any) -> Mapping:
        """Return the options mapping, or an empty dict for None."""
        if options is None:
            return {}
        if not isinstance(options, Mapping):
            raise InvalidTypeError("options is invalid")
        return options

    def cell_side(self, cell_side: Any) -> float:
        """Check that the cell side is present and a finite number."""
        if cell_side is None:
            raise MissingArgumentError("cellSide is required")
        if not self._is_number(cell_side):
            raise InvalidTypeError("cellSide is invalid")
        return cell_side

    def bbox(self, bbox: Any) -> Tuple[float, float, float, float]:
        """Check that the bbox is a list/tuple of exactly 4 finite numbers."""
        if bbox is None:
            raise MissingArgumentError("bbox is required")
        if not isinstance(bbox, (list, tuple)):
            raise InvalidTypeError("bbox must be array")
        if len(bbox) != 4:
            raise InvalidShapeError("bbox must contain 4 numbers")
        for value in bbox:
            if not self._is_number(value):
                raise InvalidTypeError(f"bbox must contain finite numbers, got {value!r}")
        return (bbox[0], bbox[1], bbox[2], bbox[3])

    def units(self, units: Any) -> str:
        """Check that the unit name is supported."""
        name = units or DistanceMeasurer.DEFAULT_UNITS
        if not isinstance(name, str) or name not in DistanceMeasurer.UNIT_FACTORS:
            raise InvalidUnitError(f"{name} units is invalid")
        return name

    def _is_number(self, value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False
        return math.isfinite(value)


def hex_grid(bbox: Sequence[float], cell_side: float, options: Optional[Mapping] = None) -> Dict[str, Any]:
    """Take a bounding box and a cell side and return a hexagonal grid.

    The cells are flat-topped hexagons (or the triangles composing them)
    aligned in an odd-q vertical grid. The cell side is also the radius of
    each hexagon's circumcircle.

    Args:
        bbox: Extent in [west, south, east, north] order.
        cell_side: Length of the side of the hexagons, in units.
        options: Optional mapping with keys ``units`` (default
            'kilometers'), ``properties`` (shared by every cell, default {})
            and ``triangles`` (only ``True`` enables triangle output).

    Returns:
        A GeoJSON FeatureCollection of Polygon features.

    Raises:
        MissingArgumentError: If bbox or cell_side is missing.
        InvalidTypeError: If an argument has the wrong type.
        InvalidShapeError: If bbox does not hold 4 values.
        InvalidUnitError: If the unit is not supported.
    """
    validator = ArgumentValidator()
    options = validator.options(options)
    cell_side = validator.cell_side(cell_side)
    bbox = validator.bbox(bbox)
    units = validator.units(options.get("units"))

    return HexGridGenerator().generate(
        bbox,
        cell_side,
        units=units,
        properties=options.get("properties") or {},
        triangles=options.get("triangles") is True,
    )


# ---------------------------------------------------------------------------
# SettingsManager
# ---------------------------------------------------------------------------
class SettingsError(ValueError):
    """A settings value has a type the CLI cannot use."""


def parse_bool(value: Any) -> bool:
    """Interpret a bool or a 'true'/'false'-style string as a boolean.

    Raises:
        ValueError: If the value has no boolean reading.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value.lower() in ("true", "1", "yes"):
            return True
        if value.lower() in ("false", "0", "no"):
            return False
    raise ValueError(f"Boolean value expected, got {value!r}")


class SettingsManager:
    """Saves and restores grid requests as JSON settings files.

    Imported values fill in whatever was not given on the command line, and
    every persisted value is then normalised to the type the generator
    expects, whether it came from argparse or from JSON.
    """

    PERSISTED_KEYS: Tuple[str, ...] = (
        "bbox", "cell_side", "units", "triangles", "properties", "file", "debug",
    )

    def load(self, path: str) -> Dict[str, Any]:
        """Read a settings file.

        Raises:
            FileNotFoundError: If the file does not exist.
            json.JSONDecodeError: If the file is not valid JSON.
            SettingsError: If the document is not a JSON object.
        """
        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise SettingsError("settings file must contain a JSON object")
        return data

    def dump(self, params: argparse.Namespace, path: str) -> None:
        """Write the persisted parameters of *params* to *path*."""
        data = {key: getattr(params, key, None) for key in self.PERSISTED_KEYS}
        with open(path, "w") as f:
            json.dump(data, f, indent=2)

    def merge(self, params: argparse.Namespace, settings: Mapping, explicit_keys: set) -> argparse.Namespace:
        """Copy imported values onto *params* unless given explicitly on the CLI."""
        for key in self.PERSISTED_KEYS:
            if key in settings and key not in explicit_keys:
                setattr(params, key, settings[key])
        return params

    def normalize(self, params: argparse.Namespace) -> argparse.Namespace:
        """Coerce every persisted parameter to its working type.

        Raises:
            SettingsError: If a value cannot be coerced.
        """
        for key in self.PERSISTED_KEYS:
            setattr(params, key, self.coerce(key, getattr(params, key, None)))
        return params

    def coerce(self, key: str, value: Any) -> Any:
        """Coerce a single parameter value.

        bbox and cell_side pass through untouched; hex_grid() validates them.
        """
        if key in ("triangles", "debug"):
            try:
                return parse_bool(value)
            except ValueError as e:
                raise SettingsError(f"{key}: {e}")
        if key == "properties":
            return self._properties(value)
        if key == "file" and not isinstance(value, str):
            raise SettingsError(f"file must be a string, got {value!r}")
        if key == "units":
            if value is not None and not isinstance(value, str):
                raise SettingsError(f"{key} must be a string, got {value!r}")
            return value
        return value

    def _properties(self, value: Any) -> Dict:
        if value is None:
            return {}
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except json.JSONDecodeError as e:
                raise SettingsError(f"Malformed JSON in properties: {e}")
        if not isinstance(value, dict):
            raise SettingsError("properties must be a JSON object")
        return value


# ---------------------------------------------------------------------------
# Version helper
# ---------------------------------------------------------------------------
def _changelog_version(fallback: str = "0.0.0") -> str:
    """Read the highest version from CHANGELOG.md next to this module."""
    changelog = os.path.join(os.path.dirname(os.path.abspath(__file__)), "CHANGELOG.md")
    try:
        with open(changelog, "r", encoding="utf-8") as fh:
            for line in fh:
                m = re.match(r"^##\s+\[(\d+\.\d+\.\d+)\]", line)
                if m:
                    return m.group(1)
    except OSError:
        pass
    return fallback


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------
class Application:
    """Command line front end: parse, merge settings, generate, write GeoJSON."""

    VERSION: str = _changelog_version("1.0.0")
    TITLE:   str = "HEX Grid Generator"
    AUTHOR:  str = "hex-grid contributors"

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Execute the full application pipeline.

        Args:
            argv: Argument list (default: sys.argv[1:]).
        """
        args, explicit_keys = self._parse_args(argv)
        manager = SettingsManager()

        if args.import_settings:
            path = self._with_suffix(args.import_settings, (".json",), ".json")
            try:
                manager.merge(args, manager.load(path), explicit_keys)
            except FileNotFoundError:
                self._fail(f"Settings file not found: '{path}'")
            except json.JSONDecodeError as e:
                self._fail(f"Malformed JSON in settings file: {e}")
            except SettingsError as e:
                self._fail(str(e))

        try:
            manager.normalize(args)
        except SettingsError as e:
            self._fail(str(e))

        try:
            collection = hex_grid(args.bbox, args.cell_side, {
                "units": args.units,
                "properties": args.properties,
                "triangles": args.triangles,
            })
            geometry = GridLayoutPlanner().plan(args.bbox, args.cell_side, args.units)
        except HexGridError as e:
            self._fail(str(e))
        except ZeroDivisionError:
            self._fail("Degenerate bounding box or cell side (division by zero)")

        saved = []
        if args.export_settings:
            export_path = self._with_suffix(args.export_settings, (".json",), ".json")
            try:
                manager.dump(args, export_path)
            except IOError as e:
                self._fail(f"Cannot write settings file: {e}")
            saved.append(export_path)

        out_file = self._with_suffix(args.file, (".geojson", ".json"), ".geojson")
        try:
            with open(out_file, "w") as f:
                json.dump(collection, f)
        except IOError as e:
            self._fail(f"Cannot write output file: {e}")
        saved.insert(0, out_file)

        print(f"{self.TITLE} {self.VERSION} ({self.AUTHOR})")
        for path in saved:
            print(f"  Saved: {path}")
        if args.debug:
            self._print_debug(args, geometry, collection)

    def _with_suffix(self, path: str, suffixes: Tuple[str, ...], default: str) -> str:
        return path if path.lower().endswith(suffixes) else path + default

    def _fail(self, message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)

    def _parse_args(self, argv: Optional[List[str]] = None) -> Tuple[argparse.Namespace, set]:
        """Parse CLI arguments and detect which were explicitly provided."""
        args = self._build_parser().parse_args(argv)

        # Second parse with SUPPRESS defaults to detect explicit keys
        explicit = self._build_parser(suppress_defaults=True).parse_args(argv)
        return args, set(vars(explicit).keys())

    def _build_parser(self, suppress_defaults: bool = False) -> argparse.ArgumentParser:
        """Build the argparse ArgumentParser.

        Args:
            suppress_defaults: If True, every grid option defaults to SUPPRESS
                so only explicitly given flags appear in the namespace.
        """
        def default(value: Any) -> Any:
            return argparse.SUPPRESS if suppress_defaults else value

        parser = argparse.ArgumentParser(
            prog="hexgrid",
            description="Tessellate a bounding box into a GeoJSON grid of flat-top hexagons.",
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {self.VERSION}")
        parser.add_argument("--bbox", type=float, nargs=4, default=default(None),
                            metavar=("WEST", "SOUTH", "EAST", "NORTH"),
                            help="Bounding box in coordinate units")
        parser.add_argument("--cell_side", type=float, default=default(None),
                            help="Cell side length (hexagon circumradius) in --units")
        parser.add_argument("--units", type=str, default=default(DistanceMeasurer.DEFAULT_UNITS),
                            help="Distance unit (default: kilometers)")
        parser.add_argument("--triangles", nargs="?", const=True, default=default(False),
                            type=self._parse_bool_flag,
                            help="Emit 6 triangles per hexagon")
        parser.add_argument("--properties", type=str, default=default("{}"),
                            help="JSON object attached to every cell (default: {})")
        parser.add_argument("--file", type=str, default=default("hexgrid.geojson"),
                            help="Output GeoJSON filename (default: hexgrid.geojson)")
        parser.add_argument("--debug", nargs="?", const=True, default=default(False),
                            type=self._parse_bool_flag,
                            help="Print the grid geometry")
        parser.add_argument("--export_settings", type=str, default=None,
                            help="Write the resolved parameters to a JSON file")
        parser.add_argument("--import_settings", type=str, default=None,
                            help="Read parameters from a JSON file")
        return parser

    def _parse_bool_flag(self, value: str) -> bool:
        try:
            return parse_bool(value)
        except ValueError as e:
            raise argparse.ArgumentTypeError(str(e))

    def _print_debug(self, args: argparse.Namespace, geometry: GridGeometry, collection: Dict[str, Any]) -> None:
        """Print the resolved request and its grid geometry to stdout."""
        west, south, east, north = args.bbox
        print(f"\n  Bounding box:     [{west}, {south}, {east}, {north}]")
        print(f"  Cell side:        {args.cell_side} {args.units}")
        print(f"  Mode:             {'triangles' if args.triangles else 'hexagons'}")
        print(f"  Cell size:        {geometry.cell_width:.6f} x {geometry.cell_height:.6f}")
        print(f"  Hex size:         {geometry.hex_width:.6f} x {geometry.hex_height:.6f}")
        print(f"  Columns:          {geometry.column_count + 1} (adjust {geometry.column_adjust:.6f})")
        print(f"  Rows:             {geometry.row_count + 1} (adjust {geometry.row_adjust:.6f})")
        print(f"  Row offset:       {geometry.has_row_offset}")
        print(f"  Features:         {len(collection['features'])}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
def main() -> None:
    """Main entry point for the HEX Grid Generator."""
    Application().run()


if __name__ == "__main__":
    main()
