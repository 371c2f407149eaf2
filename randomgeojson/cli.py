"""Command line generator of random GeoJSON feature collections."""

from __future__ import annotations

import argparse
import json
import random
import re
import sys
import uuid
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Sequence

from randomgeojson.geometry import (
    Crs,
    InvalidArgumentError,
    parse_crs,
    random_linestring,
    random_point,
    random_polygon,
)
from randomgeojson.words import random_phrase

_VERSION = "0.1.4"
_MAX_SIZE = 2**64
_UNSIGNED = re.compile(r"\+?[0-9]+")


class GeometryType(Enum):
    """Kinds of geometry the generator can produce."""

    POINT = "point"
    LINESTRING = "linestring"
    POLYGON = "polygon"
    ALL = "all"


_GENERATORS: dict[GeometryType, Callable[[Crs, random.Random], dict[str, Any]]] = {
    GeometryType.POINT: random_point,
    GeometryType.LINESTRING: random_linestring,
    GeometryType.POLYGON: random_polygon,
}

_COORDINATE_SYSTEMS = {"wgs84", "webmercator", "4326", "3857"}


def validate_zero_or_more(value: str) -> int:
    """Parse a non-negative integer."""
    if _UNSIGNED.fullmatch(value) is None or int(value) >= _MAX_SIZE:
        raise InvalidArgumentError("Value must be zero or more")
    return int(value)


def validate_geometry_type(value: str) -> GeometryType:
    """Parse a geometry type name, case-insensitively."""
    try:
        return GeometryType(value.lower())
    except ValueError:
        raise InvalidArgumentError(
            "Geometry type must be one of: Point, LineString, Polygon"
        ) from None


def validate_coordinate_system(value: str) -> Crs:
    """Parse a coordinate system accepted on the command line."""
    if value.lower() not in _COORDINATE_SYSTEMS:
        raise InvalidArgumentError(
            "Coordinate system must be one of: WGS84, WebMercator, 4326, 3857"
        )
    return parse_crs(value)


def random_property_value(rng: random.Random | None = None) -> int | str | bool:
    """Return a random integer below 1000, phrase, or boolean."""
    rng = rng if rng is not None else random.Random()
    kind = rng.randrange(3)
    if kind == 0:
        return rng.randrange(1000)
    if kind == 1:
        return random_phrase(rng)
    return rng.random() < 0.5


def random_geometry(
    geometry_type: GeometryType, crs: Crs, rng: random.Random | None = None
) -> dict[str, Any]:
    """Return a random geometry; ALL picks one of the three kinds at random."""
    rng = rng if rng is not None else random.Random()
    if geometry_type is GeometryType.ALL:
        geometry_type = rng.choice(
            [GeometryType.POINT, GeometryType.LINESTRING, GeometryType.POLYGON]
        )
    return _GENERATORS[geometry_type](crs, rng)


def random_feature(
    geometry_type: GeometryType,
    crs: Crs,
    num_properties: int,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """Return a GeoJSON Feature with a UUID v4 id and random properties."""
    rng = rng if rng is not None else random.Random()
    feature_id = str(uuid.UUID(int=rng.getrandbits(128), version=4))
    geometry = random_geometry(geometry_type, crs, rng)
    properties = None
    if num_properties > 0:
        properties = {
            f"prop{index}": random_property_value(rng)
            for index in range(1, num_properties + 1)
        }
    return {
        "type": "Feature",
        "id": feature_id,
        "geometry": geometry,
        "properties": properties,
    }


def build_feature_collection(
    length: int,
    geometry_type: GeometryType,
    crs: Crs,
    num_properties: int,
    rng: random.Random | None = None,
) -> dict[str, Any]:
    """Return a FeatureCollection of ``length`` random features."""
    rng = rng if rng is not None else random.Random()
    return {
        "type": "FeatureCollection",
        "features": [
            random_feature(geometry_type, crs, num_properties, rng)
            for _ in range(length)
        ],
    }


def save_geojson(collection: dict[str, Any], path: str | Path, pretty: bool) -> None:
    """Write the collection as JSON, indented when ``pretty`` is set."""
    try:
        if pretty:
            text = json.dumps(collection, indent=2, sort_keys=True)
        else:
            text = json.dumps(collection, separators=(",", ":"), sort_keys=True)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"Failed to serialize GeoJSON: {exc}") from exc
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise InvalidArgumentError(f"Failed to write file: {exc}") from exc


def _argument_type(validator: Callable[[str], Any]) -> Callable[[str], Any]:
    def convert(value: str) -> Any:
        try:
            return validator(value)
        except InvalidArgumentError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = validator.__name__
    return convert


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="Random Geojson",
        description="Random Geojson is a tool to generate random geojson data.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--num-properties",
        type=_argument_type(validate_zero_or_more),
        default=0,
        help="Number of properties (defaults to 0)",
    )
    parser.add_argument(
        "--length",
        type=_argument_type(validate_zero_or_more),
        default=100,
        help="Number of features (defaults to 100)",
    )
    parser.add_argument(
        "--geometry-type",
        type=_argument_type(validate_geometry_type),
        default="All",
        help='Point, LineString, Polygon or All (defaults to "All")',
    )
    parser.add_argument(
        "--coordinate-system",
        type=_argument_type(validate_coordinate_system),
        default="WGS84",
        help='WGS84, WebMercator, 4326 or 3857 (defaults to "WGS84")',
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print the GeoJSON output",
    )
    parser.add_argument(
        "-o",
        "--output-file",
        default="random.geojson",
        help='File to write (defaults to "random.geojson")',
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the generator from the command line and return an exit status."""
    args = _build_parser().parse_args(argv)
    collection = build_feature_collection(
        args.length, args.geometry_type, args.coordinate_system, args.num_properties
    )
    try:
        save_geojson(collection, args.output_file, args.pretty)
    except InvalidArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())