"""Coordinate reference systems and random GeoJSON geometries."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any


class InvalidArgumentError(ValueError):
    """Raised when an argument or setting has an unacceptable value."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Invalid argument: {detail}")


@dataclass(frozen=True)
class Bounds:
    """A longitude/latitude bounding box in degrees."""

    min_lon: float
    max_lon: float
    min_lat: float
    max_lat: float

    def contains(self, lon: float, lat: float) -> bool:
        """Return True if the position lies inside the box, edges included."""
        return (
            self.min_lon <= lon <= self.max_lon
            and self.min_lat <= lat <= self.max_lat
        )


WGS84_BOUNDS = Bounds(min_lon=-180.0, max_lon=180.0, min_lat=-90.0, max_lat=90.0)

WEB_MERCATOR_BOUNDS = Bounds(
    min_lon=-180.0,
    max_lon=180.0,
    min_lat=-85.05112878,
    max_lat=85.05112878,
)


class Crs(Enum):
    """Supported coordinate reference systems."""

    WGS84 = "wgs84"
    WEB_MERCATOR = "webmercator"

    def bounds(self) -> Bounds:
        """Return the valid coordinate range of this system."""
        if self is Crs.WGS84:
            return WGS84_BOUNDS
        return WEB_MERCATOR_BOUNDS


_CRS_NAMES = {
    "wgs84": Crs.WGS84,
    "4326": Crs.WGS84,
    "webmercator": Crs.WEB_MERCATOR,
    "web_mercator": Crs.WEB_MERCATOR,
    "3857": Crs.WEB_MERCATOR,
}


def parse_crs(text: str) -> Crs:
    """Parse a coordinate system name or EPSG code, case-insensitively."""
    try:
        return _CRS_NAMES[text.lower()]
    except KeyError:
        raise InvalidArgumentError(f"Invalid coordinate system: {text}") from None


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def random_coords(crs: Crs, rng: random.Random | None = None) -> tuple[float, float]:
    """Return a random (longitude, latitude) pair inside the bounds of ``crs``."""
    rng = _rng_or_default(rng)
    bounds = crs.bounds()
    longitude = rng.uniform(bounds.min_lon, bounds.max_lon)
    latitude = rng.uniform(bounds.min_lat, bounds.max_lat)
    return longitude, latitude


def _random_positions(crs: Crs, count: int, rng: random.Random) -> list[list[float]]:
    return [list(random_coords(crs, rng)) for _ in range(count)]


def random_point(crs: Crs, rng: random.Random | None = None) -> dict[str, Any]:
    """Return a GeoJSON Point at a random position."""
    rng = _rng_or_default(rng)
    return {"type": "Point", "coordinates": list(random_coords(crs, rng))}


def random_linestring(crs: Crs, rng: random.Random | None = None) -> dict[str, Any]:
    """Return a GeoJSON LineString of 2 to 9 random positions."""
    rng = _rng_or_default(rng)
    count = rng.randrange(2, 10)
    return {"type": "LineString", "coordinates": _random_positions(crs, count, rng)}


def random_polygon(crs: Crs, rng: random.Random | None = None) -> dict[str, Any]:
    """Return a GeoJSON Polygon with one closed ring of 3 to 9 random positions."""
    rng = _rng_or_default(rng)
    count = rng.randrange(3, 10)
    ring = _random_positions(crs, count, rng)
    ring.append(list(ring[0]))
    return {"type": "Polygon", "coordinates": [ring]}