# randomgeojson

Generate random GeoJSON feature collections. You can use them as test data for
GIS tools, map renderers and spatial databases.

Each feature gets a random UUID (version 4) as its id and a random Point,
LineString or Polygon geometry. Coordinates are drawn uniformly within the
bounds of the chosen coordinate system. A feature can also carry random
properties. Each property is an integer from 0 to 999, a phrase of 3 to 9
words from a built-in English word list, or a boolean.

The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

## Command line

```
random-geojson [--length N] [--num-properties N]
               [--geometry-type Point|LineString|Polygon|All]
               [--coordinate-system WGS84|WebMercator|4326|3857]
               [--pretty] [-o FILE] [--version]
```

| Option                | Default          | Meaning                                        |
|-----------------------|------------------|------------------------------------------------|
| `--length`            | `100`            | Number of features to generate                 |
| `--num-properties`    | `0`              | Properties per feature (`prop1`, `prop2`, ...) |
| `--geometry-type`     | `All`            | Geometry kind; `All` picks one per feature     |
| `--coordinate-system` | `WGS84`          | `WGS84`/`4326` or `WebMercator`/`3857`         |
| `--pretty`            | off              | Indent the JSON output by two spaces           |
| `-o`, `--output-file` | `random.geojson` | File to write                                  |

The values of `--geometry-type` and `--coordinate-system` are not case
sensitive. `--length` and `--num-properties` take non-negative integers. An
invalid value is reported as a usage error. If the output file cannot be
written, the command prints an error and exits with status 1.

Example:

```
random-geojson --length 10 --geometry-type polygon --num-properties 3 --pretty -o polygons.geojson
```

The output is a FeatureCollection whose object keys are sorted. When
`--num-properties` is 0, each feature's `properties` is `null`.

## Library use

```python
import random

from randomgeojson.cli import GeometryType, build_feature_collection, save_geojson
from randomgeojson.geometry import parse_crs

rng = random.Random(42)
collection = build_feature_collection(
    10, GeometryType.POINT, parse_crs("3857"), 2, rng
)
save_geojson(collection, "points.geojson", pretty=True)
```

Every generator takes an optional `random.Random`. If you pass a seeded one,
the output, ids included, can be reproduced.

- `randomgeojson.geometry`:
  - `Crs` with `bounds()`, and `parse_crs`, which accepts `wgs84`, `4326`,
    `webmercator`, `web_mercator` and `3857`.
  - `random_coords`.
  - `random_point`.
  - `random_linestring`, with 2 to 9 positions.
  - `random_polygon`, with one closed ring of 3 to 9 distinct positions plus
    the closing one.
  - `InvalidArgumentError`.
- `randomgeojson.cli`:
  - `GeometryType`.
  - `random_geometry`, `random_feature` and `build_feature_collection`.
  - `random_property_value`.
  - `save_geojson`.
  - The validators `validate_zero_or_more`, `validate_geometry_type` and
    `validate_coordinate_system`.
  - `main`.
- `randomgeojson.words`: `random_word` and `random_phrase`.

An unknown coordinate system or geometry type raises `InvalidArgumentError`.
`save_geojson` also raises it when the file cannot be written.