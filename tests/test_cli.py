import json
import random
import uuid

import pytest

from randomgeojson.cli import (
    GeometryType,
    build_feature_collection,
    main,
    random_feature,
    random_geometry,
    random_property_value,
    save_geojson,
    validate_coordinate_system,
    validate_geometry_type,
    validate_zero_or_more,
)
from randomgeojson.geometry import WGS84_BOUNDS, Crs, InvalidArgumentError


@pytest.mark.parametrize("text, expected", [("0", 0), ("100", 100), ("+7", 7)])
def test_validate_zero_or_more_accepts(text, expected):
    assert validate_zero_or_more(text) == expected


@pytest.mark.parametrize("text", ["-1", "abc", "", "1.5", " 3"])
def test_validate_zero_or_more_rejects(text):
    with pytest.raises(InvalidArgumentError) as info:
        validate_zero_or_more(text)
    assert info.value.detail == "Value must be zero or more"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Point", GeometryType.POINT),
        ("LINESTRING", GeometryType.LINESTRING),
        ("polygon", GeometryType.POLYGON),
        ("All", GeometryType.ALL),
    ],
)
def test_validate_geometry_type(text, expected):
    assert validate_geometry_type(text) is expected


def test_validate_geometry_type_rejects():
    with pytest.raises(InvalidArgumentError) as info:
        validate_geometry_type("MultiPoint")
    assert info.value.detail == "Geometry type must be one of: Point, LineString, Polygon"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("WGS84", Crs.WGS84),
        ("4326", Crs.WGS84),
        ("WebMercator", Crs.WEB_MERCATOR),
        ("3857", Crs.WEB_MERCATOR),
    ],
)
def test_validate_coordinate_system(text, expected):
    assert validate_coordinate_system(text) is expected


@pytest.mark.parametrize("text", ["web_mercator", "unknown"])
def test_validate_coordinate_system_rejects(text):
    with pytest.raises(InvalidArgumentError):
        validate_coordinate_system(text)


def test_random_property_value_kinds():
    rng = random.Random(3)
    kinds = set()
    for _ in range(300):
        value = random_property_value(rng)
        if isinstance(value, bool):
            kinds.add("bool")
        elif isinstance(value, int):
            assert 0 <= value < 1000
            kinds.add("int")
        else:
            assert 3 <= len(value.split(" ")) <= 9
            kinds.add("str")
    assert kinds == {"bool", "int", "str"}


@pytest.mark.parametrize(
    "geometry_type, name",
    [
        (GeometryType.POINT, "Point"),
        (GeometryType.LINESTRING, "LineString"),
        (GeometryType.POLYGON, "Polygon"),
    ],
)
def test_random_geometry_type(geometry_type, name):
    assert random_geometry(geometry_type, Crs.WGS84, random.Random(1))["type"] == name


def test_random_geometry_all_produces_every_kind():
    rng = random.Random(8)
    names = {random_geometry(GeometryType.ALL, Crs.WGS84, rng)["type"] for _ in range(100)}
    assert names == {"Point", "LineString", "Polygon"}


def test_random_feature_with_properties():
    feature = random_feature(GeometryType.POINT, Crs.WGS84, 3, random.Random(2))
    assert feature["type"] == "Feature"
    assert sorted(feature["properties"]) == ["prop1", "prop2", "prop3"]
    assert uuid.UUID(feature["id"]).version == 4
    lon, lat = feature["geometry"]["coordinates"]
    assert WGS84_BOUNDS.contains(lon, lat)


def test_random_feature_without_properties():
    feature = random_feature(GeometryType.POLYGON, Crs.WGS84, 0, random.Random(2))
    assert feature["properties"] is None


def test_build_feature_collection_length_and_unique_ids():
    collection = build_feature_collection(
        25, GeometryType.ALL, Crs.WEB_MERCATOR, 1, random.Random(6)
    )
    assert collection["type"] == "FeatureCollection"
    assert len(collection["features"]) == 25
    assert len({feature["id"] for feature in collection["features"]}) == 25


def test_build_feature_collection_is_repeatable():
    first = build_feature_collection(5, GeometryType.ALL, Crs.WGS84, 2, random.Random(9))
    second = build_feature_collection(5, GeometryType.ALL, Crs.WGS84, 2, random.Random(9))
    assert first == second


@pytest.mark.parametrize("pretty", [True, False])
def test_save_geojson_round_trip(tmp_path, pretty):
    collection = build_feature_collection(
        4, GeometryType.ALL, Crs.WGS84, 2, random.Random(4)
    )
    path = tmp_path / "out.geojson"
    save_geojson(collection, path, pretty)
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == collection
    assert ("\n" in text) is pretty


def test_save_geojson_unwritable_path(tmp_path):
    with pytest.raises(InvalidArgumentError) as info:
        save_geojson({"type": "FeatureCollection", "features": []},
                     tmp_path / "missing" / "out.geojson", False)
    assert info.value.detail.startswith("Failed to write file")


def test_main_writes_file(tmp_path):
    path = tmp_path / "data.geojson"
    status = main([
        "--length", "7",
        "--geometry-type", "LineString",
        "--coordinate-system", "3857",
        "--num-properties", "2",
        "-o", str(path),
    ])
    assert status == 0
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["features"]) == 7
    assert all(f["geometry"]["type"] == "LineString" for f in data["features"])
    assert all(sorted(f["properties"]) == ["prop1", "prop2"] for f in data["features"])


def test_main_zero_length(tmp_path):
    path = tmp_path / "empty.geojson"
    assert main(["--length", "0", "--output-file", str(path)]) == 0
    assert json.loads(path.read_text(encoding="utf-8"))["features"] == []


def test_main_rejects_bad_geometry_type(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        main(["--geometry-type", "Circle", "-o", str(tmp_path / "x.geojson")])
    assert info.value.code == 2
    assert "Geometry type must be one of" in capsys.readouterr().err


def test_main_reports_write_failure(tmp_path, capsys):
    status = main(["--length", "1", "-o", str(tmp_path / "nope" / "x.geojson")])
    assert status == 1
    assert "Failed to write file" in capsys.readouterr().err