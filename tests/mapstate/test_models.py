"""Tests for map value types — range checks, immutability, wire dicts."""

import dataclasses
import math

import pytest

from mapstate import (
    ControlPanel,
    Feature,
    InvalidCoordinateError,
    Layer,
    RenderKind,
    Source,
    SourceKind,
    Viewport,
)
from mapstate.models import validate_lnglat


@pytest.mark.unit
class TestValidateLngLat:

    @pytest.mark.parametrize("pair", [(0, 0), (-180, -90), (180, 90), (-93.5, 45.25)])
    def test_accepts_in_range(self, pair):
        lng, lat = validate_lnglat(pair)
        assert (lng, lat) == (float(pair[0]), float(pair[1]))

    @pytest.mark.parametrize("pair", [(180.01, 0), (-181, 0), (0, 90.5), (0, -91)])
    def test_rejects_out_of_range(self, pair):
        with pytest.raises(InvalidCoordinateError):
            validate_lnglat(pair)

    @pytest.mark.parametrize("pair", [(math.nan, 0), (0, math.inf), ("x", 1), (1,), None])
    def test_rejects_malformed(self, pair):
        with pytest.raises(InvalidCoordinateError):
            validate_lnglat(pair)

    def test_invalid_coordinate_is_value_error(self):
        with pytest.raises(ValueError):
            validate_lnglat((500, 0))

    @pytest.mark.parametrize("pair", ["12", b"12", "-93,45"])
    def test_rejects_strings(self, pair):
        with pytest.raises(InvalidCoordinateError):
            validate_lnglat(pair)

    def test_set_view_string_center_rejected(self):
        with pytest.raises(InvalidCoordinateError):
            Viewport(center="12", zoom=1)


@pytest.mark.unit
class TestViewport:

    def test_defaults(self):
        vp = Viewport()
        assert vp.center == (0.0, 0.0)
        assert vp.zoom == 0.0

    def test_center_coerced_to_float_tuple(self):
        vp = Viewport(center=[-93, 45], zoom=5)
        assert vp.center == (-93.0, 45.0)
        assert isinstance(vp.zoom, float)

    def test_negative_zoom_rejected(self):
        with pytest.raises(InvalidCoordinateError):
            Viewport(center=(0, 0), zoom=-1)

    def test_non_finite_zoom_rejected(self):
        with pytest.raises(InvalidCoordinateError):
            Viewport(center=(0, 0), zoom=math.inf)

    def test_frozen(self):
        vp = Viewport()
        with pytest.raises(dataclasses.FrozenInstanceError):
            vp.zoom = 3


@pytest.mark.unit
class TestFeature:

    def test_properties_copied(self):
        props = {"title": "HQ"}
        f = Feature((1, 2), props)
        props["title"] = "changed"
        assert f.properties["title"] == "HQ"

    def test_out_of_range_rejected(self):
        with pytest.raises(InvalidCoordinateError):
            Feature((200, 0), {})

    @pytest.mark.parametrize("value", [{"a": 1}, [1, 2], (1, 2), {1}])
    def test_non_scalar_property_rejected(self, value):
        with pytest.raises(ValueError):
            Feature((0, 0), {"tags": value})

    def test_non_string_key_rejected(self):
        with pytest.raises(ValueError):
            Feature((0, 0), {1: "x"})

    def test_scalar_properties_accepted(self):
        f = Feature((0, 0), {"s": "x", "i": 1, "f": 1.5, "b": False, "n": None})
        assert f.to_dict()["properties"] == {"s": "x", "i": 1, "f": 1.5, "b": False, "n": None}

    def test_properties_read_only(self):
        f = Feature((0, 0), {"title": "HQ"})
        with pytest.raises(TypeError):
            f.properties["title"] = "changed"

    def test_to_dict(self):
        f = Feature((-122.4, 37.7), {"name": "A", "isRandom": True})
        assert f.to_dict() == {
            "type": "Feature",
            "properties": {"name": "A", "isRandom": True},
            "geometry": {"type": "Point", "coordinates": [-122.4, 37.7]},
        }


@pytest.mark.unit
class TestWireDicts:

    def test_raster_source_has_no_data(self):
        s = Source("osm", SourceKind.RASTER, {"tileSize": 256})
        assert s.to_dict() == {"tileSize": 256, "type": "raster"}

    def test_geojson_source_wraps_feature_collection(self):
        f = Feature((1, 2), {"title": "x"})
        s = Source("points", SourceKind.GEOJSON, {"clusterRadius": 50}, (f,))
        out = s.to_dict()
        assert out["type"] == "geojson"
        assert out["clusterRadius"] == 50
        assert out["data"]["type"] == "FeatureCollection"
        assert out["data"]["features"] == [f.to_dict()]

    def test_layer_omits_empty_fields(self):
        assert Layer("osm", "osm").to_dict() == {"id": "osm", "source": "osm"}

    def test_layer_full(self):
        layer = Layer(
            "dots", "points", RenderKind.CIRCLE,
            paint={"circle-radius": 3}, filter=["!has", "point_count"],
        )
        assert layer.to_dict() == {
            "id": "dots",
            "source": "points",
            "type": "circle",
            "paint": {"circle-radius": 3},
            "filter": ["!has", "point_count"],
        }

    def test_control_panel(self):
        cp = ControlPanel("<p>x</p>", {"name": "bookmark"})
        assert cp.to_dict() == {"html": "<p>x</p>", "metadata": {"name": "bookmark"}}

    def test_source_kind_strings(self):
        assert SourceKind("raster") is SourceKind.RASTER
        assert SourceKind.GEOJSON.value == "geojson"
