"""Tests for TopoJSON arc decoding."""

import pytest

from worldmapidentity.errors import MalformedInputError
from worldmapidentity.shapes.shapetopology import decode_arcs, object_features


class TestDecodeArcs:
    """Arc positions"""

    def test_unquantized_arcs_pass_through(self, square_topology):
        arcs = decode_arcs(square_topology)
        assert arcs[0] == [[10.0, 40.0], [10.0, 50.0]]

    def test_quantized_arcs_are_delta_decoded(self, quantized_topology):
        arcs = decode_arcs(quantized_topology)
        assert arcs[0] == [
            [100.0, 20.0], [102.0, 20.0], [102.0, 22.0], [100.0, 22.0], [100.0, 20.0],
        ]


class TestObjectFeatures:
    """Collection decoding"""

    def test_one_feature_per_geometry(self, square_topology):
        features = object_features(square_topology)
        assert len(features) == 3
        assert [f["id"] for f in features] == ["250", "276", "-99"]

    def test_rings_are_stitched_and_closed(self, square_topology):
        france = object_features(square_topology)[0]
        ring = france["geometry"]["coordinates"][0]
        assert ring[0] == ring[-1]
        assert ring == [[10, 40], [10, 50], [0, 50], [0, 40], [10, 40]]

    def test_negative_arc_index_is_reversed(self, square_topology):
        germany = object_features(square_topology)[1]
        assert germany["geometry"]["type"] == "MultiPolygon"
        ring = germany["geometry"]["coordinates"][0][0]
        assert ring == [[10, 40], [20, 40], [20, 50], [10, 50], [10, 40]]

    def test_null_geometry(self, square_topology):
        somewhere = object_features(square_topology)[2]
        assert somewhere["geometry"] is None
        assert somewhere["properties"] == {"name": "Somewhere"}

    def test_point_geometry_uses_transform(self, quantized_topology):
        quantized_topology["objects"]["countries"]["geometries"].append(
            {"type": "Point", "coordinates": [2, 2], "properties": {"name": "Dot"}}
        )
        dot = object_features(quantized_topology)[1]
        assert dot["geometry"] == {"type": "Point", "coordinates": [101.0, 21.0]}

    def test_bad_arc_index_is_not_fatal(self, square_topology):
        square_topology["objects"]["countries"]["geometries"].append(
            {"type": "Polygon", "arcs": [[99]], "properties": {"name": "Broken"}}
        )
        features = object_features(square_topology)
        assert len(features) == 4
        assert features[-1]["geometry"] is None

    def test_other_collection(self, square_topology):
        assert object_features(square_topology, "land") == []


class TestMalformedTopology:
    """Structural problems are fatal"""

    def test_not_an_object(self):
        with pytest.raises(MalformedInputError):
            object_features([])

    def test_missing_objects(self):
        with pytest.raises(MalformedInputError, match="objects"):
            object_features({"type": "Topology", "arcs": []})

    def test_missing_collection(self, square_topology):
        with pytest.raises(MalformedInputError, match="'states'"):
            object_features(square_topology, "states")

    def test_collection_without_geometries(self):
        topo = {"objects": {"countries": {"type": "GeometryCollection"}}, "arcs": []}
        with pytest.raises(MalformedInputError, match="geometries"):
            object_features(topo)
