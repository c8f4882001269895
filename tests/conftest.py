"""Shared test fixtures for worldmapidentity tests."""

from unittest.mock import MagicMock

import pytest
import requests

from worldmapidentity.models import AnnotationRecord, ShapeRecord


def make_response(*, json_data=None, text="", status=200):
    """Stand-in for requests.Response as returned by requests.get."""
    response = MagicMock()
    response.status_code = status
    response.text = text
    if json_data is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    if status >= 400:
        error = requests.exceptions.HTTPError(f"{status} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def fake_response():
    """Factory fixture: fake_response(json_data=..., text=..., status=...)."""
    return make_response


@pytest.fixture
def square_topology():
    """Unquantized topology: two square countries and one empty geometry.

    France is the 10x10 square at lon 0..10 / lat 40..50 (centroid 5, 45).
    Germany is a MultiPolygon built from the shared edge arc.
    """
    return {
        "type": "Topology",
        "objects": {
            "countries": {
                "type": "GeometryCollection",
                "geometries": [
                    {
                        "type": "Polygon",
                        "id": "250",
                        "arcs": [[0, 1]],
                        "properties": {"name": "France"},
                    },
                    {
                        "type": "MultiPolygon",
                        "id": "276",
                        "arcs": [[[2, -1]]],
                        "properties": {"NAME": "Germany", "ISO_A3": "deu"},
                    },
                    {
                        "type": None,
                        "id": "-99",
                        "properties": {"name": "Somewhere"},
                    },
                ],
            },
            "land": {"type": "GeometryCollection", "geometries": []},
        },
        "arcs": [
            # shared edge lon 10, lat 40 -> 50
            [[10, 40], [10, 50]],
            # rest of France ring: 10,50 -> 0,50 -> 0,40 -> 10,40
            [[10, 50], [0, 50], [0, 40], [10, 40]],
            # Germany ring without the shared edge: 10,40 -> 20,40 -> 20,50 -> 10,50
            [[10, 40], [20, 40], [20, 50], [10, 50]],
        ],
    }


@pytest.fixture
def quantized_topology():
    """Quantized, delta-encoded topology with one 2x2 square at lon 100..102, lat 20..22."""
    return {
        "type": "Topology",
        "transform": {"scale": [0.5, 0.5], "translate": [100, 20]},
        "objects": {
            "countries": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "Polygon", "id": "156", "arcs": [[0]], "properties": {"name": "China"}},
                ],
            },
        },
        "arcs": [
            [[0, 0], [4, 0], [0, 4], [-4, 0], [0, -4]],
        ],
    }


@pytest.fixture
def shapes():
    """Shape records resembling world-atlas countries."""
    return [
        ShapeRecord("China", "CHN", (104.2, 35.9), {"name": "China"}),
        ShapeRecord("Taiwan", "TWN", (121.0, 23.7), {"name": "Taiwan"}),
        ShapeRecord("North Korea", "PRK", (127.2, 40.1), {"name": "North Korea"}),
        ShapeRecord("South Korea", "KOR", (127.8, 36.4), {"name": "South Korea"}),
        ShapeRecord("United States of America", "USA", (-98.6, 39.8), {"name": "United States of America"}),
        ShapeRecord("France", "FRA", (2.5, 46.6), {"name": "France"}),
        ShapeRecord("Dem. Rep. Congo", "COD", (23.6, -2.9), {"name": "Dem. Rep. Congo"}),
        ShapeRecord("Antarctica", None, None, {"name": "Antarctica"}),
    ]


@pytest.fixture
def annotations():
    """Annotation records in the order a sheet would list them."""
    return [
        AnnotationRecord("France", "Paris office", code="FRA"),
        AnnotationRecord("China", "Shanghai office", code="CHN", group="china"),
        AnnotationRecord("Taiwan", "Taipei office", code="TWN", group="china"),
        AnnotationRecord("South Korea", "Seoul office", code="KOR"),
    ]
