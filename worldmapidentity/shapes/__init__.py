"""Map shape extraction from TopoJSON topologies.

Public API:
    extract(topology, collection="countries") -> list[ShapeRecord]
        Decode a collection into shape records with representative points

    load_shapes(url=GEO_URL) -> list[ShapeRecord]
        Fetch a topology over HTTP and extract it

    fetch_topology(url=GEO_URL) -> dict
        Fetch and parse a topology document
"""

from worldmapidentity.shapes.shapeapi import (
    GEO_URL,
    fetch_topology,
    load_shapes,
)
from worldmapidentity.shapes.shapeextract import (
    NAME_KEYS,
    CODE_KEYS,
    extract,
    representative_point,
)
from worldmapidentity.shapes.shapetopology import object_features

__all__ = [
    "GEO_URL",
    "fetch_topology",
    "load_shapes",
    "NAME_KEYS",
    "CODE_KEYS",
    "extract",
    "representative_point",
    "object_features",
]
