"""
TopoJSON Decoding
-----------------

Turns an arc-encoded TopoJSON object collection into GeoJSON-style feature
dicts that shapely can read.

Decoding steps:
  1. Arcs: quantized delta-encoded positions are accumulated and mapped
     through the optional "transform" (scale, translate)
  2. Lines and rings: arc indexes are stitched in order; a negative index ~i
     means arc i reversed; the shared endpoint between arcs is kept once
  3. Geometries: Polygon / MultiPolygon / LineString / MultiLineString /
     Point / MultiPoint / GeometryCollection are rebuilt recursively

API:
  object_features(topology, name="countries") -> list[dict]
  decode_arcs(topology) -> list[list[list[float]]]
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence

from worldmapidentity.errors import MalformedInputError

logger = logging.getLogger(__name__)


def _transformer(transform: Optional[dict]):
    if not transform:
        return None
    sx, sy = transform["scale"]
    tx, ty = transform["translate"]
    return sx, sy, tx, ty


def decode_arcs(topology: dict) -> List[List[List[float]]]:
    """Absolute positions for every arc in the topology.

    Examples:
        >>> topo = {"transform": {"scale": [1, 1], "translate": [10, 0]},
        ...         "arcs": [[[0, 0], [2, 0], [0, 3]]]}
        >>> decode_arcs(topo)
        [[[10.0, 0.0], [12.0, 0.0], [12.0, 3.0]]]
    """
    t = _transformer(topology.get("transform"))
    decoded = []
    for arc in topology.get("arcs") or []:
        points = []
        if t is None:
            for p in arc:
                points.append([float(p[0]), float(p[1])])
        else:
            sx, sy, tx, ty = t
            x = y = 0
            for p in arc:
                x += p[0]
                y += p[1]
                points.append([float(x * sx + tx), float(y * sy + ty)])
        decoded.append(points)
    return decoded


def _position(p: Sequence[float], t) -> List[float]:
    # Point positions are quantized but not delta-encoded.
    if t is None:
        return [float(p[0]), float(p[1])]
    sx, sy, tx, ty = t
    return [float(p[0] * sx + tx), float(p[1] * sy + ty)]


def _line(indexes: Sequence[int], arcs: List[List[List[float]]]) -> List[List[float]]:
    coords: List[List[float]] = []
    for i in indexes:
        points = arcs[i] if i >= 0 else list(reversed(arcs[~i]))
        if coords:
            coords.pop()
        coords.extend(list(p) for p in points)
    return coords


def _ring(indexes: Sequence[int], arcs: List[List[List[float]]]) -> List[List[float]]:
    coords = _line(indexes, arcs)
    # Pad degenerate rings so they stay closed.
    while coords and len(coords) < 4:
        coords.append(list(coords[0]))
    return coords


def _geometry(geom: dict, arcs, t) -> Optional[dict]:
    gtype = geom.get("type")
    if gtype is None:
        return None
    if gtype == "GeometryCollection":
        return {
            "type": gtype,
            "geometries": [
                g for g in (_geometry(child, arcs, t) for child in geom.get("geometries", []))
                if g is not None
            ],
        }
    if gtype == "Point":
        return {"type": gtype, "coordinates": _position(geom["coordinates"], t)}
    if gtype == "MultiPoint":
        return {"type": gtype, "coordinates": [_position(p, t) for p in geom["coordinates"]]}
    if gtype == "LineString":
        return {"type": gtype, "coordinates": _line(geom["arcs"], arcs)}
    if gtype == "MultiLineString":
        return {"type": gtype, "coordinates": [_line(a, arcs) for a in geom["arcs"]]}
    if gtype == "Polygon":
        return {"type": gtype, "coordinates": [_ring(r, arcs) for r in geom["arcs"]]}
    if gtype == "MultiPolygon":
        return {
            "type": gtype,
            "coordinates": [[_ring(r, arcs) for r in poly] for poly in geom["arcs"]],
        }
    raise ValueError(f"Unsupported geometry type: {gtype}")


def _collection(topology: Any, name: str) -> List[dict]:
    if not isinstance(topology, dict):
        raise MalformedInputError("Topology must be a JSON object")
    objects = topology.get("objects")
    if not isinstance(objects, dict):
        raise MalformedInputError("Topology has no 'objects' member")
    if name not in objects:
        raise MalformedInputError(
            f"Topology has no '{name}' collection (available: {sorted(objects)})"
        )
    geometries = objects[name].get("geometries") if isinstance(objects[name], dict) else None
    if not isinstance(geometries, list):
        raise MalformedInputError(f"Topology collection '{name}' has no geometries")
    return geometries


def object_features(topology: dict, name: str = "countries") -> List[dict]:
    """Decode one named object collection into GeoJSON-style features.

    A geometry whose arcs cannot be decoded keeps its properties and gets
    geometry None; the failure is logged, not raised.

    Args:
        topology: Parsed TopoJSON document
        name: Key under topology["objects"]

    Returns:
        List of {"type": "Feature", "id", "properties", "geometry"[, "bbox"]}

    Raises:
        MalformedInputError: If the document or the collection is missing
    """
    geometries = _collection(topology, name)
    try:
        arcs = decode_arcs(topology)
        t = _transformer(topology.get("transform"))
    except (KeyError, TypeError, ValueError) as e:
        raise MalformedInputError(f"Topology arcs or transform are malformed: {e}") from e

    features = []
    for geom in geometries:
        geom = geom if isinstance(geom, dict) else {}
        try:
            geometry = _geometry(geom, arcs, t)
        except (IndexError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Could not decode geometry {geom.get('id')!r}: {e}")
            geometry = None

        feature = {
            "type": "Feature",
            "id": geom.get("id"),
            "properties": dict(geom.get("properties") or {}),
            "geometry": geometry,
        }
        if "bbox" in geom:
            feature["bbox"] = geom["bbox"]
        features.append(feature)
    return features


__all__ = [
    "decode_arcs",
    "object_features",
]
