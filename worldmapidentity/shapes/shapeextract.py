"""
Map Shape Extraction
--------------------

Flattens a TopoJSON country collection into ShapeRecords.

Per feature:
  - display_name: first non-empty of NAME_KEYS, else "Unknown"
  - iso_code: first present of CODE_KEYS, uppercased; Natural Earth's "-99"
    counts as absent; the feature id (ISO numeric in world-atlas) is the
    last resort and is converted to alpha-3
  - representative_point: area-weighted centroid (shapely), falling back to
    the bounding-box midpoint; absent when both fail. Features spanning more
    than 180 degrees of longitude are split at the antimeridian; their
    centroid is taken over [0, 360) longitudes and wrapped back.

Per-feature failures are logged as warnings and never raised.

API:
  extract(topology, collection="countries") -> list[ShapeRecord]
  representative_point(feature) -> (lon, lat) | None
"""

from __future__ import annotations
import logging
import math
from typing import Any, Iterable, List, Mapping, Optional, Sequence

try:
    from shapely.geometry import shape
    from shapely.errors import ShapelyError
except ImportError as e:
    raise ImportError("shapely not installed. pip install shapely") from e

from worldmapidentity.countries.countryidentity import normalize_code
from worldmapidentity.models import Point, ShapeRecord
from worldmapidentity.shapes.shapetopology import object_features

logger = logging.getLogger(__name__)

# Ordered property keys; first non-empty value wins.
NAME_KEYS: Sequence[str] = ("name", "NAME", "NAME_LONG", "ADMIN")
CODE_KEYS: Sequence[str] = ("ISO_A3", "ISO_A3_EH", "ADM0_A3", "ISO_A2")

UNKNOWN_NAME = "Unknown"


def first_present(props: Mapping[str, Any], keys: Iterable[str]) -> Optional[str]:
    """First non-empty value among keys, as a stripped string.

    Examples:
        >>> first_present({"NAME": "", "ADMIN": "France"}, ["name", "NAME", "ADMIN"])
        'France'
    """
    for key in keys:
        value = props.get(key)
        if value is None:
            continue
        s = str(value).strip()
        if s:
            return s
    return None


def _shape_code(props: Mapping[str, Any], feature_id: Any) -> Optional[str]:
    for key in CODE_KEYS:
        raw = props.get(key)
        if raw is None or not str(raw).strip():
            continue
        code = str(raw).strip().upper()
        if code == "-99":
            continue
        # Prefer alpha-3 for ISO_A2 and similar variants.
        return normalize_code(code) or code
    if feature_id is not None:
        return normalize_code(feature_id)
    return None


def _positions(coords) -> Iterable[Sequence[float]]:
    if not coords:
        return
    if isinstance(coords[0], (int, float)):
        yield coords
        return
    for c in coords:
        yield from _positions(c)


def _geometry_positions(geometry: Optional[dict]) -> Iterable[Sequence[float]]:
    if not geometry:
        return
    if geometry.get("type") == "GeometryCollection":
        for g in geometry.get("geometries", []):
            yield from _geometry_positions(g)
        return
    yield from _positions(geometry.get("coordinates"))


def _bbox_midpoint(feature: Mapping[str, Any]) -> Optional[Point]:
    bbox = feature.get("bbox")
    if bbox and len(bbox) >= 4:
        return ((bbox[0] + bbox[2]) / 2, (bbox[1] + bbox[3]) / 2)

    xs, ys = [], []
    for p in _geometry_positions(feature.get("geometry")):
        xs.append(p[0])
        ys.append(p[1])
    if not xs:
        return None
    return ((min(xs) + max(xs)) / 2, (min(ys) + max(ys)) / 2)


def _shift_east(coords):
    if coords and isinstance(coords[0], (int, float)):
        lon = coords[0]
        return [lon + 360 if lon < 0 else lon, *coords[1:]]
    return [_shift_east(c) for c in coords or []]


def _unwrap(geometry: dict) -> dict:
    """Move western-hemisphere positions to [180, 360) so that parts split
    at the antimeridian sit next to each other."""
    if geometry.get("type") == "GeometryCollection":
        return {**geometry, "geometries": [_unwrap(g) for g in geometry.get("geometries", [])]}
    return {**geometry, "coordinates": _shift_east(geometry.get("coordinates"))}


def _crosses_antimeridian(geometry: dict) -> bool:
    lons = [p[0] for p in _geometry_positions(geometry)]
    return bool(lons) and max(lons) - min(lons) > 180


def _centroid(geometry: Optional[dict]) -> Point:
    if not geometry:
        raise ValueError("feature has no geometry")
    if _crosses_antimeridian(geometry):
        geometry = _unwrap(geometry)
    c = shape(geometry).centroid
    if c.is_empty or math.isnan(c.x) or math.isnan(c.y):
        raise ValueError("centroid is empty")
    lon = c.x - 360 if c.x > 180 else c.x
    return (lon, c.y)


def representative_point(feature: Mapping[str, Any], label: str = "") -> Optional[Point]:
    """Centroid of a GeoJSON-style feature, bbox midpoint as fallback.

    Returns:
        (longitude, latitude), or None when neither can be computed
    """
    try:
        return _centroid(feature.get("geometry"))
    except (ShapelyError, ValueError, TypeError, AttributeError, IndexError, KeyError) as e:
        logger.warning(f"Could not compute centroid for {label or feature.get('id')!r}: {e}")

    try:
        point = _bbox_midpoint(feature)
    except (TypeError, IndexError) as e:
        logger.warning(f"Could not compute bounding box for {label or feature.get('id')!r}: {e}")
        return None
    if point is None:
        logger.warning(f"No coordinates for {label or feature.get('id')!r}")
    return point


def shape_record(feature: Mapping[str, Any]) -> ShapeRecord:
    """Build one ShapeRecord from a decoded feature."""
    props = feature.get("properties") or {}
    name = first_present(props, NAME_KEYS) or UNKNOWN_NAME
    return ShapeRecord(
        display_name=name,
        iso_code=_shape_code(props, feature.get("id")),
        representative_point=representative_point(feature, name),
        raw_metadata=dict(props),
    )


def extract(topology: dict, collection: str = "countries") -> List[ShapeRecord]:
    """Extract one ShapeRecord per geometry of a TopoJSON collection.

    Args:
        topology: Parsed TopoJSON document
        collection: Object collection holding the country geometries

    Returns:
        ShapeRecords in input order

    Raises:
        MalformedInputError: If the collection is missing

    Examples:
        >>> shapes = extract(world_atlas_topology)
        >>> shapes[0].display_name, shapes[0].iso_code
        ('Zimbabwe', 'ZWE')
    """
    features = object_features(topology, collection)
    records = [shape_record(f) for f in features]
    missing = sum(1 for r in records if r.representative_point is None)
    logger.info(
        f"Extracted {len(records)} shapes from '{collection}' ({missing} without coordinates)"
    )
    return records


__all__ = [
    "NAME_KEYS",
    "CODE_KEYS",
    "first_present",
    "representative_point",
    "shape_record",
    "extract",
]
