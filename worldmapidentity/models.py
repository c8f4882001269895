"""Record types shared by the extractor, the adapters and the reconciler.

All three are frozen dataclasses: each load produces fresh lists and nothing
is mutated field by field afterwards.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Iterable, Mapping, Optional, Tuple

import pandas as pd

DEFAULT_COLOR = "#10b981"

Point = Tuple[float, float]


@dataclass(frozen=True)
class ShapeRecord:
    """One polygon or multipolygon from the topology source."""

    display_name: str
    iso_code: Optional[str] = None
    representative_point: Optional[Point] = None  # (longitude, latitude)
    raw_metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        return {
            "display_name": self.display_name,
            "iso_code": self.iso_code,
            "representative_point": self.representative_point,
            "raw_metadata": dict(self.raw_metadata),
        }


@dataclass(frozen=True)
class AnnotationRecord:
    """One user-supplied country row."""

    name: str
    description: str
    code: Optional[str] = None
    color: str = DEFAULT_COLOR
    group: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class CanonicalCountry:
    """Render-ready country: annotation content plus shape coordinates."""

    code: str
    name: str
    color: str = DEFAULT_COLOR
    description: str = ""
    coordinates: Optional[Point] = None  # (longitude, latitude)
    group: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)

    def to_annotation(self) -> AnnotationRecord:
        """Annotation carrying the same content, for re-reconciliation."""
        return AnnotationRecord(
            name=self.name,
            description=self.description,
            code=self.code,
            color=self.color,
            group=self.group,
        )


def countries_frame(countries: Iterable[CanonicalCountry]) -> pd.DataFrame:
    """Tabulate canonical countries, one row each, split into lon/lat columns.

    Examples:
        >>> df = countries_frame([CanonicalCountry(code="FRA", name="France", coordinates=(2.5, 46.6))])
        >>> df[["code", "lon", "lat"]].values.tolist()
        [['FRA', 2.5, 46.6]]
    """
    rows = []
    for c in countries:
        lon, lat = c.coordinates if c.coordinates is not None else (None, None)
        rows.append({
            "code": c.code,
            "name": c.name,
            "color": c.color,
            "description": c.description,
            "group": c.group,
            "lon": lon,
            "lat": lat,
        })
    return pd.DataFrame(
        rows,
        columns=["code", "name", "color", "description", "group", "lon", "lat"],
    )


__all__ = [
    "DEFAULT_COLOR",
    "Point",
    "ShapeRecord",
    "AnnotationRecord",
    "CanonicalCountry",
    "countries_frame",
]
