"""Reconciliation of map shapes with annotation rows.

Public API:
    reconcile(shapes, annotations) -> list[CanonicalCountry]
        Match annotations to shapes; unmatched rows are dropped with a warning

    country_for_shape(shape, countries) -> CanonicalCountry | None
        The country a map shape is highlighted as (never KOR for North Korea)

    group_primaries(countries, anchors=None) -> dict[str, CanonicalCountry]
        Primary member per group for labels and tooltips

    sidebar_countries(countries, anchors=None) -> list[CanonicalCountry]
        One entry per group primary plus all ungrouped countries
"""

from worldmapidentity.reconcile.reconcileidentity import (
    ShapeIndex,
    match_shape,
    reconcile,
    country_for_shape,
    load_exclusions,
)
from worldmapidentity.reconcile.reconcilegroups import (
    DEFAULT_ANCHORS,
    group_primaries,
    primary_for,
    display_name_for,
    sidebar_countries,
)

__all__ = [
    "ShapeIndex",
    "match_shape",
    "reconcile",
    "country_for_shape",
    "load_exclusions",
    "DEFAULT_ANCHORS",
    "group_primaries",
    "primary_for",
    "display_name_for",
    "sidebar_countries",
]
