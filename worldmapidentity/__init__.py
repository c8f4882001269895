"""World Map Identity - country reconciliation for annotated world maps

Public API for turning map shapes and spreadsheet rows into one canonical,
coordinate-bearing country list.

Usage:
    from worldmapidentity import load_countries, MapConfig
    from worldmapidentity import extract, reconcile, resolve, parse

    # One full load cycle (never raises on data errors)
    result = load_countries(MapConfig.from_env())
    result.countries  # list[CanonicalCountry]

    # Or step by step
    shapes = extract(topology)                       # list[ShapeRecord]
    rows = parse(csv_text)                           # list[list[str]]
    code = resolve("Republic of Korea")              # 'KOR'
    countries = reconcile(shapes, annotations)       # list[CanonicalCountry]
"""

__version__ = "0.1.0"

# ============================================================================
# Records and errors
# ============================================================================

from .models import (
    DEFAULT_COLOR,
    ShapeRecord,
    AnnotationRecord,
    CanonicalCountry,
    countries_frame,
)
from .errors import (
    WorldMapError,
    TransportError,
    MalformedInputError,
    NoMatchWarning,
    EmptyResultFallback,
)

# ============================================================================
# Components
# ============================================================================

from .tabular.tabularparse import (
    parse,                 # Delimited text -> rows
    serialize,             # Rows -> delimited text
)
from .countries.countryidentity import (
    resolve,               # Country name -> alpha-3 code
    normalize_code,        # ISO code variant -> alpha-3 code
    match_country,         # Top-K fuzzy candidates
)
from .shapes.shapeextract import extract
from .shapes.shapeapi import load_shapes, fetch_topology
from .annotations.annotationsources import (
    AnnotationSource,
    ScriptEndpointSource,
    SheetsApiSource,
    PublicSheetSource,
)
from .reconcile.reconcileidentity import reconcile, country_for_shape
from .reconcile.reconcilegroups import (
    group_primaries,
    sidebar_countries,
)

# ============================================================================
# Orchestration
# ============================================================================

from .loader.loaderapi import LoadResult, select_source, load_countries
from .loader.loaderconfig import MapConfig
from .loader.loaderdefaults import DEFAULT_COUNTRIES

__all__ = [
    "__version__",

    # Primary APIs
    "load_countries",
    "reconcile",
    "extract",
    "resolve",
    "parse",

    # Records
    "DEFAULT_COLOR",
    "ShapeRecord",
    "AnnotationRecord",
    "CanonicalCountry",
    "countries_frame",

    # Errors
    "WorldMapError",
    "TransportError",
    "MalformedInputError",
    "NoMatchWarning",
    "EmptyResultFallback",

    # Components
    "serialize",
    "normalize_code",
    "match_country",
    "load_shapes",
    "fetch_topology",
    "AnnotationSource",
    "ScriptEndpointSource",
    "SheetsApiSource",
    "PublicSheetSource",
    "country_for_shape",
    "group_primaries",
    "sidebar_countries",

    # Orchestration
    "LoadResult",
    "select_source",
    "MapConfig",
    "DEFAULT_COUNTRIES",
]
