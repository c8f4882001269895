"""Map data loading API.

Runs one load cycle: fetch shapes, fetch annotations from the configured
source, reconcile, and fall back to the built-in list on any data error.
Nothing raised by a fetch escapes load_countries().
"""

import logging
import warnings
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional

from worldmapidentity.annotations.annotationsources import (
    AnnotationSource,
    PublicSheetSource,
    ScriptEndpointSource,
    SheetsApiSource,
)
from worldmapidentity.errors import EmptyResultFallback, WorldMapError
from worldmapidentity.loader.loaderconfig import MapConfig
from worldmapidentity.models import CanonicalCountry, ShapeRecord
from worldmapidentity.reconcile.reconcilegroups import (
    DEFAULT_ANCHORS,
    group_primaries,
    sidebar_countries,
)
from worldmapidentity.reconcile.reconcileidentity import reconcile
from worldmapidentity.shapes.shapeapi import load_shapes

logger = logging.getLogger(__name__)

SOURCE_DEFAULT = "default"


@dataclass(frozen=True)
class LoadResult:
    """Outcome of one load cycle.

    Attributes:
        countries: Render-ready list (live or default)
        source: Adapter kind that supplied the data, or "default"
        notice: One-line message for the UI when the default list was used
                because of a problem; None otherwise
        anchors: Group -> anchor code used to pick group primaries, e.g.
                 group_primaries(result.countries, result.anchors)
    """

    countries: List[CanonicalCountry]
    source: str
    notice: Optional[str] = None
    anchors: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_ANCHORS))

    @property
    def is_fallback(self) -> bool:
        return self.source == SOURCE_DEFAULT

    def primaries(self) -> Dict[str, CanonicalCountry]:
        """Group -> primary member, using this result's anchors."""
        return group_primaries(self.countries, self.anchors)

    def sidebar(self) -> List[CanonicalCountry]:
        """Sidebar entries, using this result's anchors."""
        return sidebar_countries(self.countries, self.anchors)


def select_source(config: MapConfig) -> Optional[AnnotationSource]:
    """Pick exactly one annotation source by precedence.

    Precedence: scripted endpoint > key-value API (sheet id + key) >
    public document (sheet id). None when disabled or nothing is configured.
    """
    if not config.enabled:
        return None
    if config.script_url:
        return ScriptEndpointSource(config.script_url, timeout=config.timeout)
    if config.sheet_id and config.api_key:
        return SheetsApiSource(
            config.sheet_id,
            config.api_key,
            sheet_name=config.sheet_name,
            timeout=config.timeout,
        )
    if config.sheet_id:
        return PublicSheetSource(config.sheet_id, sheet_name=config.sheet_name, timeout=config.timeout)
    return None


def _fallback(config: MapConfig, notice: Optional[str]) -> LoadResult:
    if notice:
        logger.warning(f"{notice}; using default countries")
    return LoadResult(
        countries=list(config.default_countries),
        source=SOURCE_DEFAULT,
        notice=notice,
        anchors=dict(config.anchors),
    )


def load_countries(
    config: Optional[MapConfig] = None,
    *,
    shapes_loader: Optional[Callable[[MapConfig], List[ShapeRecord]]] = None,
    source: Optional[AnnotationSource] = None,
) -> LoadResult:
    """Load, reconcile and return the countries to render.

    Args:
        config: Load configuration; MapConfig.from_env() when None
        shapes_loader: Replaces the HTTP topology fetch (tests, local files)
        source: Replaces select_source(config)

    Returns:
        LoadResult with live countries, or the default list plus a notice

    Examples:
        >>> result = load_countries(MapConfig.from_env())
        >>> result.source, len(result.countries)
        ('script', 12)
    """
    if config is None:
        config = MapConfig.from_env()
    logger.debug(f"Loading countries with config {config.describe()}")

    if source is None:
        source = select_source(config)
    if source is None:
        logger.info("No annotation source configured, using default countries")
        return _fallback(config, None)

    if shapes_loader is None:
        def shapes_loader(cfg: MapConfig) -> List[ShapeRecord]:
            return load_shapes(cfg.geo_url, collection=cfg.collection, timeout=cfg.timeout)

    try:
        shapes = shapes_loader(config)
        logger.info(f"Loaded {len(shapes)} map shapes")
        annotations = source.fetch()
    except WorldMapError as e:
        logger.error(f"Loading map data failed: {e}")
        return _fallback(config, "Failed to load data, showing default countries")

    if not annotations:
        warnings.warn("Annotation source returned no usable rows", EmptyResultFallback, stacklevel=2)
        return _fallback(config, "No countries with remarks found, showing default countries")

    countries = reconcile(shapes, annotations)
    if not countries:
        warnings.warn("No annotation matched a map shape", EmptyResultFallback, stacklevel=2)
        return _fallback(config, "Could not match any country, showing default countries")

    return LoadResult(countries=countries, source=source.kind, anchors=dict(config.anchors))


__all__ = [
    "SOURCE_DEFAULT",
    "LoadResult",
    "select_source",
    "load_countries",
]
