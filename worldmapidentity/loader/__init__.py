"""Load orchestration: configuration, source selection and fallback.

Public API:
    load_countries(config=None) -> LoadResult
        One load cycle; never raises on data errors

    select_source(config) -> AnnotationSource | None
        Scripted endpoint > range API > public document

    MapConfig.from_env()
        Configuration from WORLDMAP_* environment variables

    DEFAULT_COUNTRIES
        Built-in fallback list
"""

from worldmapidentity.loader.loaderapi import (
    SOURCE_DEFAULT,
    LoadResult,
    select_source,
    load_countries,
)
from worldmapidentity.loader.loaderconfig import (
    ENV_PREFIX,
    MapConfig,
)
from worldmapidentity.loader.loaderdefaults import DEFAULT_COUNTRIES

__all__ = [
    "SOURCE_DEFAULT",
    "LoadResult",
    "select_source",
    "load_countries",
    "ENV_PREFIX",
    "MapConfig",
    "DEFAULT_COUNTRIES",
]
