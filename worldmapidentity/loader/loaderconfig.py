"""Loader configuration.

MapConfig holds everything one load needs: which annotation source to use,
where the topology lives, and the fallback list. from_env() reads the
WORLDMAP_* environment variables; keyword arguments override them.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Sequence

from worldmapidentity.loader.loaderdefaults import DEFAULT_COUNTRIES
from worldmapidentity.models import CanonicalCountry
from worldmapidentity.reconcile.reconcilegroups import DEFAULT_ANCHORS
from worldmapidentity.shapes.shapeapi import GEO_URL

ENV_PREFIX = "WORLDMAP_"


@dataclass(frozen=True)
class MapConfig:
    """Configuration for one map data load."""

    # Annotation source selection
    enabled: bool = False
    sheet_id: str = ""
    sheet_name: str = "Sheet1"
    script_url: str = ""
    api_key: str = ""

    # Shapes
    geo_url: str = GEO_URL
    collection: str = "countries"

    timeout: float = 30
    anchors: Mapping[str, str] = field(default_factory=lambda: dict(DEFAULT_ANCHORS))
    default_countries: Sequence[CanonicalCountry] = DEFAULT_COUNTRIES

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "MapConfig":
        """Build a config from WORLDMAP_* variables.

        Variables:
            WORLDMAP_ENABLE_SHEETS   "true" enables annotation sources
            WORLDMAP_SHEET_ID        document id
            WORLDMAP_SHEET_NAME      tab name (default Sheet1)
            WORLDMAP_SCRIPT_URL      scripted JSON endpoint
            WORLDMAP_SHEETS_API_KEY  key for the range API
            WORLDMAP_GEO_URL         topology URL

        Examples:
            >>> MapConfig.from_env({"WORLDMAP_ENABLE_SHEETS": "true", "WORLDMAP_SHEET_ID": "abc"}).sheet_id
            'abc'
        """
        env = os.environ if environ is None else environ

        def get(name: str, default: str = "") -> str:
            return (env.get(ENV_PREFIX + name) or default).strip()

        config = cls(
            enabled=get("ENABLE_SHEETS").lower() == "true",
            sheet_id=get("SHEET_ID"),
            sheet_name=get("SHEET_NAME", "Sheet1") or "Sheet1",
            script_url=get("SCRIPT_URL"),
            api_key=get("SHEETS_API_KEY"),
            geo_url=get("GEO_URL", GEO_URL) or GEO_URL,
        )
        return replace(config, **overrides) if overrides else config

    def describe(self) -> dict:
        """Loggable summary with the API key masked."""
        return {
            "enabled": self.enabled,
            "sheet_id": self.sheet_id,
            "sheet_name": self.sheet_name,
            "script_url": self.script_url,
            "api_key": "***" if self.api_key else "",
            "geo_url": self.geo_url,
        }


__all__ = [
    "ENV_PREFIX",
    "MapConfig",
]
