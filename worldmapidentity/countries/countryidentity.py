"""
Country Name and Code Resolution
--------------------------------

Static lookup of free-text country names to ISO 3166-1 alpha-3 codes.

Catalog sources, later entries override earlier ones:
  1) pycountry names (name, official_name, common_name, "X, The" variants)
  2) data/aliases.yaml (colloquial and map-label names)

Each name is stored under its normalized key and under an ASCII-folded key,
so "Côte d'Ivoire" and "Cote d'Ivoire" resolve alike.

API:
  resolve(name) -> str | None
  resolve_many(names) -> list[str | None]
  normalize_code(code) -> str | None
  match_country(name, k=5) -> list[dict]
"""

from __future__ import annotations
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Optional

try:
    import pycountry
except ImportError as e:
    raise ImportError("pycountry not installed. pip install pycountry") from e

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from worldmapidentity.utils.dataloader import (
    find_data_file,
    format_not_found_error,
    load_yaml_file,
)
from worldmapidentity.utils.normalize import normalize_key, normalize_name

# Placeholder codes used by Natural Earth and spreadsheets for "no code".
_EMPTY_CODES = {"", "-99", "-1", "N/A", "NA", "NONE", "NULL"}

# User-assigned codes that are not in ISO 3166 but appear in map data.
_USER_ASSIGNED = {"XK": "XKX", "XKX": "XKX"}


def _keys(name: str) -> List[str]:
    key = normalize_key(name)
    folded = normalize_name(name)
    return [k for k in (key, folded) if k]


def _load_aliases(path: Optional[Path] = None) -> Dict[str, str]:
    if path is None:
        path = find_data_file(__file__, ["aliases.yaml", "aliases.yml"])
        if path is None:
            raise FileNotFoundError(format_not_found_error(
                "country alias",
                [("Module-local data", Path(__file__).parent / "data")],
                ["Restore worldmapidentity/countries/data/aliases.yaml"],
            ))
    data = load_yaml_file(Path(path))
    return {str(k): str(v).upper() for k, v in (data.get("aliases") or {}).items()}


@lru_cache(maxsize=1)
def country_catalog() -> Dict[str, str]:
    """Normalized name -> alpha-3 code, built once.

    Examples:
        >>> country_catalog()["great britain"]
        'GBR'
    """
    catalog: Dict[str, str] = {}

    def put(name: Optional[str], alpha3: str):
        if not name:
            return
        for key in _keys(name):
            catalog[key] = alpha3

    for c in pycountry.countries:
        alpha3 = getattr(c, "alpha_3", None)
        if not alpha3:
            continue
        name = getattr(c, "name", None)
        put(name, alpha3)
        put(getattr(c, "official_name", None), alpha3)
        put(getattr(c, "common_name", None), alpha3)
        if name and ", The" in name:
            put(name.replace(", The", ""), alpha3)

    for alias, alpha3 in _load_aliases().items():
        put(alias, alpha3)

    return catalog


def resolve(name: str) -> Optional[str]:
    """Resolve a free-text country name to an alpha-3 code.

    Args:
        name: Country label, any case or spacing

    Returns:
        Alpha-3 code, or None if no catalog entry matches

    Examples:
        >>> resolve("United States of America")
        'USA'

        >>> resolve("  great   britain ")
        'GBR'

        >>> resolve("Republic of Korea")
        'KOR'

        >>> resolve("Atlantis") is None
        True
    """
    if not name or not str(name).strip():
        return None

    catalog = country_catalog()
    for key in _keys(str(name)):
        code = catalog.get(key)
        if code:
            return code
    return None


def resolve_many(names: Iterable[str]) -> List[Optional[str]]:
    """Vectorized convenience wrapper."""
    return [resolve(n) for n in names]


def normalize_code(code) -> Optional[str]:
    """Bring an ISO code variant to alpha-3.

    Accepts alpha-2 ('KR'), alpha-3 ('kor') and numeric ('410', 410, '4')
    codes. Placeholders such as '-99' give None. Three-letter codes unknown
    to ISO (user-assigned map codes like 'KOS') are returned uppercased.

    Examples:
        >>> normalize_code("KR")
        'KOR'

        >>> normalize_code("156")
        'CHN'

        >>> normalize_code("-99") is None
        True
    """
    if code is None:
        return None
    s = str(code).strip().upper()
    if s in _EMPTY_CODES:
        return None
    if s in _USER_ASSIGNED:
        return _USER_ASSIGNED[s]

    if s.isdigit():
        c = pycountry.countries.get(numeric=s.zfill(3))
        return c.alpha_3 if c else None
    if len(s) == 2 and s.isalpha():
        c = pycountry.countries.get(alpha_2=s)
        return c.alpha_3 if c else None
    if len(s) == 3 and s.isalpha():
        c = pycountry.countries.get(alpha_3=s)
        return c.alpha_3 if c else s
    return None


def match_country(name: str, k: int = 5) -> List[dict]:
    """Top-K catalog candidates with RapidFuzz WRatio scores.

    One entry per code, best-scoring name kept. Useful for review output
    and for hints on unmatched rows; resolve() never uses it.

    Examples:
        >>> match_country("Untied States", k=1)[0]["code"]
        'USA'
    """
    query = normalize_name(name or "")
    if not query:
        return []

    catalog = country_catalog()
    names = list(catalog.keys())
    results = process.extract(query, names, scorer=fuzz.WRatio, limit=None)

    out: List[dict] = []
    seen = set()
    for matched, score, _ in results:
        code = catalog[matched]
        if code in seen:
            continue
        seen.add(code)
        out.append({"code": code, "name": matched, "score": float(score)})
        if len(out) >= k:
            break
    return out


__all__ = [
    "country_catalog",
    "resolve",
    "resolve_many",
    "normalize_code",
    "match_country",
]
