"""Country name and ISO code resolution.

Public API:
    resolve(name) -> str | None
        Free-text country name -> ISO 3166-1 alpha-3 code

    normalize_code(code) -> str | None
        Alpha-2 / alpha-3 / numeric code -> alpha-3 code

    match_country(name, k=5) -> list[dict]
        Top-K fuzzy candidates with scores (review only)

Examples:
    >>> from worldmapidentity.countries import resolve, normalize_code
    >>> resolve("Great Britain")
    'GBR'
    >>> normalize_code("TW")
    'TWN'
"""

from worldmapidentity.countries.countryidentity import (
    country_catalog,
    resolve,
    resolve_many,
    normalize_code,
    match_country,
)

__all__ = [
    "country_catalog",
    "resolve",
    "resolve_many",
    "normalize_code",
    "match_country",
]
