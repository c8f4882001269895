"""Group identity for rendering.

Countries sharing a `group` value are drawn and tooltipped as one entity.
Exactly one member per group is the primary: the member whose code is the
group's anchor code, else the first member in list order.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from worldmapidentity.models import CanonicalCountry

DEFAULT_ANCHORS: Mapping[str, str] = {"china": "CHN"}


def group_primaries(
    countries: Iterable[CanonicalCountry],
    anchors: Optional[Mapping[str, str]] = None,
) -> Dict[str, CanonicalCountry]:
    """Map each group value to its primary member.

    Examples:
        >>> cn = CanonicalCountry(code="CHN", name="China", group="china")
        >>> tw = CanonicalCountry(code="TWN", name="Taiwan", group="china")
        >>> group_primaries([tw, cn])["china"].code
        'CHN'
    """
    anchors = DEFAULT_ANCHORS if anchors is None else anchors
    primaries: Dict[str, CanonicalCountry] = {}
    for country in countries:
        group = country.group
        if not group:
            continue
        anchor = anchors.get(group)
        current = primaries.get(group)
        if current is None:
            primaries[group] = country
        elif anchor and country.code == anchor and current.code != anchor:
            primaries[group] = country
    return primaries


def primary_for(
    country: CanonicalCountry,
    countries: Sequence[CanonicalCountry],
    anchors: Optional[Mapping[str, str]] = None,
) -> CanonicalCountry:
    """The primary member of country's group (country itself when ungrouped)."""
    if not country.group:
        return country
    return group_primaries(countries, anchors).get(country.group, country)


def display_name_for(
    country: CanonicalCountry,
    countries: Sequence[CanonicalCountry],
    anchors: Optional[Mapping[str, str]] = None,
) -> str:
    """Tooltip label: grouped members show their primary's name."""
    return primary_for(country, countries, anchors).name


def sidebar_countries(
    countries: Sequence[CanonicalCountry],
    anchors: Optional[Mapping[str, str]] = None,
) -> List[CanonicalCountry]:
    """One entry per group (its primary) plus every ungrouped country.

    Entries are de-duplicated by code and sorted by name.
    """
    entries: List[CanonicalCountry] = []
    seen = set()
    for primary in group_primaries(countries, anchors).values():
        if primary.code not in seen:
            entries.append(primary)
            seen.add(primary.code)
    for country in countries:
        if not country.group and country.code not in seen:
            entries.append(country)
            seen.add(country.code)
    return sorted(entries, key=lambda c: c.name.lower())


__all__ = [
    "DEFAULT_ANCHORS",
    "group_primaries",
    "primary_for",
    "display_name_for",
    "sidebar_countries",
]
