"""
Shape / Annotation Reconciliation
---------------------------------

Matches each annotation to one map shape and emits a CanonicalCountry that
carries the annotation's content and the shape's coordinates.

Indices over shapes (insertion-ordered, one-to-many):
  - by normalized display name
  - by alpha-3 code (ISO variants such as 'KR' / '410' fold to 'KOR')

Per annotation, in input order, first success wins:
  1. Code match: same-code shapes; prefer an exact name match, else first
  2. Exact name match: first shape with the same normalized name
  3. Substring match: scan the name index in shape input order; match when
     either whitespace-free name contains the other
  4. No match: NoMatchWarning, annotation omitted

Exclusions (data/exclusions.yaml) are checked before accepting any
candidate: a 'KOR' annotation never lands on North Korea.

API:
  reconcile(shapes, annotations) -> list[CanonicalCountry]
  country_for_shape(shape, countries) -> CanonicalCountry | None
  ShapeIndex(shapes)
"""

from __future__ import annotations
import logging
import warnings
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from worldmapidentity.annotations.annotationnormalize import placeholder_code
from worldmapidentity.countries.countryidentity import normalize_code, resolve
from worldmapidentity.errors import NoMatchWarning
from worldmapidentity.models import AnnotationRecord, CanonicalCountry, ShapeRecord
from worldmapidentity.shapes.shapeextract import CODE_KEYS
from worldmapidentity.utils.dataloader import find_data_file, load_yaml_file
from worldmapidentity.utils.normalize import normalize_key, squash_whitespace

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def load_exclusions(path: Optional[str] = None) -> Dict[str, Tuple[str, ...]]:
    """Code -> normalized name fragments that must never match that code."""
    if path is None:
        found = find_data_file(__file__, ["exclusions.yaml", "exclusions.yml"])
        if found is None:
            return {}
        path = found
    data = load_yaml_file(Path(path))
    return {
        str(code).upper(): tuple(normalize_key(f) for f in fragments or [])
        for code, fragments in (data.get("exclusions") or {}).items()
    }


def _code_key(code: Optional[str]) -> Optional[str]:
    if code is None or not str(code).strip():
        return None
    return normalize_code(code) or str(code).strip().upper()


class ShapeIndex:
    """Name and code indices over one list of shapes."""

    def __init__(self, shapes: Iterable[ShapeRecord]):
        self.by_name: Dict[str, List[ShapeRecord]] = {}
        self.by_code: Dict[str, List[ShapeRecord]] = {}
        for shape in shapes:
            name_key = normalize_key(shape.display_name)
            if name_key:
                self.by_name.setdefault(name_key, []).append(shape)
            code_key = _code_key(shape.iso_code)
            if code_key:
                self.by_code.setdefault(code_key, []).append(shape)

    def closest_name(self, name_key: str) -> Optional[str]:
        """Nearest indexed name by WRatio, for diagnostics only."""
        if not self.by_name or not name_key:
            return None
        best = process.extractOne(name_key, list(self.by_name), scorer=fuzz.WRatio)
        return best[0] if best else None


def _is_excluded(shape: ShapeRecord, fragments: Sequence[str]) -> bool:
    if not fragments:
        return False
    name_key = normalize_key(shape.display_name)
    return any(f in name_key for f in fragments)


def _first_allowed(candidates: Sequence[ShapeRecord], fragments: Sequence[str]) -> Optional[ShapeRecord]:
    for shape in candidates:
        if not _is_excluded(shape, fragments):
            return shape
    return None


def match_shape(
    annotation: AnnotationRecord,
    index: ShapeIndex,
    exclusions: Mapping[str, Sequence[str]],
) -> Tuple[Optional[ShapeRecord], Optional[str]]:
    """Find the shape for one annotation.

    Returns:
        (shape, step) where step is 'code', 'name' or 'substring';
        (None, None) when nothing acceptable matched
    """
    name_key = normalize_key(annotation.name)
    code_key = _code_key(annotation.code)
    guard_code = code_key or resolve(annotation.name)
    fragments = exclusions.get(guard_code, ()) if guard_code else ()

    # 1. Code match, exact-name candidate first
    if code_key and code_key in index.by_code:
        candidates = index.by_code[code_key]
        same_name = [s for s in candidates if normalize_key(s.display_name) == name_key]
        shape = _first_allowed(same_name, fragments) or _first_allowed(candidates, fragments)
        if shape is not None:
            return shape, "code"

    # 2. Exact name match
    if name_key and name_key in index.by_name:
        shape = _first_allowed(index.by_name[name_key], fragments)
        if shape is not None:
            return shape, "name"

    # 3. Substring match, whitespace-insensitive, in shape input order
    squashed = squash_whitespace(name_key)
    if squashed:
        for map_name, candidates in index.by_name.items():
            map_squashed = squash_whitespace(map_name)
            if map_squashed in squashed or squashed in map_squashed:
                shape = _first_allowed(candidates, fragments)
                if shape is not None:
                    return shape, "substring"

    return None, None


def reconcile(
    shapes: Sequence[ShapeRecord],
    annotations: Sequence[AnnotationRecord],
) -> List[CanonicalCountry]:
    """Merge annotations with map shapes into canonical countries.

    Output order is annotation input order. Unmatched annotations are
    omitted with a NoMatchWarning; nothing is raised for well-typed input.

    Args:
        shapes: Records from the shape extractor
        annotations: Records from one annotation source

    Returns:
        One CanonicalCountry per matched annotation

    Examples:
        >>> shapes = [ShapeRecord("France", "FRA", (2.5, 46.6))]
        >>> [c.code for c in reconcile(shapes, [AnnotationRecord("France", "Bonjour")])]
        ['FRA']
    """
    index = ShapeIndex(shapes)
    exclusions = load_exclusions()

    countries: List[CanonicalCountry] = []
    for annotation in annotations:
        shape, step = match_shape(annotation, index, exclusions)

        if shape is None:
            hint = index.closest_name(normalize_key(annotation.name))
            message = f"Could not match country: {annotation.name} ({annotation.code})"
            if hint:
                message += f"; closest map name is '{hint}'"
            logger.warning(message)
            warnings.warn(message, NoMatchWarning, stacklevel=2)
            continue

        logger.debug(f"Matched {annotation.name!r} to shape {shape.display_name!r} by {step}")
        code = annotation.code or shape.iso_code or placeholder_code(annotation.name)
        countries.append(CanonicalCountry(
            code=code,
            name=annotation.name,
            color=annotation.color,
            description=annotation.description,
            coordinates=shape.representative_point,
            group=annotation.group,
        ))

    logger.info(f"Matched {len(countries)} of {len(annotations)} annotations to map shapes")
    return countries


def _shape_codes(shape: ShapeRecord) -> List[str]:
    codes = []
    for raw in [shape.iso_code, *(shape.raw_metadata.get(k) for k in CODE_KEYS)]:
        if raw is not None and str(raw).strip() == "-99":
            continue
        key = _code_key(raw)
        if key and key not in codes:
            codes.append(key)
    return codes


def country_for_shape(
    shape: ShapeRecord,
    countries: Sequence[CanonicalCountry],
) -> Optional[CanonicalCountry]:
    """The canonical country a map shape should be highlighted as, if any.

    Reverse direction of reconcile(): given one shape, find its country.
    Tried in order, first success wins:
      1. Any of the shape's ISO codes (iso_code and raw code properties,
         variants folded to alpha-3) equals a country's code
      2. The shape's name resolves to a country's code, or equals its name
      3. Whitespace-free shape and country names contain one another,
         scanning countries in list order

    A country is never returned for a shape whose name carries one of the
    country code's exclusion fragments, so a North Korea shape is never
    painted as KOR.

    Examples:
        >>> kor = CanonicalCountry(code="KOR", name="South Korea")
        >>> country_for_shape(ShapeRecord("North Korea", "PRK"), [kor]) is None
        True
    """
    exclusions = load_exclusions()
    name_key = normalize_key(shape.display_name)

    allowed = []
    for country in countries:
        code_key = _code_key(country.code)
        fragments = exclusions.get(code_key, ()) if code_key else ()
        if not _is_excluded(shape, fragments):
            allowed.append((code_key, country))

    # 1. Code match
    for shape_code in _shape_codes(shape):
        for code_key, country in allowed:
            if code_key == shape_code:
                return country

    # 2. Name match
    resolved = resolve(shape.display_name)
    for code_key, country in allowed:
        if (resolved and code_key == resolved) or normalize_key(country.name) == name_key:
            return country

    # 3. Substring match
    squashed = squash_whitespace(name_key)
    if squashed:
        for _, country in allowed:
            other = squash_whitespace(normalize_key(country.name))
            if other and (other in squashed or squashed in other):
                return country

    return None


__all__ = [
    "load_exclusions",
    "ShapeIndex",
    "match_shape",
    "reconcile",
    "country_for_shape",
]
