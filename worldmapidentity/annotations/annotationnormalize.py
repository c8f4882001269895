"""Shared post-processing for annotation rows.

Every adapter funnels its raw rows through build_annotation() so that the
three transports produce identical records for identical content.
"""

from typing import Optional

from worldmapidentity.countries.countryidentity import resolve
from worldmapidentity.models import DEFAULT_COLOR, AnnotationRecord

PLACEHOLDER_FILL = "X"


def placeholder_code(name: str) -> str:
    """Synthetic 3-letter code from the first three characters of a name.

    Examples:
        >>> placeholder_code("Atlantis")
        'ATL'

        >>> placeholder_code("Yo")
        'YOX'
    """
    return name.strip()[:3].upper().ljust(3, PLACEHOLDER_FILL)


def clean_description(text) -> str:
    """Strip outer whitespace, keep internal newlines verbatim."""
    if text is None:
        return ""
    return str(text).strip()


def annotation_code(name: str, code: Optional[str] = None) -> str:
    """Explicit code, else the resolved code, else a placeholder.

    Examples:
        >>> annotation_code("Great Britain")
        'GBR'

        >>> annotation_code("Narnia")
        'NAR'
    """
    if code is not None and str(code).strip():
        return str(code).strip().upper()
    return resolve(name) or placeholder_code(name)


def build_annotation(
    name,
    description,
    *,
    code: Optional[str] = None,
    color: Optional[str] = None,
    group: Optional[str] = None,
) -> Optional[AnnotationRecord]:
    """Build one AnnotationRecord, or None if the row carries no information.

    Rows without a name or without a non-empty description are dropped.

    Examples:
        >>> build_annotation("France", "  Line1\\nLine2  ")
        AnnotationRecord(name='France', description='Line1\\nLine2', code='FRA', color='#10b981', group=None)

        >>> build_annotation("France", "   ") is None
        True
    """
    name = str(name).strip() if name is not None else ""
    description = clean_description(description)
    if not name or not description:
        return None

    return AnnotationRecord(
        name=name,
        description=description,
        code=annotation_code(name, code),
        color=str(color).strip() if color and str(color).strip() else DEFAULT_COLOR,
        group=str(group).strip() if group and str(group).strip() else None,
    )


__all__ = [
    "PLACEHOLDER_FILL",
    "placeholder_code",
    "clean_description",
    "annotation_code",
    "build_annotation",
]
