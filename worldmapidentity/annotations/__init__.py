"""Annotation sources: user-supplied country rows from three transports.

Public API:
    ScriptEndpointSource(url).fetch() -> list[AnnotationRecord]
    SheetsApiSource(sheet_id, api_key).fetch() -> list[AnnotationRecord]
    PublicSheetSource(sheet_id).fetch() -> list[AnnotationRecord]

    build_annotation(name, description, code=None, ...) -> AnnotationRecord | None
        Shared row filtering and code inference
"""

from worldmapidentity.annotations.annotationnormalize import (
    placeholder_code,
    annotation_code,
    build_annotation,
)
from worldmapidentity.annotations.annotationsources import (
    AnnotationSource,
    ScriptEndpointSource,
    SheetsApiSource,
    PublicSheetSource,
    rows_to_annotations,
)

__all__ = [
    "placeholder_code",
    "annotation_code",
    "build_annotation",
    "AnnotationSource",
    "ScriptEndpointSource",
    "SheetsApiSource",
    "PublicSheetSource",
    "rows_to_annotations",
]
