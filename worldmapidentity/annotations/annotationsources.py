"""
Annotation Source Adapters
--------------------------

Three interchangeable transports for user-supplied country rows. Each
adapter is configured once and returns AnnotationRecords from fetch().

  ScriptEndpointSource  GET <url>                    -> {"countries": [{name, code?, description|remark}]}
  SheetsApiSource       GET .../values/<range>?key=  -> {"values": [[name, remark], ...]}
  PublicSheetSource     GET .../gviz/tq?tqx=out:csv  -> CSV, header row + Country/Region, Remark

Non-success status and connection failures raise TransportError; payloads
of the wrong shape raise MalformedInputError.
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Sequence

import requests

from worldmapidentity.annotations.annotationnormalize import build_annotation
from worldmapidentity.errors import MalformedInputError, TransportError
from worldmapidentity.models import AnnotationRecord
from worldmapidentity.tabular.tabularparse import parse

logger = logging.getLogger(__name__)

SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets/{sheet_id}/values/{range}"
PUBLIC_SHEET_URL = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq"


def _get(url: str, *, params: Optional[dict] = None, timeout: float = 30) -> requests.Response:
    try:
        response = requests.get(url, params=params, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise TransportError(f"HTTP error {status} fetching {url}", url=url, status=status) from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Request failed for {url}: {e}", url=url) from e
    return response


def _json(response: requests.Response, url: str) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise MalformedInputError(f"Response from {url} is not valid JSON") from e


def _cell(row: Sequence[Any], i: int) -> str:
    if i < len(row) and row[i] is not None:
        return str(row[i])
    return ""


def rows_to_annotations(rows: Iterable[Sequence[Any]]) -> List[AnnotationRecord]:
    """Column A = country name, column B = remark. Empty rows are dropped."""
    records = []
    for row in rows:
        if not isinstance(row, (list, tuple)):
            raise MalformedInputError(f"Expected a row of cells, got {type(row).__name__}")
        record = build_annotation(_cell(row, 0), _cell(row, 1))
        if record is not None:
            records.append(record)
    return records


class AnnotationSource(ABC):
    """One transport that yields annotation records."""

    kind: str = ""

    def __init__(self, *, timeout: float = 30):
        self.timeout = timeout

    @abstractmethod
    def fetch(self) -> List[AnnotationRecord]:
        """Fetch and normalize annotations; raises TransportError on failure."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class ScriptEndpointSource(AnnotationSource):
    """Scripted JSON endpoint returning a 'countries' array."""

    kind = "script"

    def __init__(self, url: str, *, timeout: float = 30):
        super().__init__(timeout=timeout)
        self.url = url

    def fetch(self) -> List[AnnotationRecord]:
        data = _json(_get(self.url, timeout=self.timeout), self.url)
        if not isinstance(data, dict):
            raise MalformedInputError(f"Response from {self.url} is not a JSON object")
        entries = data.get("countries") or []
        if not isinstance(entries, list):
            raise MalformedInputError(f"'countries' from {self.url} is not a list")

        records = []
        for entry in entries:
            if not isinstance(entry, dict):
                raise MalformedInputError(f"Country entry is not an object: {entry!r}")
            record = build_annotation(
                entry.get("name"),
                entry.get("description") or entry.get("remark"),
                code=entry.get("code"),
                color=entry.get("color"),
                group=entry.get("group"),
            )
            if record is not None:
                records.append(record)

        logger.info(f"Loaded {len(records)} annotations from script endpoint")
        return records

    def __repr__(self):
        return f"ScriptEndpointSource(url={self.url!r})"


class SheetsApiSource(AnnotationSource):
    """Key-value range API: {"values": [[name, remark], ...]}."""

    kind = "sheets_api"

    def __init__(
        self,
        sheet_id: str,
        api_key: str,
        *,
        sheet_name: str = "Sheet1",
        cell_range: Optional[str] = None,
        timeout: float = 30,
    ):
        super().__init__(timeout=timeout)
        self.sheet_id = sheet_id
        self.api_key = api_key
        self.cell_range = cell_range or f"{sheet_name}!A2:B"

    @property
    def url(self) -> str:
        return SHEETS_API_URL.format(sheet_id=self.sheet_id, range=self.cell_range)

    def fetch(self) -> List[AnnotationRecord]:
        url = self.url
        data = _json(_get(url, params={"key": self.api_key}, timeout=self.timeout), url)
        if not isinstance(data, dict):
            raise MalformedInputError(f"Response from {url} is not a JSON object")
        # The API omits "values" for an empty range.
        rows = data.get("values") or []
        if not isinstance(rows, list):
            raise MalformedInputError(f"'values' from {url} is not a list")

        records = rows_to_annotations(rows)
        logger.info(f"Loaded {len(records)} annotations from sheets API range {self.cell_range}")
        return records

    def __repr__(self):
        return f"SheetsApiSource(sheet_id={self.sheet_id!r}, cell_range={self.cell_range!r})"


class PublicSheetSource(AnnotationSource):
    """Publicly shared document exported as CSV; first row is the header."""

    kind = "public_sheet"

    def __init__(self, sheet_id: str, *, sheet_name: str = "Sheet1", timeout: float = 30):
        super().__init__(timeout=timeout)
        self.sheet_id = sheet_id
        self.sheet_name = sheet_name

    @property
    def url(self) -> str:
        return PUBLIC_SHEET_URL.format(sheet_id=self.sheet_id)

    def fetch(self) -> List[AnnotationRecord]:
        response = _get(
            self.url,
            params={"tqx": "out:csv", "sheet": self.sheet_name},
            timeout=self.timeout,
        )
        rows = parse(response.text)
        records = rows_to_annotations(rows[1:])
        logger.info(f"Loaded {len(records)} annotations from public sheet '{self.sheet_name}'")
        return records

    def __repr__(self):
        return f"PublicSheetSource(sheet_id={self.sheet_id!r}, sheet_name={self.sheet_name!r})"


__all__ = [
    "SHEETS_API_URL",
    "PUBLIC_SHEET_URL",
    "rows_to_annotations",
    "AnnotationSource",
    "ScriptEndpointSource",
    "SheetsApiSource",
    "PublicSheetSource",
]
