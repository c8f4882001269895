"""Map shape loading API.

Fetches a TopoJSON document over HTTP and extracts ShapeRecords from it.
"""

import logging
from typing import List

import requests

from worldmapidentity.errors import MalformedInputError, TransportError
from worldmapidentity.models import ShapeRecord
from worldmapidentity.shapes.shapeextract import extract

logger = logging.getLogger(__name__)

GEO_URL = "https://cdn.jsdelivr.net/npm/world-atlas@2/countries-50m.json"


def fetch_topology(url: str = GEO_URL, *, timeout: float = 30) -> dict:
    """Download and parse a TopoJSON document.

    Args:
        url: Topology URL
        timeout: Request timeout in seconds

    Returns:
        Parsed JSON document

    Raises:
        TransportError: On connection failure or non-success status
        MalformedInputError: If the body is not JSON
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else None
        raise TransportError(f"HTTP error {status} fetching {url}", url=url, status=status) from e
    except requests.exceptions.RequestException as e:
        raise TransportError(f"Request failed for {url}: {e}", url=url) from e

    try:
        return response.json()
    except ValueError as e:
        raise MalformedInputError(f"Topology at {url} is not valid JSON") from e


def load_shapes(
    url: str = GEO_URL,
    *,
    collection: str = "countries",
    timeout: float = 30,
) -> List[ShapeRecord]:
    """Fetch a topology and extract its country shapes.

    Examples:
        >>> shapes = load_shapes()
        >>> len(shapes)
        242
    """
    logger.info(f"Loading map shapes from {url}")
    topology = fetch_topology(url, timeout=timeout)
    return extract(topology, collection)


__all__ = [
    "GEO_URL",
    "fetch_topology",
    "load_shapes",
]
