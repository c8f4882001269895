"""Delimited text reading and writing for spreadsheet exports."""

from worldmapidentity.tabular.tabularparse import (
    parse,
    serialize,
)

__all__ = [
    "parse",
    "serialize",
]
