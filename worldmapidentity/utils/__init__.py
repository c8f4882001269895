"""Shared utilities for worldmapidentity package."""

from worldmapidentity.utils.dataloader import (
    find_data_file,
    load_yaml_file,
    format_not_found_error,
)
from worldmapidentity.utils.normalize import (
    normalize_quotes,
    normalize_key,
    squash_whitespace,
    normalize_name,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
    # Normalization
    "normalize_quotes",
    "normalize_key",
    "squash_whitespace",
    "normalize_name",
]
