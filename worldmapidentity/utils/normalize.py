"""Shared text normalization utilities.

This module provides the key functions used to compare country labels
across the resolver, the shape indices and the reconciler.
"""

import re
import unicodedata


def normalize_quotes(s: str) -> str:
    """Normalize curly quotes and apostrophes to ASCII.

    Examples:
        >>> normalize_quotes("People’s Republic")
        "People's Republic"
    """
    s = s.replace("‘", "'").replace("’", "'")
    s = s.replace("“", '"').replace("”", '"')
    return s


def normalize_key(s: str) -> str:
    """Lookup key for a free-text country label.

    Transformations:
      1. Quote normalization
      2. Trim
      3. Lowercase
      4. Collapse internal whitespace

    Args:
        s: Raw label

    Returns:
        Key string ('' for empty input)

    Examples:
        >>> normalize_key("  United   States of America ")
        'united states of america'

        >>> normalize_key("Côte d'Ivoire")
        "côte d'ivoire"
    """
    if not s:
        return ""
    s = normalize_quotes(str(s))
    return re.sub(r"\s+", " ", s.strip().lower())


def squash_whitespace(s: str) -> str:
    """Remove all whitespace, for whitespace-insensitive comparison.

    Examples:
        >>> squash_whitespace("new zealand")
        'newzealand'
    """
    return re.sub(r"\s+", "", s or "")


def normalize_name(s: str, *, allowed_chars: str = r"a-z0-9\s\-'") -> str:
    """Aggressive normalization for fuzzy scoring.

    Transformations:
      1. Unicode normalization (NFKD) and ASCII transliteration
      2. Lowercase
      3. Remove punctuation (keep only allowed_chars)
      4. Collapse whitespace

    Args:
        s: Raw text to normalize
        allowed_chars: Regex character class for allowed characters

    Returns:
        Normalized string for matching

    Examples:
        >>> normalize_name("Côte d'Ivoire")
        "cote d'ivoire"

        >>> normalize_name("Korea, Rep.")
        'korea rep'
    """
    if not s:
        return ""

    s = normalize_quotes(s)
    s = unicodedata.normalize("NFKD", s)
    s = s.encode("ascii", "ignore").decode("ascii")
    s = s.lower()
    s = re.sub(rf"[^{allowed_chars}]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()

    return s


__all__ = [
    "normalize_quotes",
    "normalize_key",
    "squash_whitespace",
    "normalize_name",
]
