"""Shared data loading utilities.

Static tables (country aliases, exclusions) ship as YAML next to the module
that uses them. This module finds and parses them.
"""

from pathlib import Path
from typing import List, Optional, Tuple


def find_data_file(module_file: str, filenames: List[str]) -> Optional[Path]:
    """Find a data file in the calling module's data/ directory.

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames, tried in order

    Returns:
        Path to the first file found, or None

    Examples:
        >>> path = find_data_file(__file__, ["aliases.yaml"])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p
    return None


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def format_not_found_error(
    what: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        what: Name of the missing data (e.g., 'country alias')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {what} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_yaml_file",
    "format_not_found_error",
]
