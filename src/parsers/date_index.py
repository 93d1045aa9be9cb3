"""Date index loading utilities."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import yaml


class DateIndexError(ValueError):
    """Raised when the date index cannot be read or is malformed."""


def normalize_date_key(key: object) -> str:
    """
    Normalize a date index key to an ISO 8601 string.

    YAML reads unquoted dates such as ``2024-01-05`` as ``date`` objects,
    so those are converted back to ``YYYY-MM-DD``.

    Args:
        key: Raw key from the parsed YAML mapping

    Returns:
        str: The date as a sortable string
    """
    if isinstance(key, datetime):
        return key.date().isoformat()
    if isinstance(key, date):
        return key.isoformat()
    return str(key).strip()


def parse_date_index(text: str, source: str = "<dates>") -> dict[str, str]:
    """Parse date index YAML text into a date-to-folder mapping.

    Args:
        text: YAML document text
        source: Name used to identify the document in errors

    Returns:
        Mapping of date string to comic folder name, sorted by date

    Raises:
        DateIndexError: If the YAML is invalid, not a mapping, or repeats a date
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DateIndexError(f"Invalid YAML in date index {source}: {e}") from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise DateIndexError(
            f"Date index {source} must be a mapping of date to comic folder, "
            + f"got {type(data).__name__}"
        )

    index: dict[str, str] = {}
    for key, value in data.items():
        if value is None or not str(value).strip():
            raise DateIndexError(f"Date {key} in {source} has no comic folder")
        date_key = normalize_date_key(key)
        if date_key in index:
            raise DateIndexError(f"Date {date_key} appears more than once in {source}")
        index[date_key] = str(value).strip()

    return dict(sorted(index.items()))


def load_date_index(dates_file: Path) -> dict[str, str]:
    """Load the date index from a YAML file.

    Args:
        dates_file: Path to the date index file

    Returns:
        Mapping of date string to comic folder name, sorted by date

    Raises:
        DateIndexError: If the file cannot be read or is malformed
    """
    try:
        text = dates_file.read_text(encoding="utf-8")
    except OSError as e:
        raise DateIndexError(f"Could not read date index {dates_file}: {e}") from e

    return parse_date_index(text, str(dates_file))
