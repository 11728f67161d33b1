"""
Manifest Store

Reads and writes the charts.yaml manifest. Loading is strict: every entry
must carry exactly the keys name, repo, url and version, all strings.
Writing keeps the manifest order and the canonical key order so the
resulting diff only touches bumped versions.
"""

import logging
from pathlib import Path
from typing import Any, List

import yaml

from .config import MANIFEST_FIELDS
from .exceptions import FormatError, ManifestIOError
from .models import ChartEntry
from .utils import log_multiline

logger = logging.getLogger(__name__)


def parse_charts(content: str) -> List[ChartEntry]:
    """Parse manifest text into chart entries.

    Args:
        content: YAML text of the manifest

    Returns:
        Chart entries in manifest order

    Raises:
        FormatError: If the text is not valid YAML or violates the schema
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid YAML in chart manifest: {e}") from e

    if data is None:
        return []

    if not isinstance(data, list):
        raise FormatError(
            f"Chart manifest must be a list of charts, got {type(data).__name__}"
        )

    return [_parse_entry(index, item) for index, item in enumerate(data)]


def _parse_entry(index: int, item: Any) -> ChartEntry:
    if not isinstance(item, dict):
        raise FormatError(f"Chart #{index} must be a mapping, got {type(item).__name__}")

    unknown = [str(key) for key in item if key not in MANIFEST_FIELDS]
    if unknown:
        raise FormatError(f"Chart #{index} has unknown fields: {', '.join(unknown)}")

    missing = [key for key in MANIFEST_FIELDS if key not in item]
    if missing:
        raise FormatError(f"Chart #{index} is missing fields: {', '.join(missing)}")

    for key in MANIFEST_FIELDS:
        if not isinstance(item[key], str):
            raise FormatError(
                f"Chart #{index} field '{key}' must be a string, "
                f"got {type(item[key]).__name__} ({item[key]!r})"
            )

    return ChartEntry(**{key: item[key] for key in MANIFEST_FIELDS})


def dump_charts(charts: List[ChartEntry]) -> str:
    """Serialize chart entries to manifest text."""
    return yaml.safe_dump(
        [chart.to_manifest() for chart in charts],
        default_flow_style=False,
        sort_keys=False,
    )


def load_charts(path: str) -> List[ChartEntry]:
    """Read and parse the manifest at ``path``.

    Raises:
        ManifestIOError: If the file cannot be read
        FormatError: If the content violates the schema
    """
    logger.info(f"Opening chart manifest {path}...")
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestIOError(f"Failed to read chart manifest {path}: {e}") from e

    log_multiline(content, logger)
    return parse_charts(content)


def save_charts(path: str, charts: List[ChartEntry]) -> str:
    """Write chart entries to ``path``.

    The previous content is logged before writing and the new content after.

    Returns:
        The written manifest text

    Raises:
        ManifestIOError: If the file cannot be read or written
    """
    file_path = Path(path)
    new_content = dump_charts(charts)

    try:
        if file_path.exists():
            logger.info(f"Previous chart configuration in {path}:")
            log_multiline(file_path.read_text(encoding="utf-8"), logger)
        file_path.write_text(new_content, encoding="utf-8")
    except OSError as e:
        raise ManifestIOError(f"Failed to write chart manifest {path}: {e}") from e

    logger.info(f"Written new chart version configuration to {path}:")
    log_multiline(new_content, logger)
    return new_content
