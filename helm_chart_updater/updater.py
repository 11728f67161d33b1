"""
Chart Update Pipeline

Checks every chart of the manifest against its upstream repository, one
chart at a time, and collects the charts that have a newer version.
"""

import logging
from dataclasses import replace
from typing import List, Protocol

from .exceptions import NoVersionsAvailableError
from .models import ChartEntry, SearchResult, UpdateResult
from .versions import is_less_than, parse_version

logger = logging.getLogger(__name__)


class ChartRepository(Protocol):
    """Source of chart versions, implemented by HelmClient."""

    def refresh_repository(self, chart: ChartEntry) -> None: ...

    def search_versions(self, chart: ChartEntry) -> List[SearchResult]: ...


def check_chart(chart: ChartEntry, repository: ChartRepository) -> ChartEntry:
    """Return ``chart`` bumped to the latest upstream version if it is newer.

    The input entry is never modified; a bumped copy carries the old
    version in ``previous_version``.

    Raises:
        NoVersionsAvailableError: If the repository lists no versions
        VersionParseError: If either version is not a semantic version
        ShellError: If a helm command fails
    """
    repository.refresh_repository(chart)
    results = repository.search_versions(chart)

    if not results:
        raise NoVersionsAvailableError(
            f"No versions of chart {chart.name} found in repository {chart.repo} ({chart.url})"
        )

    current = parse_version(chart.version)
    latest = parse_version(results[0].version)

    if is_less_than(current, latest):
        logger.info(f"Found newer version of {chart.name}: {latest}")
        return replace(chart, version=latest.original, previous_version=current.original)

    logger.info(f"Current version {current} of {chart.name} is the latest")
    return chart


def check_for_updates(charts: List[ChartEntry], repository: ChartRepository) -> UpdateResult:
    """Check all charts sequentially.

    Args:
        charts: Manifest entries in manifest order
        repository: Source of upstream versions

    Returns:
        UpdateResult with the full new chart list and the bumped charts
    """
    result = UpdateResult()

    for chart in charts:
        checked = check_chart(chart, repository)
        result.charts.append(checked)
        if checked.is_updated:
            result.updated.append(checked)

    return result
