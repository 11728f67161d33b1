"""
Helm Repository Client

Registers chart repositories and lists the versions they publish. All
commands go through the ShellExecutor so tests can substitute a fake one.
"""

import logging
from typing import List, Optional

import yaml

from .exceptions import FormatError
from .models import ChartEntry, SearchResult
from .shell import ShellExecutor

logger = logging.getLogger(__name__)


class HelmClient:
    """Thin wrapper around the helm CLI."""

    def __init__(self, executor: Optional[ShellExecutor] = None, helm_binary: str = "helm"):
        self.executor = executor or ShellExecutor()
        self.helm_binary = helm_binary

    def refresh_repository(self, chart: ChartEntry) -> None:
        """Add the chart's repository (idempotently) and update its index."""
        logger.info(f"Getting {chart.name} Helm repository from {chart.url}")
        self.executor.run(
            [self.helm_binary, "repo", "add", chart.repo, chart.url, "--force-update"]
        )
        self.executor.run([self.helm_binary, "repo", "update", chart.repo])

    def search_versions(self, chart: ChartEntry) -> List[SearchResult]:
        """List the versions published for exactly this chart, newest first."""
        logger.info(f"Pulling {chart.name} versions")
        output = self.executor.run(
            [
                self.helm_binary,
                "search",
                "repo",
                f"{chart.repo}/{chart.name}",
                "--versions",
                "--output",
                "yaml",
            ]
        )
        results = parse_search_output(output)
        full_name = f"{chart.repo}/{chart.name}"
        return [result for result in results if result.name == full_name]


def parse_search_output(output: bytes) -> List[SearchResult]:
    """Parse ``helm search repo -o yaml`` output.

    Raises:
        FormatError: If the output is not a YAML list of search results
    """
    try:
        data = yaml.safe_load(output)
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid helm search output: {e}") from e

    if data is None:
        return []
    if not isinstance(data, list):
        raise FormatError(f"Helm search output must be a list, got {type(data).__name__}")

    results = []
    for item in data:
        if not isinstance(item, dict) or "name" not in item or "version" not in item:
            raise FormatError(f"Unexpected helm search result: {item!r}")
        results.append(
            SearchResult(
                name=str(item["name"]),
                version=str(item["version"]),
                app_version=str(item.get("app_version") or ""),
                description=str(item.get("description") or ""),
            )
        )
    return results
