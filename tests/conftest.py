"""Test fixtures for Helm Chart Updater.

This module provides shared fixtures used across multiple test modules.
It sets up common test data structures and fake collaborators that simulate
the environment needed for testing.

Fixtures:
    sample_charts_yaml: Creates a temporary charts.yaml manifest
    fake_repository: Creates an in-memory source of chart versions
"""

import pytest
import yaml

from helm_chart_updater.models import SearchResult

SAMPLE_CHARTS = [
    {
        "name": "nginx",
        "repo": "bitnami",
        "url": "https://charts.bitnami.com/bitnami",
        "version": "15.0.0",
    },
    {
        "name": "cert-manager",
        "repo": "jetstack",
        "url": "https://charts.jetstack.io",
        "version": "v1.13.0",
    },
]


def search_output(chart: str, versions) -> bytes:
    """Build ``helm search repo -o yaml`` output for one chart."""
    return yaml.safe_dump(
        [
            {"name": chart, "version": version, "app_version": "", "description": ""}
            for version in versions
        ],
        sort_keys=False,
    ).encode("utf-8")


class FakeRepository:
    """In-memory replacement for HelmClient.

    Args:
        versions: Mapping of chart name to the versions the repository lists,
            newest first
    """

    def __init__(self, versions):
        self.versions = versions
        self.calls = []

    def refresh_repository(self, chart):
        self.calls.append(("refresh", chart.name))

    def search_versions(self, chart):
        self.calls.append(("search", chart.name))
        return [
            SearchResult(name=f"{chart.repo}/{chart.name}", version=version)
            for version in self.versions.get(chart.name, [])
        ]


@pytest.fixture
def sample_charts_yaml(tmp_path):
    """Creates a temporary charts.yaml manifest for testing.

    tmp_path/
    └── charts.yaml

    Args:
        tmp_path (Path): Built-in pytest fixture providing a temporary directory path

    Returns:
        dict: A dictionary containing:
            - working_dir (Path): Directory holding the manifest
            - chart_file (Path): Path to charts.yaml
            - initial_data (list): The initial manifest content
    """
    chart_file = tmp_path / "charts.yaml"
    with chart_file.open("w", encoding="utf-8") as f:
        yaml.safe_dump(SAMPLE_CHARTS, f, sort_keys=False)

    return {
        "working_dir": tmp_path,
        "chart_file": chart_file,
        "initial_data": SAMPLE_CHARTS,
    }


@pytest.fixture
def fake_repository():
    """Returns a factory building a FakeRepository from a version mapping."""
    return FakeRepository
