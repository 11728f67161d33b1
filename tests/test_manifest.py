"""Tests for loading and saving the chart manifest."""

import logging

import pytest
import yaml

from helm_chart_updater.exceptions import FormatError, ManifestIOError
from helm_chart_updater.manifest import dump_charts, load_charts, parse_charts, save_charts
from helm_chart_updater.models import ChartEntry


def test_load_charts(sample_charts_yaml):
    """Entries are loaded in manifest order."""
    charts = load_charts(str(sample_charts_yaml["chart_file"]))

    assert [chart.name for chart in charts] == ["nginx", "cert-manager"]
    assert charts[0] == ChartEntry(
        name="nginx",
        repo="bitnami",
        url="https://charts.bitnami.com/bitnami",
        version="15.0.0",
    )
    assert charts[1].version == "v1.13.0"
    assert all(chart.previous_version is None for chart in charts)


def test_load_charts_logs_content(sample_charts_yaml, caplog):
    """The manifest is logged line by line when opened."""
    caplog.set_level(logging.INFO)

    load_charts(str(sample_charts_yaml["chart_file"]))

    messages = [record.getMessage() for record in caplog.records]
    assert "- name: nginx" in messages
    assert "  version: 15.0.0" in messages


def test_load_missing_file(tmp_path):
    """A missing manifest raises ManifestIOError."""
    with pytest.raises(ManifestIOError):
        load_charts(str(tmp_path / "missing.yaml"))


def test_empty_manifest():
    """An empty manifest has no charts."""
    assert parse_charts("") == []


@pytest.mark.parametrize(
    "content, message",
    [
        ("name: nginx\n", "must be a list"),
        ("- just-a-string\n", "must be a mapping"),
        (
            "- name: a\n  repo: r\n  url: u\n  version: 1.0.0\n  extra: x\n",
            "unknown fields: extra",
        ),
        ("- name: a\n  repo: r\n  version: 1.0.0\n", "missing fields: url"),
        ("- name: a\n  repo: r\n  url: u\n  version: 1.10\n", "'version' must be a string"),
        ("- name: [a\n", "Invalid YAML"),
    ],
)
def test_strict_schema(content, message):
    """Schema violations raise FormatError instead of being coerced."""
    with pytest.raises(FormatError) as exc_info:
        parse_charts(content)

    assert message in str(exc_info.value)


def test_dump_uses_canonical_key_order():
    """Keys are written as name, repo, url, version."""
    chart = ChartEntry(
        name="nginx",
        repo="bitnami",
        url="https://charts.bitnami.com/bitnami",
        version="15.1.0",
        previous_version="15.0.0",
    )

    assert dump_charts([chart]) == (
        "- name: nginx\n"
        "  repo: bitnami\n"
        "  url: https://charts.bitnami.com/bitnami\n"
        "  version: 15.1.0\n"
    )


def test_dump_quotes_ambiguous_versions():
    """Versions that look like numbers stay strings after a round trip."""
    chart = ChartEntry(name="a", repo="r", url="u", version="1.10")

    assert parse_charts(dump_charts([chart]))[0].version == "1.10"


def test_round_trip_preserves_entries(sample_charts_yaml):
    """Saving loaded entries keeps every field value."""
    path = str(sample_charts_yaml["chart_file"])
    charts = load_charts(path)

    save_charts(path, charts)

    assert load_charts(path) == charts
    with open(path, encoding="utf-8") as f:
        assert yaml.safe_load(f) == sample_charts_yaml["initial_data"]


def test_save_logs_previous_and_new_content(sample_charts_yaml, caplog):
    """Both the old and the new manifest end up in the log."""
    path = str(sample_charts_yaml["chart_file"])
    charts = load_charts(path)
    charts[0] = ChartEntry(
        name="nginx",
        repo="bitnami",
        url="https://charts.bitnami.com/bitnami",
        version="15.1.0",
        previous_version="15.0.0",
    )
    caplog.set_level(logging.INFO)

    written = save_charts(path, charts)

    messages = [record.getMessage() for record in caplog.records]
    assert "  version: 15.0.0" in messages
    assert "  version: 15.1.0" in messages
    assert messages.index("  version: 15.0.0") < messages.index("  version: 15.1.0")
    assert "previous_version" not in written
    assert load_charts(path)[0].version == "15.1.0"
