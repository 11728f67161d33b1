"""Helm Chart Updater.

Bumps Helm chart versions pinned in a charts.yaml manifest and opens a
pull request describing the bumps.
"""

__version__ = "0.1.0"
