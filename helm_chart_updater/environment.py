"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.
"""

import os
from dataclasses import dataclass
from typing import List, Mapping

from .config import DEFAULT_BASE_BRANCH, DEFAULT_CHART_FILE, DEFAULT_WORKING_DIRECTORY


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    working_directory: str = DEFAULT_WORKING_DIRECTORY
    chart_file: str = DEFAULT_CHART_FILE
    no_write: bool = False
    no_pr: bool = False
    github_token: str = ""
    github_repository: str = ""
    github_actor: str = ""
    base_branch: str = DEFAULT_BASE_BRANCH
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Empty values fall back to their defaults. The NO_WRITE and NO_PR
        flags are enabled by any non-empty value.

        Args:
            env: Mapping of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        return cls(
            working_directory=env.get("WORKING_DIRECTORY") or DEFAULT_WORKING_DIRECTORY,
            chart_file=env.get("CHART_FILE") or DEFAULT_CHART_FILE,
            no_write=bool(env.get("NO_WRITE")),
            no_pr=bool(env.get("NO_PR")),
            github_token=env.get("GITHUB_TOKEN", ""),
            github_repository=env.get("GITHUB_REPOSITORY", ""),
            github_actor=env.get("GITHUB_ACTOR", ""),
            base_branch=env.get("MAIN_BRANCH") or DEFAULT_BASE_BRANCH,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    @property
    def chart_path(self) -> str:
        """Full path of the chart manifest."""
        return os.path.join(self.working_directory, self.chart_file)

    def validate_pr_settings(self) -> List[str]:
        """Validate the settings needed to open a pull request.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not self.github_token:
            errors.append("No GitHub token (env GITHUB_TOKEN) provided")

        if not self.github_repository:
            errors.append("No GitHub repository (env GITHUB_REPOSITORY) provided")

        if not self.github_actor:
            errors.append("No GitHub actor (env GITHUB_ACTOR) provided")

        return errors
