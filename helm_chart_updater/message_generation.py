"""
Message Generation Module

Pure functions for generating branch names, PR titles, and PR bodies.
This module contains no side effects - only text formatting logic.
"""

from typing import List, Optional

from .config import (
    BRANCH_PREFIX,
    BRANCH_SUFFIX_LENGTH,
    COMMIT_MESSAGE,
    DEFAULT_BASE_BRANCH,
    PR_BODY_HEADER,
    PR_LABELS,
)
from .models import ChartEntry, PullRequestPlan
from .utils import random_suffix


def generate_branch_name(suffix: Optional[str] = None) -> str:
    """Generate a branch name unique to this run."""
    return f"{BRANCH_PREFIX}{suffix or random_suffix(BRANCH_SUFFIX_LENGTH)}"


def generate_pr_title(charts: List[ChartEntry]) -> str:
    """
    Generate the PR title listing every bump.

    Example:
        Bump a from 1.0.0 to 1.1.0, b from 2.0.0 to 2.1.0
    """
    bumps = ", ".join(
        f"{chart.name} from {chart.previous_version} to {chart.version}"
        for chart in charts
    )
    return f"Bump {bumps}"


def generate_pr_body(charts: List[ChartEntry]) -> str:
    """Generate the PR body with one line per bumped chart."""
    lines = [PR_BODY_HEADER]
    lines.extend(
        f"Bumps {chart.name} Helm Chart version from {chart.previous_version} to {chart.version}."
        for chart in charts
    )
    return "\n".join(lines) + "\n"


def plan_pull_request(
    charts: List[ChartEntry],
    base_branch: str = DEFAULT_BASE_BRANCH,
    branch_name: Optional[str] = None,
) -> PullRequestPlan:
    """Build the pull request for a set of bumped charts."""
    return PullRequestPlan(
        branch_name=branch_name or generate_branch_name(),
        pr_title=generate_pr_title(charts),
        pr_body=generate_pr_body(charts),
        base_branch=base_branch,
        commit_message=COMMIT_MESSAGE,
        labels=PR_LABELS,
    )
