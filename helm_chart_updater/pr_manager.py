"""
Pull Request Manager Module for Helm Chart Updater

This module publishes the bumped charts: it logs the planned pull request,
and unless pull requests are disabled, commits the rewritten manifest on a
new branch, pushes it and opens a pull request.

Functions:
    require_pr_settings: Fails with ConfigError when PR settings are missing
    publish_updates: Creates the branch, commit and pull request
"""

import logging
from typing import Callable, List, Optional

from .environment import EnvironmentConfig
from .exceptions import ConfigError
from .io_layer import IOLayer
from .message_generation import plan_pull_request
from .models import ChartEntry
from .utils import log_multiline

logger = logging.getLogger(__name__)


def require_pr_settings(config: EnvironmentConfig) -> None:
    """Raise ConfigError listing every missing pull request setting."""
    errors = config.validate_pr_settings()
    if errors:
        for error in errors:
            logger.error(error)
        raise ConfigError(errors)


def publish_updates(
    charts: List[ChartEntry],
    config: EnvironmentConfig,
    io_factory: Callable[[EnvironmentConfig], IOLayer],
    branch_name: Optional[str] = None,
) -> Optional[str]:
    """Open a pull request for the bumped charts.

    Args:
        charts: Bumped charts, each with ``previous_version`` set
        config: Environment configuration
        io_factory: Builds the I/O layer once the settings are validated
        branch_name: Branch to create (random by default)

    Returns:
        PR URL, or None when pull requests are disabled

    Raises:
        ConfigError: If token, repository or actor is missing
        ShellError: If a git command fails
        PullRequestError: If GitHub rejects the pull request
    """
    if not config.no_pr:
        require_pr_settings(config)

    plan = plan_pull_request(charts, config.base_branch, branch_name)

    logger.info("Pull Request Title:")
    logger.info(plan.pr_title)
    logger.info("Pull Request Body:")
    log_multiline(plan.pr_body, logger)

    if config.no_pr:
        logger.info("NO_PR environmental variable set, preventing pull request")
        return None

    io_layer = io_factory(config)
    pr_url = io_layer.create_branch_commit_and_pr(plan, author=config.github_actor)
    logger.info("Successfully created pull request!")
    return pr_url
