#!/usr/bin/env python3

"""
Helm Chart Version Updater

Reads the chart manifest, bumps every chart with a newer upstream version,
rewrites the manifest and opens a pull request describing the bumps.
"""

import logging
import os
import sys
from typing import Optional

from .environment import EnvironmentConfig
from .exceptions import ConfigError, HelmUpdaterError, ShellError
from .git_operations import setup_git_client
from .helm import HelmClient
from .io_layer import IOLayer
from .manifest import load_charts, save_charts
from .pr_manager import publish_updates, require_pr_settings
from .shell import ShellExecutor
from .updater import check_for_updates
from .utils import log_multiline, setup_logging

logger = logging.getLogger(__name__)


def build_io_layer(config: EnvironmentConfig) -> IOLayer:
    """Connect to the local repository and to GitHub."""
    repo, github_repo = setup_git_client(
        config.working_directory, config.github_token, config.github_repository
    )
    return IOLayer(repo, github_repo)


def run(config: EnvironmentConfig, executor: Optional[ShellExecutor] = None) -> Optional[str]:
    """Run the whole update pipeline.

    Returns:
        PR URL if a pull request was created, None otherwise
    """
    charts = load_charts(config.chart_path)

    result = check_for_updates(charts, HelmClient(executor))

    if not result.any_updated:
        logger.info("No newer versions found, nothing to do.")
        return None

    if config.no_write:
        logger.info("NO_WRITE environmental variable set, preventing file writing and pull request")
        return None

    # Missing PR settings must abort before the working tree is touched
    if not config.no_pr:
        require_pr_settings(config)

    logger.info(f"Newer versions found, updating {config.chart_file}")
    save_charts(config.chart_path, result.charts)

    logger.info("Creating pull request...")
    return publish_updates(result.updated, config, build_io_layer)


def main():
    """Main entry point."""
    config = EnvironmentConfig.from_env(os.environ)
    level = logging.getLevelName(config.log_level)
    setup_logging(level if isinstance(level, int) else logging.INFO)

    try:
        pr_url = run(config)
    except ConfigError:
        sys.exit(1)
    except ShellError as e:
        logger.error(f"Error: {e}")
        if e.stderr:
            log_multiline(e.stderr, logger, logging.ERROR)
        sys.exit(1)
    except HelmUpdaterError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)

    if pr_url:
        logger.info(f"Created PR: {pr_url}")
    logger.info("Helm chart update process completed")


if __name__ == "__main__":
    main()
