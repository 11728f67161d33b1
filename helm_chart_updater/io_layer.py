"""
I/O Layer for Helm Chart Updater

This module contains the Git and GitHub operations needed to publish a
manifest change. This is the "imperative shell" that handles the side
effects of the pull request publisher.
"""

import logging
from typing import Any, Sequence

from git import Repo
from git.exc import GitCommandError
from github.GithubException import GithubException

from .config import COMMIT_EMAIL, GIT_REMOTE
from .exceptions import PullRequestError, ShellError
from .models import PullRequestPlan
from .utils import log_multiline

logger = logging.getLogger(__name__)


class IOLayer:
    """Handles all Git and GitHub operations for the application."""

    def __init__(self, repo: Repo, github_repo: Any):
        """Initialize the I/O layer.

        Args:
            repo: Git repository object of the working directory
            github_repo: GitHub repository object
        """
        self.repo = repo
        self.github_repo = github_repo

    # -----------------------------------------------------------------------------
    # Git Operations
    # -----------------------------------------------------------------------------

    def _git(self, command: str, *args: str) -> str:
        """Run a git subcommand, echoing it and its output to the log.

        Raises:
            ShellError: If git exits non-zero
        """
        log_multiline(" ".join(["$ git", command, *args]), logger)
        try:
            output = getattr(self.repo.git, command)(*args)
        except GitCommandError as e:
            log_multiline(f"{e}", logger, logging.ERROR)
            raise ShellError(
                f"git {command} failed with status {e.status}",
                command=["git", command, *args],
                returncode=e.status if isinstance(e.status, int) else None,
                stderr=str(e.stderr or ""),
            ) from e
        log_multiline(f"Result: {output}", logger)
        return output

    def configure_identity(self, name: str, email: str = COMMIT_EMAIL) -> None:
        """Set the commit author for this repository only."""
        self._git("config", "user.name", name)
        self._git("config", "user.email", email)

    def checkout_branch(self, branch_name: str, create: bool = False) -> None:
        """Checkout a Git branch, optionally creating it."""
        if create:
            self._git("checkout", "-b", branch_name)
        else:
            self._git("checkout", branch_name)

    def add_all(self) -> None:
        """Stage every working tree change."""
        self._git("add", "-A")

    def commit(self, message: str) -> None:
        """Create a Git commit."""
        self._git("commit", "-m", message)

    def push_branch(self, branch_name: str, remote: str = GIT_REMOTE) -> None:
        """Push a branch to remote and track it."""
        self._git("push", "-u", remote, branch_name)

    # -----------------------------------------------------------------------------
    # GitHub Operations
    # -----------------------------------------------------------------------------

    def create_pull_request(
        self,
        title: str,
        body: str,
        branch_name: str,
        base_branch: str = "main",
        labels: Sequence[str] = (),
    ) -> str:
        """Create a GitHub pull request.

        Args:
            title: PR title
            body: PR body/description
            branch_name: Head branch name
            base_branch: Base branch name
            labels: Labels to attach

        Returns:
            PR URL

        Raises:
            PullRequestError: If GitHub rejects the request
        """
        try:
            pr = self.github_repo.create_pull(
                title=title,
                body=body,
                head=branch_name,
                base=base_branch,
            )
            if labels:
                pr.add_to_labels(*labels)
        except GithubException as e:
            raise PullRequestError(
                f"Failed to create pull request from {branch_name} to {base_branch}: {e}"
            ) from e

        logger.info(f"PR created: {pr.html_url}")
        return pr.html_url

    # -----------------------------------------------------------------------------
    # High-Level Combined Operations
    # -----------------------------------------------------------------------------

    def create_branch_commit_and_pr(self, plan: PullRequestPlan, author: str) -> str:
        """Create a branch, commit the working tree, push it and open a PR.

        This combines the common pattern of:
        1. Configuring the commit identity
        2. Creating a new branch
        3. Adding and committing all changes
        4. Pushing the branch
        5. Creating a PR

        Returns:
            PR URL
        """
        self.configure_identity(author)

        logger.info(f"Creating new branch {plan.branch_name}...")
        self.checkout_branch(plan.branch_name, create=True)
        logger.info("Branch successfully created!")

        logger.info("Committing changes to remote branch...")
        self.add_all()
        self.commit(plan.commit_message)
        self.push_branch(plan.branch_name)
        logger.info("Successfully pushed changes to remote branch!")

        logger.info("Creating pull request...")
        return self.create_pull_request(
            title=plan.pr_title,
            body=plan.pr_body,
            branch_name=plan.branch_name,
            base_branch=plan.base_branch,
            labels=plan.labels,
        )
