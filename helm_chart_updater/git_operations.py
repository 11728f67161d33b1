"""
Git Operations Module for Helm Chart Updater

This module handles Git client setup: it opens the local repository in the
working directory and connects to the GitHub repository pull requests are
opened against.

Functions:
    setup_git_client: Sets up Git and GitHub clients with proper authentication

Raises:
    GitOperationError: When Git operations fail
"""

from git import Repo
from git.exc import GitError
from github import Auth, Github
from github.GithubException import GithubException
from github.Repository import Repository

from .exceptions import GitOperationError


def setup_git_client(working_directory: str, token: str, repository: str) -> tuple[Repo, Repository]:
    """Set up Git and GitHub clients."""
    try:
        repo = Repo(working_directory)
        github_client = Github(auth=Auth.Token(token))
        github_repo = github_client.get_repo(repository)
        return repo, github_repo
    except (GitError, GithubException) as e:
        raise GitOperationError(f"Failed to setup git clients: {e}") from e
