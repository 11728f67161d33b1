"""
Configuration Module for Helm Chart Updater

This module contains the constants used throughout the application.

Constants:
    DEFAULT_WORKING_DIRECTORY: Workspace mounted by GitHub Actions
    DEFAULT_CHART_FILE: Manifest file name inside the working directory
    DEFAULT_BASE_BRANCH: Branch pull requests are opened against
    BRANCH_PREFIX: Prefix of the branches created for each run
    BRANCH_SUFFIX_LENGTH: Length of the random branch name suffix
    COMMIT_MESSAGE: Message of the commit carrying the manifest change
    COMMIT_EMAIL: Placeholder e-mail used for the commit identity
    PR_BODY_HEADER: First line of every pull request body
    PR_LABELS: Labels attached to every pull request
    MANIFEST_FIELDS: Keys of a manifest entry, in serialization order
"""

DEFAULT_WORKING_DIRECTORY = "/github/workspace"
DEFAULT_CHART_FILE = "charts.yaml"
DEFAULT_BASE_BRANCH = "main"

BRANCH_PREFIX = "helm-update-"
BRANCH_SUFFIX_LENGTH = 6
COMMIT_MESSAGE = "Updated chart versions"
COMMIT_EMAIL = "<>"
GIT_REMOTE = "origin"

PR_BODY_HEADER = "## Helm Chart Updater"
PR_LABELS = ("dependencies", "github_actions")

MANIFEST_FIELDS = ("name", "repo", "url", "version")
