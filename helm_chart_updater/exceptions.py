"""Custom exceptions for Helm Chart Updater."""

from typing import List, Optional, Sequence


class HelmUpdaterError(Exception):
    """Base class for all errors raised by the updater."""


class ConfigError(HelmUpdaterError):
    """Raised when required configuration is missing from the environment."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class FormatError(HelmUpdaterError):
    """Raised when the chart manifest does not match the expected schema."""


class ManifestIOError(HelmUpdaterError):
    """Raised when the chart manifest cannot be read or written."""


class ShellError(HelmUpdaterError):
    """Raised when an external command fails to launch or exits non-zero."""

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class VersionParseError(HelmUpdaterError):
    """Raised when a version string is not a valid semantic version."""


class NoVersionsAvailableError(HelmUpdaterError):
    """Raised when a repository query returns no versions for a chart."""


class PullRequestError(HelmUpdaterError):
    """Raised when the GitHub API refuses to create or label a pull request."""


class GitOperationError(HelmUpdaterError):
    """Raised when the Git repository or GitHub client cannot be set up."""
