"""Data models shared by the update pipeline and the pull request publisher."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class ChartEntry:
    """A chart pinned in the manifest.

    ``previous_version`` is only set for charts bumped during the current
    run and is never written back to the manifest.
    """
    name: str
    repo: str
    url: str
    version: str
    previous_version: Optional[str] = None

    @property
    def is_updated(self) -> bool:
        return self.previous_version is not None

    def to_manifest(self) -> dict:
        """Serializable form of the entry, in manifest key order."""
        return {
            "name": self.name,
            "repo": self.repo,
            "url": self.url,
            "version": self.version,
        }


@dataclass
class SearchResult:
    """One row of ``helm search repo`` output."""
    name: str
    version: str
    app_version: str = ""
    description: str = ""


@dataclass
class UpdateResult:
    """Outcome of checking every chart in the manifest."""
    charts: List[ChartEntry] = field(default_factory=list)
    updated: List[ChartEntry] = field(default_factory=list)

    @property
    def any_updated(self) -> bool:
        return bool(self.updated)


@dataclass
class PullRequestPlan:
    """Represents a pull request to be created."""
    branch_name: str
    pr_title: str
    pr_body: str
    base_branch: str
    commit_message: str
    labels: Tuple[str, ...] = ()
