"""Git working copy access."""

from pr_version_sync.git.repo import GitRepository

__all__ = ["GitRepository"]
