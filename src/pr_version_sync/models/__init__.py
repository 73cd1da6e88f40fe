"""Data models for pr-version-sync."""

from pr_version_sync.models.pr import PRInfo, RepoCoordinate
from pr_version_sync.models.run import BotIdentity, SyncConfig, SyncResult
from pr_version_sync.models.status import CommitStatus, StatusAttempt, StatusState
from pr_version_sync.models.version import Version

__all__ = [
    "BotIdentity",
    "CommitStatus",
    "PRInfo",
    "RepoCoordinate",
    "StatusAttempt",
    "StatusState",
    "SyncConfig",
    "SyncResult",
    "Version",
]
