"""Sync configuration and result models."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import DEFAULT_CONTEXT, StatusAttempt

DEFAULT_VERSION_PATH = Path("qick_lib/qick/VERSION")


class BotIdentity(BaseModel):
    """Author identity used for automated commits."""

    name: str = Field(default="QICK actions [bot]")
    email: str = Field(default="129547417+qickbot@users.noreply.github.com")


class SyncConfig(BaseModel):
    """Configuration for a single version sync run."""

    pr_number: int = Field(..., gt=0, description="Pull request number")
    repo_dir: Path = Field(default=Path("."), description="Working copy root")
    version_path: Path = Field(
        default=DEFAULT_VERSION_PATH, description="Version file, relative to repo_dir"
    )
    base_repo: RepoCoordinate | None = Field(
        default=None, description="Base repository; resolved from origin when unset"
    )

    # Credentials
    gh_token: str | None = Field(default=None, description="Workflow token used by gh")
    check_token: str | None = Field(default=None, description="PAT for direct status posts")

    context: str = Field(default=DEFAULT_CONTEXT, description="Commit status context")
    commit_message: str = Field(default="update version", description="Commit message")
    bot: BotIdentity = Field(default_factory=BotIdentity, description="Commit author")

    checkout: bool = Field(default=True, description="Run gh pr checkout first")
    dry_run: bool = Field(default=False, description="Report without changing anything")

    @property
    def version_file(self) -> Path:
        if self.version_path.is_absolute():
            return self.version_path
        return self.repo_dir / self.version_path


class ExceptionInfo(BaseModel):
    """Exception information if the run failed."""

    exception_type: str
    exception_message: str
    traceback: str


class SyncResult(BaseModel):
    """Result of a version sync run."""

    pr_number: int = Field(..., description="PR number")
    file_patch: str | None = Field(default=None, description="Patch field before the run")
    old_version: str | None = Field(default=None, description="Version before the run")
    new_version: str | None = Field(default=None, description="Version after the run")
    updated: bool = Field(default=False, description="Was a new commit pushed?")
    commit_sha: str | None = Field(default=None, description="SHA of the update commit")

    status_attempts: list[StatusAttempt] = Field(
        default_factory=list, description="Commit status posts"
    )
    exception_info: ExceptionInfo | None = Field(
        default=None, description="Exception info if failed"
    )

    started_at: datetime | None = Field(default=None, description="Run start time")
    finished_at: datetime | None = Field(default=None, description="Run finish time")

    @property
    def duration_sec(self) -> float | None:
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return None

    @property
    def success(self) -> bool:
        """Status attempts never affect the outcome."""
        return self.exception_info is None

    @property
    def status_delivered(self) -> bool:
        return any(attempt.success for attempt in self.status_attempts)
