"""Commit status models."""

from enum import Enum

from pydantic import BaseModel, Field

from pr_version_sync.models.pr import RepoCoordinate

DEFAULT_CONTEXT = "update_version"


class StatusState(str, Enum):
    """States accepted by the GitHub commit status API."""

    ERROR = "error"
    FAILURE = "failure"
    PENDING = "pending"
    SUCCESS = "success"


class CommitStatus(BaseModel):
    """A status marker to attach to a commit."""

    sha: str = Field(..., description="Target commit SHA")
    state: StatusState = Field(default=StatusState.SUCCESS, description="Status state")
    context: str = Field(default=DEFAULT_CONTEXT, description="Status label")
    description: str | None = Field(default=None, description="Short description")
    target_url: str | None = Field(default=None, description="Link shown with the status")

    def payload(self) -> dict[str, str]:
        """Request body for the statuses endpoint."""
        body = {"state": self.state.value, "context": self.context}
        if self.description:
            body["description"] = self.description
        if self.target_url:
            body["target_url"] = self.target_url
        return body


class StatusAttempt(BaseModel):
    """Outcome of posting one status through one transport to one repository."""

    transport: str = Field(..., description="Transport name (gh, http)")
    repo: RepoCoordinate = Field(..., description="Repository the status was posted to")
    success: bool = Field(default=False, description="Did the post succeed?")
    error: str | None = Field(default=None, description="Error message if failed")
