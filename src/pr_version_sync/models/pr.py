"""Pull request and repository models."""

from pydantic import BaseModel, Field


class RepoCoordinate(BaseModel):
    """An ``owner/name`` pair identifying a GitHub repository."""

    owner: str = Field(..., description="Repository owner/organization")
    name: str = Field(..., description="Repository name")

    @classmethod
    def parse(cls, value: str) -> "RepoCoordinate":
        """
        Parse an ``owner/name`` string.

        Raises:
            ValueError: If the string is not exactly two non-empty parts
        """
        parts = value.strip().strip("/").split("/")
        if len(parts) != 2 or not all(parts):
            raise ValueError(f"Invalid repository coordinate: {value!r}")
        return cls(owner=parts[0], name=parts[1])

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def statuses_path(self, sha: str) -> str:
        """REST path for the commit statuses of ``sha`` in this repository."""
        return f"/repos/{self.full_name}/statuses/{sha}"

    def __str__(self) -> str:
        return self.full_name


class PRInfo(BaseModel):
    """Information about a GitHub Pull Request."""

    pr_number: int = Field(..., description="PR number")
    base_repo: RepoCoordinate = Field(..., description="Repository receiving the merge")
    head_repo: RepoCoordinate = Field(..., description="Repository the PR comes from")

    head_branch: str = Field(..., description="PR source branch name")
    head_commit: str = Field(..., description="Source branch commit SHA")
    base_branch: str = Field(..., description="PR target branch (e.g., main)")

    title: str = Field(default="", description="PR title")
    state: str = Field(default="open", description="PR state (open, closed)")

    @property
    def is_fork(self) -> bool:
        return self.head_repo != self.base_repo
