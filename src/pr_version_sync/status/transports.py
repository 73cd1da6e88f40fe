"""Commit status transports: the gh CLI and direct REST calls."""

from pr_version_sync.github.client import GitHubClient
from pr_version_sync.github.gh_cli import GhCli
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import CommitStatus
from pr_version_sync.status.base import StatusTransport


class GhCliTransport(StatusTransport):
    """Posts statuses with ``gh api`` using the workflow token or gh's own login."""

    name = "gh"

    def __init__(self, gh: GhCli):
        self.gh = gh

    @property
    def has_credentials(self) -> bool:
        # gh falls back to its stored login or GITHUB_TOKEN; a missing
        # credential shows up as a failed post
        return True

    async def post(self, repo: RepoCoordinate, status: CommitStatus) -> None:
        self.gh.create_commit_status(repo, status)


class HttpTransport(StatusTransport):
    """Posts statuses over HTTPS with a bearer personal access token."""

    name = "http"

    def __init__(self, client: GitHubClient):
        self.client = client

    @property
    def has_credentials(self) -> bool:
        return bool(self.client.token)

    async def post(self, repo: RepoCoordinate, status: CommitStatus) -> None:
        await self.client.create_commit_status(repo, status)
