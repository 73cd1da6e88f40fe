"""GitHub API client for pull request lookups and commit statuses."""

import os
from typing import Any

import httpx

from pr_version_sync.models.pr import PRInfo, RepoCoordinate
from pr_version_sync.models.status import CommitStatus


class GitHubClient:
    """Client for interacting with GitHub API."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str = "https://api.github.com",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize GitHub client.

        Args:
            token: GitHub API token. If None, reads from GH_TOKEN or GITHUB_TOKEN env var;
                an empty string disables authentication.
            base_url: API root
            transport: Optional httpx transport (used by tests)
        """
        if token is None:
            token = os.getenv("GH_TOKEN") or os.getenv("GITHUB_TOKEN")
        self.token = token
        self.base_url = base_url
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=30.0,
            follow_redirects=True,
            transport=self.transport,
        )

    async def get_pr_info(self, repo: RepoCoordinate, pr_number: int) -> PRInfo:
        """
        Fetch PR information from GitHub API.

        Args:
            repo: Base repository
            pr_number: Pull request number

        Returns:
            PRInfo object with PR details

        Raises:
            httpx.HTTPError: If API request fails
        """
        async with self._client() as client:
            response = await client.get(f"/repos/{repo.full_name}/pulls/{pr_number}")
            response.raise_for_status()
            pr_data: dict[str, Any] = response.json()

        base_repo = RepoCoordinate.parse(pr_data["base"]["repo"]["full_name"])
        # Head repo is null when the fork has been deleted
        head_repo_data = pr_data["head"]["repo"]
        head_repo = (
            RepoCoordinate.parse(head_repo_data["full_name"]) if head_repo_data else base_repo
        )

        return PRInfo(
            pr_number=pr_number,
            base_repo=base_repo,
            head_repo=head_repo,
            head_branch=pr_data["head"]["ref"],
            head_commit=pr_data["head"]["sha"],
            base_branch=pr_data["base"]["ref"],
            title=pr_data.get("title") or "",
            state=pr_data.get("state") or "open",
        )

    async def create_commit_status(
        self, repo: RepoCoordinate, status: CommitStatus
    ) -> dict[str, Any]:
        """
        Create a commit status.

        Args:
            repo: Repository to post the status to
            status: Status to post

        Returns:
            The created status as returned by the API

        Raises:
            httpx.HTTPError: If API request fails
        """
        async with self._client() as client:
            response = await client.post(
                repo.statuses_path(status.sha), json=status.payload()
            )
            response.raise_for_status()
            return response.json()
