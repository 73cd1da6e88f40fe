"""Base status transport interface."""

from abc import ABC, abstractmethod

from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import CommitStatus


class StatusTransport(ABC):
    """A way of posting a commit status to GitHub."""

    name: str = "base"

    @property
    @abstractmethod
    def has_credentials(self) -> bool:
        """Whether a token is configured for this transport."""

    @abstractmethod
    async def post(self, repo: RepoCoordinate, status: CommitStatus) -> None:
        """
        Post a commit status.

        Args:
            repo: Repository to post the status to
            status: Status to post

        Raises:
            httpx.HTTPError or GhCommandError: If the post fails
        """
