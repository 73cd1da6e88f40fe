"""Best-effort fan-out of a commit status over several transports and repositories."""

import logging
from typing import Sequence

import httpx

from pr_version_sync.errors import GhCommandError
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import CommitStatus, StatusAttempt
from pr_version_sync.status.base import StatusTransport

logger = logging.getLogger(__name__)


class StatusReporter:
    """Posts one status through every transport to every repository.

    Each post is attempted independently: a failure is recorded on its
    StatusAttempt and never stops the remaining posts.
    """

    def __init__(self, transports: Sequence[StatusTransport]):
        self.transports = list(transports)

    async def report(
        self, status: CommitStatus, repos: Sequence[RepoCoordinate]
    ) -> list[StatusAttempt]:
        """
        Post ``status`` for each (transport, repository) combination.

        Transports are the outer loop, so with repositories ``[head, base]``
        the order is gh/head, gh/base, http/head, http/base.

        Args:
            status: Status to post
            repos: Repositories to post to

        Returns:
            One StatusAttempt per combination, in attempt order
        """
        attempts = []
        for transport in self.transports:
            for repo in repos:
                attempts.append(await self._attempt(transport, repo, status))

        if attempts and not any(attempt.success for attempt in attempts):
            logger.warning(
                "Commit status %r was not delivered: all %d attempts failed",
                status.context,
                len(attempts),
            )
        return attempts

    async def _attempt(
        self, transport: StatusTransport, repo: RepoCoordinate, status: CommitStatus
    ) -> StatusAttempt:
        attempt = StatusAttempt(transport=transport.name, repo=repo)
        if not transport.has_credentials:
            attempt.error = "no token configured"
            logger.warning(
                "Skipping %s status post to %s: no token configured", transport.name, repo
            )
            return attempt

        try:
            await transport.post(repo, status)
        except (httpx.HTTPError, GhCommandError) as e:
            attempt.error = str(e)
            logger.warning("Status post via %s to %s failed: %s", transport.name, repo, e)
            return attempt

        attempt.success = True
        logger.info("Posted %s status via %s to %s", status.state.value, transport.name, repo)
        return attempt
