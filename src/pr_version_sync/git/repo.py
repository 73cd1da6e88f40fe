"""Local git working copy operations."""

import logging
import re
import subprocess
from pathlib import Path
from typing import Sequence

from pr_version_sync.errors import ConfigError, GitCommandError
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.run import BotIdentity

logger = logging.getLogger(__name__)

# https://github.com/owner/repo(.git) or git@github.com:owner/repo(.git)
_REMOTE_PATTERN = re.compile(r"github\.com[:/]([^/]+)/([^/]+?)(?:\.git)?/?$")


class GitRepository:
    """Thin wrapper around the ``git`` CLI for one working copy."""

    def __init__(self, path: Path, git_executable: str = "git"):
        """
        Initialize repository wrapper.

        Args:
            path: Working copy root
            git_executable: git binary to invoke
        """
        self.path = path
        self.git_executable = git_executable

    def run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
        """
        Run a git subcommand in the working copy.

        Raises:
            GitCommandError: If ``check`` is set and git exits non-zero
        """
        command = [self.git_executable, *args]
        logger.debug("$ %s", " ".join(command))
        result = subprocess.run(
            command,
            cwd=self.path,
            capture_output=True,
            text=True,
            check=False,
        )
        if check and result.returncode != 0:
            raise GitCommandError(command, result.returncode, result.stderr)
        return result

    def configure_identity(self, bot: BotIdentity) -> None:
        self.run("config", "user.email", bot.email)
        self.run("config", "user.name", bot.name)
        self.run("config", "push.default", "upstream")

    def add(self, paths: Sequence[Path]) -> None:
        self.run("add", "--", *(str(p) for p in paths))

    def commit(self, message: str) -> str:
        """Commit tracked changes and return the new HEAD SHA."""
        self.run("commit", "-am", message)
        return self.head_sha()

    def push(self) -> None:
        self.run("push")

    def head_sha(self) -> str:
        return self.run("rev-parse", "HEAD").stdout.strip()

    def remote_url(self, remote: str = "origin") -> str:
        return self.run("remote", "get-url", remote).stdout.strip()

    def remote_repo(self, remote: str = "origin") -> RepoCoordinate:
        """
        Resolve the GitHub repository a remote points to.

        Raises:
            ConfigError: If the remote URL is not a GitHub repository URL
        """
        url = self.remote_url(remote)
        match = _REMOTE_PATTERN.search(url)
        if not match:
            raise ConfigError(f"Remote {remote} is not a GitHub repository: {url}")
        owner, name = match.groups()
        return RepoCoordinate(owner=owner, name=name)
