"""GitHub CLI (``gh``) wrapper."""

import logging
import os
import subprocess
from pathlib import Path

from pr_version_sync.errors import GhCommandError
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import CommitStatus

logger = logging.getLogger(__name__)


class GhCli:
    """Runs ``gh`` commands inside a working copy."""

    def __init__(
        self, cwd: Path, token: str | None = None, gh_executable: str = "gh"
    ):
        """
        Initialize the wrapper.

        Args:
            cwd: Working copy the commands run in
            token: Token exported to gh as GH_TOKEN. If None, gh uses its own auth.
            gh_executable: gh binary to invoke
        """
        self.cwd = cwd
        self.token = token
        self.gh_executable = gh_executable

    def _env(self) -> dict[str, str]:
        env = os.environ.copy()
        if self.token:
            env["GH_TOKEN"] = self.token
        return env

    def _exec(self, *args: str) -> subprocess.CompletedProcess[str]:
        command = [self.gh_executable, *args]
        logger.debug("$ %s", " ".join(command))
        try:
            return subprocess.run(
                command,
                cwd=self.cwd,
                env=self._env(),
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise GhCommandError(command, 127, str(e)) from e

    def run(self, *args: str) -> str:
        """
        Run a gh subcommand and return its stdout.

        Raises:
            GhCommandError: If gh exits non-zero or cannot be started
        """
        result = self._exec(*args)
        if result.returncode != 0:
            raise GhCommandError([self.gh_executable, *args], result.returncode, result.stderr)
        return result.stdout

    def pr_checkout(self, pr_number: int) -> None:
        self.run("pr", "checkout", str(pr_number))

    def create_commit_status(self, repo: RepoCoordinate, status: CommitStatus) -> None:
        args = [
            "api",
            "--method",
            "POST",
            "-H",
            "Accept: application/vnd.github+json",
            "-H",
            "X-GitHub-Api-Version: 2022-11-28",
            repo.statuses_path(status.sha),
        ]
        for key, value in status.payload().items():
            args.extend(["-f", f"{key}={value}"])
        self.run(*args)

    def auth_status(self) -> str:
        # gh auth status reports on stderr in older releases
        result = self._exec("auth", "status")
        output = (result.stdout + result.stderr).strip()
        if result.returncode != 0:
            raise GhCommandError([self.gh_executable, "auth", "status"], result.returncode, output)
        return output
