"""Shared pytest fixtures for pr-version-sync tests."""

import subprocess
from pathlib import Path

import httpx
import pytest

from pr_version_sync.github.client import GitHubClient
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import CommitStatus
from pr_version_sync.status.base import StatusTransport

BASE_REPO = "openquantumhardware/qick"
HEAD_REPO = "contributor/qick"
VERSION_PATH = Path("qick_lib/qick/VERSION")


def git(cwd: Path, *args: str) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, capture_output=True, text=True, check=True
    )
    return result.stdout.strip()


def _configure(cwd: Path) -> None:
    git(cwd, "config", "user.email", "dev@example.com")
    git(cwd, "config", "user.name", "Dev")
    git(cwd, "config", "commit.gpgsign", "false")


@pytest.fixture
def remote_repo(tmp_path):
    """Bare repository standing in for the PR branch's remote."""
    remote = tmp_path / "remote.git"
    remote.mkdir()
    git(remote, "init", "--bare", "-q")
    return remote


@pytest.fixture
def work_repo(tmp_path, remote_repo):
    """Clone on branch ``feature`` tracking the remote, VERSION at 1.2.41."""
    work = tmp_path / "work"
    git(tmp_path, "clone", "-q", str(remote_repo), str(work))
    _configure(work)
    git(work, "checkout", "-q", "-b", "feature")
    version_file = work / VERSION_PATH
    version_file.parent.mkdir(parents=True)
    version_file.write_text("1.2.41\n", encoding="utf-8")
    git(work, "add", ".")
    git(work, "commit", "-q", "-m", "initial")
    git(work, "push", "-q", "-u", "origin", "feature")
    return work


@pytest.fixture
def other_clone(tmp_path, remote_repo, work_repo):
    """A second clone of the remote used to create diverging history."""
    other = tmp_path / "other"
    git(tmp_path, "clone", "-q", "-b", "feature", str(remote_repo), str(other))
    _configure(other)
    return other


def http_error(status_code: int, url: str = "https://api.github.com/x") -> httpx.HTTPStatusError:
    request = httpx.Request("POST", url)
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"{status_code} error", request=request, response=response)


class RecordingTransport(StatusTransport):
    """Status transport that records calls and fails for chosen repositories."""

    def __init__(self, name: str, fail_for=(), has_token: bool = True):
        self.name = name
        self.fail_for = set(fail_for)
        self.has_token = has_token
        self.calls: list[tuple[str, str, str]] = []

    @property
    def has_credentials(self) -> bool:
        return self.has_token

    async def post(self, repo: RepoCoordinate, status: CommitStatus) -> None:
        self.calls.append((self.name, repo.full_name, status.sha))
        if repo.full_name in self.fail_for:
            raise http_error(403)


def pr_payload(number: int = 57, head_repo: str | None = HEAD_REPO) -> dict:
    return {
        "number": number,
        "title": "Add feature",
        "state": "open",
        "head": {
            "ref": "feature",
            "sha": "a" * 40,
            "repo": {"full_name": head_repo} if head_repo else None,
        },
        "base": {"ref": "main", "sha": "b" * 40, "repo": {"full_name": BASE_REPO}},
    }


@pytest.fixture
def pr_client():
    """GitHubClient answering PR lookups from a canned payload."""

    def handler(request: httpx.Request) -> httpx.Response:
        number = int(request.url.path.rsplit("/", 1)[-1])
        return httpx.Response(200, json=pr_payload(number))

    return GitHubClient(token="gh-token", transport=httpx.MockTransport(handler))
