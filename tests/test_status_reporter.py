"""Tests for the best-effort commit status fan-out."""

import json
import logging

import httpx
import pytest

from conftest import BASE_REPO, HEAD_REPO, RecordingTransport
from pr_version_sync.errors import GhCommandError
from pr_version_sync.github.client import GitHubClient
from pr_version_sync.github.gh_cli import GhCli
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.status import CommitStatus
from pr_version_sync.status.reporter import StatusReporter
from pr_version_sync.status.transports import GhCliTransport, HttpTransport

SHA = "f" * 40
REPOS = [RepoCoordinate.parse(HEAD_REPO), RepoCoordinate.parse(BASE_REPO)]


class TestStatusReporter:
    @pytest.mark.asyncio
    async def test_posts_every_combination_in_order(self):
        gh, http = RecordingTransport("gh"), RecordingTransport("http")
        attempts = await StatusReporter([gh, http]).report(CommitStatus(sha=SHA), REPOS)

        assert [(a.transport, a.repo.full_name) for a in attempts] == [
            ("gh", HEAD_REPO),
            ("gh", BASE_REPO),
            ("http", HEAD_REPO),
            ("http", BASE_REPO),
        ]
        assert all(a.success for a in attempts)

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_the_others(self):
        gh = RecordingTransport("gh", fail_for={HEAD_REPO})
        http = RecordingTransport("http")
        attempts = await StatusReporter([gh, http]).report(CommitStatus(sha=SHA), REPOS)

        assert len(gh.calls) + len(http.calls) == 4
        assert [a.success for a in attempts] == [False, True, True, True]
        assert "403" in attempts[0].error

    @pytest.mark.asyncio
    async def test_missing_token_skips_call(self):
        gh = RecordingTransport("gh")
        http = RecordingTransport("http", has_token=False)
        attempts = await StatusReporter([gh, http]).report(CommitStatus(sha=SHA), REPOS)

        assert http.calls == []
        assert [a.success for a in attempts] == [True, True, False, False]
        assert attempts[2].error == "no token configured"

    @pytest.mark.asyncio
    async def test_all_failed_logs_warning(self, caplog):
        gh = RecordingTransport("gh", fail_for={HEAD_REPO, BASE_REPO})
        http = RecordingTransport("http", fail_for={HEAD_REPO, BASE_REPO})
        with caplog.at_level(logging.WARNING, logger="pr_version_sync.status.reporter"):
            attempts = await StatusReporter([gh, http]).report(CommitStatus(sha=SHA), REPOS)

        assert not any(a.success for a in attempts)
        assert "was not delivered" in caplog.text

    @pytest.mark.asyncio
    async def test_same_base_and_head_still_posts_twice(self):
        gh = RecordingTransport("gh")
        base = RepoCoordinate.parse(BASE_REPO)
        await StatusReporter([gh]).report(CommitStatus(sha=SHA), [base, base])
        assert len(gh.calls) == 2


class TestTransports:
    @pytest.mark.asyncio
    async def test_unauthorized_http_and_failing_gh_are_isolated(self, tmp_path, monkeypatch):
        posted = []

        def handler(request):
            posted.append(request.url.path)
            if request.url.path.startswith(f"/repos/{HEAD_REPO}/"):
                return httpx.Response(401, json={"message": "Bad credentials"})
            return httpx.Response(201, json=json.loads(request.content))

        gh = GhCli(tmp_path, token="workflow")

        def fail(*args):
            raise GhCommandError(["gh", *args], 1, "HTTP 403: Resource not accessible")

        monkeypatch.setattr(gh, "run", fail)
        http = HttpTransport(GitHubClient(token="pat", transport=httpx.MockTransport(handler)))

        attempts = await StatusReporter([GhCliTransport(gh), http]).report(
            CommitStatus(sha=SHA), REPOS
        )

        assert [a.success for a in attempts] == [False, False, False, True]
        assert posted == [f"/repos/{HEAD_REPO}/statuses/{SHA}", f"/repos/{BASE_REPO}/statuses/{SHA}"]

    @pytest.mark.asyncio
    async def test_gh_without_token_still_attempts_post(self, tmp_path, monkeypatch):
        calls = []
        gh = GhCli(tmp_path)
        monkeypatch.setattr(gh, "run", lambda *args: calls.append(args) or "{}")

        attempts = await StatusReporter([GhCliTransport(gh)]).report(
            CommitStatus(sha=SHA), REPOS
        )

        assert len(calls) == 2
        assert all(a.success for a in attempts)

    def test_credentials(self, tmp_path):
        assert GhCliTransport(GhCli(tmp_path, token="t")).has_credentials
        # gh may use its own stored login
        assert GhCliTransport(GhCli(tmp_path)).has_credentials
        assert not HttpTransport(GitHubClient(token="")).has_credentials
