"""Version sync execution."""

import logging
import traceback
from datetime import datetime
from pathlib import Path

import httpx

from pr_version_sync.errors import VersionSyncError
from pr_version_sync.git.repo import GitRepository
from pr_version_sync.github.client import GitHubClient
from pr_version_sync.github.gh_cli import GhCli
from pr_version_sync.models.run import ExceptionInfo, SyncConfig, SyncResult
from pr_version_sync.models.status import CommitStatus
from pr_version_sync.status.reporter import StatusReporter
from pr_version_sync.status.transports import GhCliTransport, HttpTransport
from pr_version_sync.utils.actions import export_env
from pr_version_sync.version_file import needs_update, read_version, sync_version_file

logger = logging.getLogger(__name__)


def build_reporter(config: SyncConfig, gh: GhCli) -> StatusReporter:
    """gh with the workflow token first, then direct HTTPS with the check token."""
    # Empty string rather than None so the PAT client never falls back to GH_TOKEN
    check_client = GitHubClient(token=config.check_token or "")
    return StatusReporter([GhCliTransport(gh), HttpTransport(check_client)])


async def run_sync(
    config: SyncConfig,
    output_path: Path | None = None,
    git: GitRepository | None = None,
    gh: GhCli | None = None,
    client: GitHubClient | None = None,
    reporter: StatusReporter | None = None,
) -> SyncResult:
    """
    Execute a single version sync run.

    Steps: checkout the PR, compare the version patch with the PR number,
    rewrite/commit/push on mismatch, then post the commit status.

    Args:
        config: Sync configuration
        output_path: Optional file to save the result JSON to
        git: Working copy wrapper (defaults to one rooted at config.repo_dir)
        gh: gh CLI wrapper (defaults to one using config.gh_token)
        client: REST client for the PR lookup (defaults to one using config.gh_token)
        reporter: Status reporter (defaults to gh + HTTPS transports)

    Returns:
        SyncResult with the run outcome. Unrecoverable failures are
        recorded in ``exception_info`` and stop the run.
    """
    git = git or GitRepository(config.repo_dir)
    gh = gh or GhCli(config.repo_dir, token=config.gh_token)
    client = client or GitHubClient(token=config.gh_token)
    reporter = reporter or build_reporter(config, gh)

    result = SyncResult(pr_number=config.pr_number, started_at=datetime.now())
    version_file = config.version_file.resolve()

    try:
        # 1. Checkout pull request
        if config.checkout:
            logger.info("Checking out PR #%d", config.pr_number)
            gh.pr_checkout(config.pr_number)

        # 2. Compare version numbers
        current = read_version(version_file)
        result.file_patch = current.patch
        result.old_version = str(current)
        logger.info("PR number: %d, VERSION number: %s", config.pr_number, current.patch)
        export_env({"file_version": current.patch})

        if not needs_update(current.patch, config.pr_number):
            result.new_version = str(current)
            return result

        if config.dry_run:
            result.new_version = str(current.with_patch(config.pr_number))
            logger.info("Dry run: would update VERSION to %s", result.new_version)
            return result

        # 3. Update VERSION, commit and push
        _, updated = sync_version_file(version_file, config.pr_number)
        result.new_version = str(updated)
        git.configure_identity(config.bot)
        git.add([version_file])
        result.commit_sha = git.commit(config.commit_message)
        git.push()
        result.updated = True
        logger.info("Pushed %s as %s", result.new_version, result.commit_sha)

        # 4. Resolve the repositories that should carry the status
        base_repo = config.base_repo or git.remote_repo()
        pr_info = await client.get_pr_info(base_repo, config.pr_number)
        head_repo = pr_info.head_repo
        export_env(
            {
                "reporef": base_repo.statuses_path(result.commit_sha),
                "headref": head_repo.statuses_path(result.commit_sha),
            }
        )

        # 5. Set status for the update commit; failures stay in the attempts
        status = CommitStatus(sha=result.commit_sha, context=config.context)
        result.status_attempts = await reporter.report(status, [head_repo, base_repo])

    except (VersionSyncError, httpx.HTTPError) as e:
        result.exception_info = ExceptionInfo(
            exception_type=type(e).__name__,
            exception_message=str(e),
            traceback=traceback.format_exc(),
        )
        logger.error("Version sync failed: %s", e)

    finally:
        result.finished_at = datetime.now()
        if output_path:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(result.model_dump_json(indent=2), encoding="utf-8")

    return result
