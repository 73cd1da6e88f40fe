"""Main CLI entry point."""

import asyncio
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from pr_version_sync.errors import GhCommandError, VersionSyncError
from pr_version_sync.events import load_event, skip_reason
from pr_version_sync.github.gh_cli import GhCli
from pr_version_sync.models.pr import RepoCoordinate
from pr_version_sync.models.run import DEFAULT_VERSION_PATH, SyncConfig, SyncResult
from pr_version_sync.models.status import DEFAULT_CONTEXT
from pr_version_sync.utils.sync import run_sync
from pr_version_sync.version_file import needs_update, read_version

app = typer.Typer(
    name="pr-version-sync",
    help="Keep a package version's patch field equal to its pull request number",
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _resolve_pr_number(
    pr_number: int | None, event_path: Path | None, event_name: str | None, default_branch: str
) -> int | None:
    """PR number from the option, else from the event payload. None means skip."""
    if event_path is None or not event_path.is_file():
        return pr_number

    event = load_event(event_path)
    reason = skip_reason(event_name, event, default_branch)
    if reason:
        console.print(f"[yellow]Skipping: {escape(reason)}[/yellow]")
        return None
    if pr_number is None and event.pull_request is not None:
        return event.pull_request.number
    return pr_number


@app.command()
def sync(
    pr_number: int = typer.Option(None, "--pr", envvar="PR_NUMBER", help="Pull request number"),
    version_path: Path = typer.Option(
        DEFAULT_VERSION_PATH, "--version-path", envvar="VERSION_PATH", help="VERSION file"
    ),
    repo_dir: Path = typer.Option(Path("."), "--repo-dir", help="Working copy root"),
    repo: str = typer.Option(
        None, "--repo", envvar="GITHUB_REPOSITORY", help="Base repository (owner/name)"
    ),
    github_token: str = typer.Option(
        None, "--token", envvar="GH_TOKEN", help="Workflow token for gh and the PR lookup"
    ),
    check_token: str = typer.Option(
        None, "--check-token", envvar="CHECK_TOKEN", help="PAT for direct status posts"
    ),
    context: str = typer.Option(DEFAULT_CONTEXT, "--context", help="Commit status context"),
    default_branch: str = typer.Option("main", "--default-branch", help="Branch PRs must target"),
    event_path: Path = typer.Option(
        None, "--event-path", envvar="GITHUB_EVENT_PATH", help="Actions event payload"
    ),
    event_name: str = typer.Option(None, "--event-name", envvar="GITHUB_EVENT_NAME"),
    checkout: bool = typer.Option(True, "--checkout/--no-checkout", help="Run gh pr checkout"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report without changing anything"),
    debug_auth: bool = typer.Option(False, "--debug-auth", help="Print gh auth status"),
    output: Path = typer.Option(None, "--output", "-o", help="Save result JSON here"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """
    Update VERSION to match the PR number, push it and post the commit status.

    Example:
        pr-version-sync sync --pr 57 --version-path qick_lib/qick/VERSION
    """
    _setup_logging(verbose)
    console.print(
        Panel.fit(
            "[bold blue]PR Version Sync[/bold blue]\n"
            "VERSION patch follows the pull request number",
            border_style="blue",
        )
    )

    pr_number = _resolve_pr_number(pr_number, event_path, event_name, default_branch)
    if pr_number is None:
        if event_path is None or not event_path.is_file():
            console.print("[red]✗ No pull request number (set --pr or PR_NUMBER)[/red]")
            raise typer.Exit(1)
        raise typer.Exit(0)

    try:
        config = SyncConfig(
            pr_number=pr_number,
            repo_dir=repo_dir,
            version_path=version_path,
            base_repo=RepoCoordinate.parse(repo) if repo else None,
            gh_token=github_token,
            check_token=check_token,
            context=context,
            checkout=checkout,
            dry_run=dry_run,
        )
    except (ValidationError, ValueError) as e:
        console.print(f"[red]✗ Invalid configuration: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if debug_auth:
        try:
            console.print(GhCli(repo_dir, token=github_token).auth_status(), markup=False)
        except GhCommandError as e:
            console.print(f"[yellow]gh auth status failed: {escape(str(e))}[/yellow]")

    result = asyncio.run(run_sync(config, output_path=output))
    _print_result(result)

    if not result.success:
        raise typer.Exit(1)


def _print_result(result: SyncResult) -> None:
    console.print("\n[bold]Results[/bold]")

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="yellow")

    table.add_row("PR Number", f"#{result.pr_number}")
    table.add_row("Old Version", result.old_version or "N/A")
    table.add_row("New Version", result.new_version or "N/A")
    table.add_row("Updated", "✓ Yes" if result.updated else "No")
    if result.commit_sha:
        table.add_row("Commit", result.commit_sha[:7])
    for attempt in result.status_attempts:
        table.add_row(
            f"Status ({attempt.transport}, {attempt.repo})",
            "✓ posted" if attempt.success else f"✗ {escape(attempt.error or '')}",
        )
    if result.duration_sec is not None:
        table.add_row("Duration", f"{result.duration_sec:.1f}s")

    console.print(table)

    if result.exception_info:
        console.print("\n[bold red]Exception:[/bold red]")
        console.print(
            f"   {result.exception_info.exception_type}: "
            f"{escape(result.exception_info.exception_message)}"
        )
    elif result.status_attempts and not result.status_delivered:
        console.print("[yellow]⚠ Commit status was not delivered by any transport[/yellow]")


@app.command()
def check(
    pr_number: int = typer.Option(..., "--pr", envvar="PR_NUMBER", help="Pull request number"),
    version_path: Path = typer.Option(
        DEFAULT_VERSION_PATH, "--version-path", envvar="VERSION_PATH", help="VERSION file"
    ),
):
    """
    Compare the VERSION patch with the PR number without changing anything.

    Exits 0 when they match, 1 when an update is needed or the file is invalid.
    """
    try:
        current = read_version(version_path)
    except VersionSyncError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"PR number: {pr_number}, VERSION number: {current.patch}")
    if needs_update(current.patch, pr_number):
        console.print(
            f"[yellow]✗ VERSION {current} should be {current.with_patch(pr_number)}[/yellow]"
        )
        raise typer.Exit(1)
    console.print(f"[green]✓ VERSION {current} matches PR #{pr_number}[/green]")


@app.command()
def version():
    """Show version information."""
    from pr_version_sync import __version__

    console.print(f"pr-version-sync version {__version__}")


if __name__ == "__main__":
    app()
