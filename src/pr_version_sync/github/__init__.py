"""GitHub access through the REST API and the gh CLI."""

from pr_version_sync.github.client import GitHubClient
from pr_version_sync.github.gh_cli import GhCli

__all__ = ["GhCli", "GitHubClient"]
