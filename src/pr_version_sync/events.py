"""GitHub Actions event payload parsing and trigger gating."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict

PR_EVENTS = frozenset({"pull_request", "pull_request_target"})
SYNC_ACTIONS = frozenset({"opened", "reopened", "synchronize"})


class GitRef(BaseModel):
    model_config = ConfigDict(extra="ignore")

    ref: str | None = None
    sha: str | None = None


class PullRequestPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    number: int
    base: GitRef | None = None
    head: GitRef | None = None


class GitHubEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    pull_request: PullRequestPayload | None = None


def load_event(path: Path) -> GitHubEvent:
    """Load the event payload the runner writes to ``GITHUB_EVENT_PATH``."""
    return GitHubEvent.model_validate(json.loads(path.read_text(encoding="utf-8")))


def skip_reason(
    event_name: str | None, event: GitHubEvent, default_branch: str = "main"
) -> str | None:
    """
    Decide whether an event should trigger a sync.

    Returns:
        None if the sync should run, otherwise a human-readable reason to skip
    """
    if event_name is not None and event_name not in PR_EVENTS:
        return f"event {event_name!r} is not a pull request event"
    if event.pull_request is None:
        return "event payload has no pull request"
    if event.action not in SYNC_ACTIONS:
        return f"action {event.action!r} is not one of {', '.join(sorted(SYNC_ACTIONS))}"
    base_ref = event.pull_request.base.ref if event.pull_request.base else None
    if base_ref != default_branch:
        return f"pull request targets {base_ref!r}, not {default_branch!r}"
    return None
