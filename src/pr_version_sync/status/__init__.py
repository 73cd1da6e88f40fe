"""Commit status reporting."""

from pr_version_sync.status.base import StatusTransport
from pr_version_sync.status.reporter import StatusReporter
from pr_version_sync.status.transports import GhCliTransport, HttpTransport

__all__ = ["GhCliTransport", "HttpTransport", "StatusReporter", "StatusTransport"]
