"""Exceptions raised by pr-version-sync."""


class VersionSyncError(Exception):
    """Base class for failures that abort a sync run."""


class ConfigError(VersionSyncError):
    """Required configuration is missing or invalid."""


class VersionFormatError(VersionSyncError):
    """Version file does not hold a ``major.minor.patch`` string."""


class VersionFileNotFoundError(VersionSyncError):
    """Version file does not exist."""


class CommandError(VersionSyncError):
    """An external command exited non-zero."""

    def __init__(self, command: list[str], return_code: int, stderr: str):
        self.command = command
        self.return_code = return_code
        self.stderr = stderr
        super().__init__(
            f"{' '.join(command)} exited with {return_code}: {stderr.strip()}"
        )


class GitCommandError(CommandError):
    """A git command failed."""


class GhCommandError(CommandError):
    """A GitHub CLI command failed."""
