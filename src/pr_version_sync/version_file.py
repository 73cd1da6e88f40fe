"""Reading and rewriting the VERSION file."""

import logging
from pathlib import Path

from pr_version_sync.errors import VersionFileNotFoundError, VersionFormatError
from pr_version_sync.models.version import Version

logger = logging.getLogger(__name__)


def read_version(path: Path) -> Version:
    """
    Read the version stored in a VERSION file.

    Args:
        path: Path to a file holding a single ``major.minor.patch`` line

    Returns:
        Parsed Version

    Raises:
        VersionFileNotFoundError: If the file does not exist
        VersionFormatError: If the file content is malformed or not UTF-8
    """
    if not path.is_file():
        raise VersionFileNotFoundError(f"Version file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise VersionFormatError(f"Version file is not UTF-8 text: {path}") from e
    return Version.parse(text)


def read_patch(path: Path) -> str:
    """Return the third field of the version in ``path``, as written."""
    return read_version(path).patch


def needs_update(patch: str, pr_number: int) -> bool:
    """Text comparison: a zero-padded patch (``057``) still needs a rewrite."""
    return patch != str(pr_number)


def write_version(path: Path, version: Version) -> None:
    path.write_text(f"{version}\n", encoding="utf-8")


def sync_version_file(path: Path, pr_number: int) -> tuple[Version, Version | None]:
    """
    Rewrite the version file so its patch equals ``pr_number``.

    Args:
        path: VERSION file path
        pr_number: Pull request number

    Returns:
        Tuple of (old version, new version). New version is None when
        the file already matched and was left untouched.
    """
    current = read_version(path)
    if not needs_update(current.patch, pr_number):
        logger.debug("Version %s already matches PR #%d", current, pr_number)
        return current, None

    updated = current.with_patch(pr_number)
    write_version(path, updated)
    logger.info("Rewrote %s: %s -> %s", path, current, updated)
    return current, updated
