"""Helpers for passing values to later GitHub Actions workflow steps."""

import os
from pathlib import Path


def export_env(values: dict[str, str], env_file: str | None = None) -> bool:
    """
    Append ``name=value`` lines to the runner's ``GITHUB_ENV`` file.

    Args:
        values: Variables to export
        env_file: Target file. If None, reads from GITHUB_ENV env var.

    Returns:
        True if the values were written, False when not running under Actions
    """
    target = env_file or os.getenv("GITHUB_ENV")
    if not target:
        return False
    with Path(target).open("a", encoding="utf-8") as handle:
        for name, value in values.items():
            handle.write(f"{name}={value}\n")
    return True
