"""Keep a package version in sync with the pull request that changed it."""

__version__ = "0.1.0"
