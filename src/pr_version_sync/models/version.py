"""Version string model."""

import re

from pydantic import BaseModel, Field

from pr_version_sync.errors import VersionFormatError

_NUMERIC = re.compile(r"[0-9]+")


class Version(BaseModel):
    """A ``major.minor.patch`` version whose patch carries a PR number.

    All three fields keep their original text: a rewrite never alters
    ``major`` or ``minor`` (``01.2.3`` stays ``01.2.<pr>``), and a patch
    such as ``057`` does not equal PR 57.
    """

    major: str = Field(..., pattern=r"^[0-9]+$")
    minor: str = Field(..., pattern=r"^[0-9]+$")
    patch: str = Field(..., pattern=r"^[0-9]+$")

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a version string.

        Args:
            text: Version text, e.g. ``"1.2.41"``. Surrounding whitespace is ignored.

        Returns:
            Parsed Version

        Raises:
            VersionFormatError: If the text is not three dot-separated integers
        """
        stripped = text.strip()
        fields = stripped.split(".")
        if len(fields) != 3:
            raise VersionFormatError(
                f"Expected major.minor.patch, got {len(fields)} field(s): {stripped!r}"
            )
        if not all(_NUMERIC.fullmatch(field) for field in fields):
            raise VersionFormatError(f"Version fields must be numeric: {stripped!r}")
        major, minor, patch = fields
        return cls(major=major, minor=minor, patch=patch)

    def with_patch(self, patch: int) -> "Version":
        return self.model_copy(update={"patch": str(patch)})

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
