"""Tests for the Version model."""

import pytest

from pr_version_sync.errors import VersionFormatError
from pr_version_sync.models.version import Version


class TestVersionParse:
    def test_three_fields(self):
        version = Version.parse("1.2.41")
        assert (version.major, version.minor, version.patch) == ("1", "2", "41")

    def test_surrounding_whitespace_ignored(self):
        assert Version.parse("  0.1.300\n").patch == "300"

    @pytest.mark.parametrize("text", ["1.2", "1.2.3.4", "", "1..2.3"])
    def test_wrong_field_count(self, text):
        with pytest.raises(VersionFormatError):
            Version.parse(text)

    @pytest.mark.parametrize(
        "text", ["1.2.x", "1.b.3", "1.2.-3", "1.2. 3", "1.2.", "1.2\n.3", "1\n.2.3"]
    )
    def test_non_numeric_field(self, text):
        with pytest.raises(VersionFormatError):
            Version.parse(text)


class TestVersionPatch:
    def test_with_patch_keeps_major_minor(self):
        assert str(Version.parse("1.2.41").with_patch(57)) == "1.2.57"

    def test_zero_padded_patch_kept_as_written(self):
        version = Version.parse("1.2.057")
        assert version.patch == "057"
        assert str(version) == "1.2.057"

    def test_leading_zeros_preserved(self):
        assert str(Version.parse("01.002.7").with_patch(8)) == "01.002.8"

    def test_with_patch_does_not_mutate(self):
        version = Version.parse("1.2.41")
        version.with_patch(57)
        assert version.patch == "41"
