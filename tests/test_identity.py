"""Tests for the Distro identity record."""

import dataclasses
from unittest.mock import patch

import pytest

from distrodetect.constants import UNKNOWN
from distrodetect.model import Distro, ReleaseInfo


class TestSummary:
    """Test Distro.summary() rendering."""

    def test_all_fields(self):
        distro = Distro(platform="Linux", name="Ubuntu", codename="Bionic", version="18.04")
        assert distro.summary() == "Linux (Ubuntu Bionic 18.04)"

    def test_name_only(self):
        assert Distro(platform="Linux", name="Arch Linux").summary() == "Linux (Arch Linux)"

    def test_unknown_name_dropped(self):
        distro = Distro(platform="Linux", name=UNKNOWN, version="7")
        assert distro.summary() == "Linux (7)"

    def test_nothing_detected(self):
        """No empty parentheses and no trailing space."""
        assert Distro(platform="Linux").summary() == "Linux"

    def test_macos(self):
        distro = Distro(platform="macOS", name="", codename="Mojave", version="10.14")
        assert distro.summary() == "macOS (Mojave 10.14)"

    def test_str(self):
        distro = Distro(platform="Linux", name="Debian", codename="Buster", version="10")
        assert str(distro) == distro.summary()


class TestDistroRecord:
    """Test Distro construction and accessors."""

    def test_defaults(self):
        distro = Distro(platform="Linux")
        assert (distro.name, distro.codename, distro.version) == (UNKNOWN, "", "")
        assert distro.raw_metadata == ""

    def test_read_only(self):
        distro = Distro(platform="Linux")
        with pytest.raises(dataclasses.FrozenInstanceError):
            distro.name = "Debian"

    def test_from_release(self):
        release = ReleaseInfo(platform="Linux", name="Alpine", version="3.18.4")
        distro = Distro.from_release(release, "NAME=Alpine\n")
        assert distro == Distro(
            platform="Linux", name="Alpine", version="3.18.4", raw_metadata="NAME=Alpine\n"
        )

    def test_repr_hides_raw_metadata(self):
        distro = Distro(platform="Linux", raw_metadata="SECRET_LINE=1")
        assert "SECRET_LINE" not in repr(distro)

    def test_as_dict(self):
        distro = Distro(platform="Linux", name="Gentoo", raw_metadata="x")
        assert distro.as_dict() == {
            "platform": "Linux",
            "name": "Gentoo",
            "codename": "",
            "version": "",
        }

    @patch("distrodetect.engine.detect")
    def test_detect_classmethod(self, mock_detect):
        mock_detect.return_value = Distro(platform="Linux", name="Void Linux")
        assert Distro.detect(allow_remote=False).name == "Void Linux"
        mock_detect.assert_called_once_with(allow_remote=False)


class TestGrep:
    """Test Distro.grep() function."""

    def test_exact(self):
        assert Distro(platform="Linux", raw_metadata="NAME=Fedora").grep("Fedora") is True

    def test_case_insensitive(self):
        assert Distro(platform="Linux", raw_metadata="ID=fedora").grep("Fedora") is True

    def test_missing(self):
        assert Distro(platform="Linux", raw_metadata="ID=fedora").grep("Debian") is False
