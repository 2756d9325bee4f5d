"""Shared fixtures for distrodetect tests."""

from unittest.mock import patch

import pytest

UBUNTU_RELEASE = """\
DISTRIB_ID=Ubuntu
DISTRIB_RELEASE=18.04
DISTRIB_CODENAME=bionic
DISTRIB_DESCRIPTION="Ubuntu 18.04.1 LTS"
NAME="Ubuntu"
VERSION="18.04.1 LTS (Bionic Beaver)"
ID=ubuntu
ID_LIKE=debian
PRETTY_NAME="Ubuntu 18.04.1 LTS"
VERSION_ID="18.04"
"""

DEBIAN_RELEASE = """\
PRETTY_NAME="Debian GNU/Linux 10 (buster)"
NAME="Debian GNU/Linux"
VERSION_ID="10"
VERSION="10 (buster)"
ID=debian
"""

ARCH_RELEASE = """\
NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
BUILD_ID=rolling
"""

NETBSD_RELEASE = """\
NetBSD 8.0 (GENERIC) #0: Tue Jul 17 14:59:51 UTC 2018
DISTRIBVER = '8.0'
"""

CENTOS_RELEASE = """\
CentOS release 6.10 (Final)
OS_MAJOR_VERSION=6
OS_MINOR_VERSION=10
"""


@pytest.fixture
def no_executables():
    """Nothing resolves on the search path."""
    with patch("distrodetect.distro.base.has_executable", return_value=False) as mock_has:
        yield mock_has


@pytest.fixture
def offline(monkeypatch):
    """Remote codename lookup disabled through the environment."""
    monkeypatch.setenv("DISTRODETECT_OFFLINE", "1")


@pytest.fixture
def release_dir(tmp_path):
    """Temporary directory standing in for /etc."""
    etc = tmp_path / "etc"
    etc.mkdir()
    return etc


@pytest.fixture
def ubuntu_release():
    """lsb-release followed by os-release, as on Ubuntu 18.04."""
    return UBUNTU_RELEASE


@pytest.fixture
def debian_release():
    """os-release of Debian 10."""
    return DEBIAN_RELEASE


@pytest.fixture
def arch_release():
    """os-release of Arch Linux (no version fields)."""
    return ARCH_RELEASE


@pytest.fixture
def netbsd_release():
    """NetBSD-style release text with the spaced DISTRIBVER key."""
    return NETBSD_RELEASE


@pytest.fixture
def centos_release():
    """Release text with split major/minor version fields."""
    return CENTOS_RELEASE
