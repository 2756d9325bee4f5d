"""Distro identification: release-text parsing and executable probing.

Usage:
    from distrodetect.distro import classify, parse_release_text

    release = parse_release_text(text)
    if release.name == UNKNOWN:
        classify(release)
"""

# Import distro modules to trigger registration
from distrodetect.distro import (  # noqa: F401
    alpine,
    arch,
    debian,
    fedora,
    freebsd,
    gentoo,
    macos,
    opensuse,
    redhat,
    slackware,
    void,
)
from distrodetect.distro.apple import CodenameLookupError, apple_codename, refine_macos
from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import (
    classify,
    list_supported_distros,
    ordered_distros,
)
from distrodetect.distro.parser import parse_release_text, tokenize
from distrodetect.distro.tables import expand_name

__all__ = [
    "CodenameLookupError",
    "DistroConfig",
    "apple_codename",
    "classify",
    "expand_name",
    "list_supported_distros",
    "ordered_distros",
    "parse_release_text",
    "refine_macos",
    "tokenize",
]
