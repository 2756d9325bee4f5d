"""Executable-presence classification and the distro registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from distrodetect.distro.base import DistroConfig
    from distrodetect.model import ReleaseInfo

log = logging.getLogger(__name__)

# Registry of all distro families, in registration order
_distro_registry: list[type["DistroConfig"]] = []


def register_distro(cls: type["DistroConfig"]) -> type["DistroConfig"]:
    """Decorator to register a distro family for probing.

    Args:
        cls: The DistroConfig subclass to register

    Returns:
        The same class (unchanged)
    """
    if cls not in _distro_registry:
        _distro_registry.append(cls)
    return cls


def ordered_distros() -> list["DistroConfig"]:
    """Instances of all registered families, in probe order.

    rpm and dpkg-query are shipped by many distros, so they sort last.
    """
    return [cls() for cls in sorted(_distro_registry, key=lambda cls: cls.priority)]


def list_supported_distros() -> list[str]:
    """Get the names of the probed families, in probe order."""
    names = []
    for distro in ordered_distros():
        if distro.name not in names:
            names.append(distro.name)
    return names


def classify(release: "ReleaseInfo", *, allow_remote: bool = True) -> "DistroConfig | None":
    """Identify the distro from which executables are present.

    The first matching family in probe order is applied to release.

    Args:
        release: Draft to update
        allow_remote: Passed on to families that may do network lookups

    Returns:
        The matching DistroConfig, or None if nothing matched
    """
    for distro in ordered_distros():
        if distro.matches(release.platform):
            log.debug("Probe matched %s", distro.name)
            distro.apply(release, allow_remote=allow_remote)
            return distro
    return None
