"""Debian detection from dpkg-query."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class DebianDistro(DistroConfig):
    """Probe for Debian via dpkg-query.

    Last resort: dpkg is packaged for several other distros.
    """

    name = "Debian"
    priority = 110
    executables = ["dpkg-query"]
