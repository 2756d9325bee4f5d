"""Gentoo Linux detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class GentooDistro(DistroConfig):
    """Probe for Gentoo via portage."""

    name = "Gentoo"
    priority = 50
    executables = ["emerge"]
