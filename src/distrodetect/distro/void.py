"""Void Linux detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class VoidDistro(DistroConfig):
    """Probe for Void Linux via xbps."""

    name = "Void Linux"
    priority = 10
    executables = ["xbps-query"]
