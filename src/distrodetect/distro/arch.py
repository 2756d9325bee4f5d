"""Arch Linux detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class ArchDistro(DistroConfig):
    """Probe for Arch Linux via pacman."""

    name = "Arch Linux"
    priority = 20
    executables = ["pacman"]
