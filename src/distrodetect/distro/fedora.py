"""Fedora detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class FedoraDistro(DistroConfig):
    """Probe for Fedora via dnf, or yum on older releases."""

    name = "Fedora"
    priority = 30
    executables = ["dnf", "yum"]
