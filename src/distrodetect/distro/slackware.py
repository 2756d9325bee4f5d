"""Slackware detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class SlackwareDistro(DistroConfig):
    """Probe for Slackware via its package tools."""

    name = "Slackware"
    priority = 70
    executables = ["slapt-get", "slackpkg"]
