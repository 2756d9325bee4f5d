"""openSUSE detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class OpenSUSEDistro(DistroConfig):
    """Probe for openSUSE via zypper."""

    name = "openSUSE"
    priority = 40
    executables = ["zypper"]
