"""FreeBSD detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class FreeBSDDistro(DistroConfig):
    """Probe for FreeBSD via pkg(8)."""

    name = "FreeBSD"
    priority = 90
    executables = ["/usr/sbin/pkg"]
