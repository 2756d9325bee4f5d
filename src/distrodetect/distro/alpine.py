"""Alpine Linux detection."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class AlpineDistro(DistroConfig):
    """Probe for Alpine via apk."""

    name = "Alpine"
    priority = 60
    executables = ["apk"]
