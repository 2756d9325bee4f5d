"""Red Hat detection from rpm."""

from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro


@register_distro
class RedHatDistro(DistroConfig):
    """Probe for Red Hat via rpm.

    rpm is available on many non-Red Hat systems, so this runs late.
    """

    name = "Red Hat"
    priority = 100
    executables = ["rpm"]
