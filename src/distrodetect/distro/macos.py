"""macOS handling within the probe order."""

from distrodetect.distro.apple import refine_macos
from distrodetect.distro.base import DistroConfig
from distrodetect.distro.detector import register_distro
from distrodetect.model import ReleaseInfo


@register_distro
class MacOSDistro(DistroConfig):
    """Matches the Darwin platform family and hands over to the macOS refiner."""

    name = "macOS"
    priority = 80

    def matches(self, platform: str) -> bool:
        return platform == "Darwin"

    def apply(self, release: ReleaseInfo, *, allow_remote: bool = True) -> None:
        refine_macos(release, allow_remote=allow_remote)

    def describe(self) -> str:
        return f"{self.name}: platform Darwin"
