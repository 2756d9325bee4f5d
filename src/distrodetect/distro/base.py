"""Base class for distro families recognized by executable probing."""

from typing import ClassVar

from distrodetect.detection import has_executable
from distrodetect.model import ReleaseInfo


class DistroConfig:
    """A distro family and the signals that identify it.

    Subclasses set ``executables`` (any one being on PATH is a match) or
    override ``matches`` for other checks.
    """

    name: ClassVar[str]  # Display name (e.g., "Arch Linux")
    priority: ClassVar[int]  # Lower values are probed first
    executables: ClassVar[list[str]] = []  # Package manager tools (e.g., ["pacman"])

    def matches(self, platform: str) -> bool:
        """Check if this family's executables are present.

        Args:
            platform: Capitalized OS family (e.g., "Linux", "Darwin")

        Returns:
            True if any executable resolves on the search path
        """
        return any(has_executable(executable) for executable in self.executables)

    def apply(self, release: ReleaseInfo, *, allow_remote: bool = True) -> None:
        """Record this family as the detected distro."""
        release.name = self.name

    def describe(self) -> str:
        """One-line description of what is probed."""
        return f"{self.name}: {', '.join(self.executables)}"
