"""Identity record produced by detection."""

from __future__ import annotations

from dataclasses import dataclass, field

from distrodetect.constants import UNKNOWN


@dataclass
class ReleaseInfo:
    """Mutable draft filled in by the detection stages."""
    platform: str = ""
    name: str = UNKNOWN
    codename: str = ""
    version: str = ""


@dataclass(frozen=True)
class Distro:
    """The detected platform and distro/BSD.

    Read-only after construction. ``name`` is ``UNKNOWN`` when nothing matched
    and empty on platforms without a distribution concept (macOS).
    """
    platform: str
    name: str = UNKNOWN
    codename: str = ""
    version: str = ""
    raw_metadata: str = field(default="", repr=False)

    @classmethod
    def detect(cls, *, allow_remote: bool | None = None) -> Distro:
        """Detect the running host. See ``distrodetect.engine.detect``."""
        from distrodetect.engine import detect

        return detect(allow_remote=allow_remote)

    @classmethod
    def from_release(cls, release: ReleaseInfo, raw_metadata: str = "") -> Distro:
        return cls(
            platform=release.platform,
            name=release.name,
            codename=release.codename,
            version=release.version,
            raw_metadata=raw_metadata,
        )

    def grep(self, text: str) -> bool:
        """Check if text occurs in the raw metadata.

        A case-insensitive search is attempted if the exact search fails.
        """
        return text in self.raw_metadata or text.lower() in self.raw_metadata.lower()

    def summary(self) -> str:
        """Format as "<platform> (<name> <codename> <version>)".

        The name is left out when it is unknown or empty, and the
        parenthesized group is left out when nothing is in it.
        """
        name = "" if self.name == UNKNOWN else self.name
        details = " ".join(part for part in (name, self.codename, self.version) if part)
        if not details:
            return self.platform
        return f"{self.platform} ({details})"

    def as_dict(self) -> dict[str, str]:
        return {
            "platform": self.platform,
            "name": self.name,
            "codename": self.codename,
            "version": self.version,
        }

    def __str__(self) -> str:
        return self.summary()
