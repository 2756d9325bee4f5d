"""Detection pipeline that produces a Distro record."""

from __future__ import annotations

import logging
import os
import platform

from distrodetect import detection
from distrodetect.constants import OFFLINE_ENV_VAR, UNKNOWN
from distrodetect.distro import classify, expand_name, parse_release_text
from distrodetect.model import Distro, ReleaseInfo

log = logging.getLogger(__name__)


def remote_lookup_allowed() -> bool:
    """Check the environment for the offline switch."""
    return os.environ.get(OFFLINE_ENV_VAR, "").strip().lower() not in ("1", "true", "yes", "on")


def host_platform() -> str:
    """Capitalized OS family, e.g. "Linux" or "Darwin"."""
    system = platform.system()
    return system[:1].upper() + system[1:]


def detect(*, allow_remote: bool | None = None) -> Distro:
    """Detect the platform and distro/BSD of the running host.

    Never raises: whatever cannot be determined is left empty, and the name
    falls back to UNKNOWN.

    Args:
        allow_remote: Permit the network codename lookup on macOS.
            Defaults to enabled unless DISTRODETECT_OFFLINE is set.

    Returns:
        A new, read-only Distro
    """
    if allow_remote is None:
        allow_remote = remote_lookup_allowed()

    release = ReleaseInfo(platform=host_platform())
    raw_metadata = detection.read_release_text()

    parse_release_text(raw_metadata, release)
    release.name = expand_name(release.name)

    # Executable probing only when the release files said nothing useful
    if release.name == UNKNOWN:
        classify(release, allow_remote=allow_remote)

    log.debug("Detected %r", release)
    return Distro.from_release(release, raw_metadata)
