"""macOS version and codename resolution."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.parse
import urllib.request
import xml.etree.ElementTree as ET

from distrodetect.constants import APPLE_LOOKUP_TIMEOUT, APPLE_LOOKUP_URL
from distrodetect.detection import run_command
from distrodetect.distro.tables import APPLE_CODENAMES
from distrodetect.model import ReleaseInfo

log = logging.getLogger(__name__)

CODENAME_PREFIXES = ("macOS ", "OS X ")


class CodenameLookupError(Exception):
    """Raised when Apple's product service does not return a codename."""


def apple_codename(version: str) -> str:
    """Look up a codename in the static table.

    Longer keys are tried first, so "10.10" is not taken for "10.1".

    Returns:
        Codename, or an empty string if no key is a prefix of version
    """
    for key in sorted(APPLE_CODENAMES, key=len, reverse=True):
        if version.startswith(key):
            return APPLE_CODENAMES[key]
    return ""


def codename_from_apple(version: str, timeout: float = APPLE_LOOKUP_TIMEOUT) -> str:
    """Fetch a codename from Apple's product service.

    Args:
        version: Version or build identifier
        timeout: Seconds to wait for the response

    Returns:
        Codename without the "macOS "/"OS X " prefix

    Raises:
        CodenameLookupError: On transport failure, bad XML or a missing configCode
    """
    url = APPLE_LOOKUP_URL.format(version=urllib.parse.quote(version))
    try:
        with urllib.request.urlopen(url, timeout=timeout) as response:
            data = response.read()
    except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
        raise CodenameLookupError(f"Could not fetch {url}: {e}") from e

    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise CodenameLookupError(f"Invalid XML from {url}: {e}") from e

    codename = (root.findtext(".//configCode") or "").strip()
    if not codename:
        raise CodenameLookupError(f"No codename returned from {url}")

    for prefix in CODENAME_PREFIXES:
        if codename.startswith(prefix):
            return codename[len(prefix):]
    return codename


def lookup_codename(version: str, allow_remote: bool = True) -> str:
    """Codename from the static table, falling back to Apple's service."""
    codename = apple_codename(version)
    if codename or not allow_remote or not version:
        return codename
    try:
        return codename_from_apple(version)
    except CodenameLookupError as e:
        log.debug("Remote codename lookup failed: %s", e)
        return ""


def platform_label(product_name: str) -> str:
    """Map the sw_vers product name to a platform label."""
    if product_name.startswith("Mac OS X"):
        return "OS X"
    if "macOS" in product_name:
        return "macOS"
    return product_name


def refine_macos(release: ReleaseInfo, *, allow_remote: bool = True) -> None:
    """Fill in platform, version and codename on macOS.

    macOS has no distribution, so the name is cleared.
    """
    product_name = run_command("sw_vers -productName").strip()
    version = run_command("sw_vers -productVersion").strip()
    log.debug("sw_vers reports %r %r", product_name, version)

    if product_name:
        release.platform = platform_label(product_name)
    release.version = version
    release.codename = lookup_codename(version, allow_remote=allow_remote)
    release.name = ""
