"""Release-text parsing.

The release files under /etc are loosely structured ``KEY=value`` text.
Lines are tokenized into ``Field`` tuples and handed to per-key handlers
that fill in a ``ReleaseInfo``.

Precedence within one pass:
    - NAME= always overrides the substring match on known distro names
    - DISTRIB_CODENAME= always sets the codename, VERSION= only fills an empty one
    - DISTRIBVER= and DISTRIB_RELEASE= set the version when they contain a digit
    - OS_MAJOR_VERSION= only fills an empty version, OS_MINOR_VERSION= extends it
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import NamedTuple

from distrodetect.distro.tables import DISTRO_NAMES
from distrodetect.model import ReleaseInfo

log = logging.getLogger(__name__)

QUOTES = ('"', "'")


class Field(NamedTuple):
    """A single KEY=value line."""
    key: str
    value: str
    quote: str  # Quote character that was stripped, or ""


def capitalize(s: str) -> str:
    """Uppercase the first letter, leave the rest alone."""
    return s[:1].upper() + s[1:]


def contains_digit(s: str) -> bool:
    return any(c.isdigit() for c in s)


def unquote(value: str) -> tuple[str, str]:
    """Strip one matching pair of quotes.

    Returns:
        (value, quote) where quote is the stripped character or ""
    """
    if len(value) >= 2 and value[0] in QUOTES and value[-1] == value[0]:
        return value[1:-1], value[0]
    return value, ""


def tokenize(text: str) -> Iterator[Field]:
    """Yield a Field for every KEY=value line in text.

    Whitespace around the key and value is ignored, which also covers the
    NetBSD ``DISTRIBVER = '...'`` layout.
    """
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue
        value, quote = unquote(value.strip())
        value = value.strip()
        yield Field(key, value, quote)


def tidy_codename(value: str) -> str:
    """Capitalize a codename and unwrap a parenthesized part.

    "10 (buster)" -> "10 Buster"
    """
    value = capitalize(value)
    if "(" in value and ")" in value:
        before, _, rest = value.partition("(")
        inner, _, after = rest.partition(")")
        value = f"{before} {capitalize(inner.strip())} {after}"
    return " ".join(value.split())


def _handle_name(release: ReleaseInfo, field: Field) -> None:
    if field.value:
        release.name = field.value


def _handle_codename(release: ReleaseInfo, field: Field) -> None:
    if field.value:
        release.codename = tidy_codename(field.value)


def _handle_version_codename(release: ReleaseInfo, field: Field) -> None:
    if not release.codename:
        _handle_codename(release, field)


def _handle_release(release: ReleaseInfo, field: Field) -> None:
    # Placeholders without digits are not versions
    if contains_digit(field.value):
        release.version = field.value


def _handle_major(release: ReleaseInfo, field: Field) -> None:
    if not release.version and contains_digit(field.value):
        release.version = field.value


def _handle_minor(release: ReleaseInfo, field: Field) -> None:
    if release.version and "." not in release.version and contains_digit(field.value):
        release.version = f"{release.version}.{field.value}"


FIELD_HANDLERS: dict[str, Callable[[ReleaseInfo, Field], None]] = {
    "NAME": _handle_name,
    "DISTRIB_CODENAME": _handle_codename,
    "VERSION": _handle_version_codename,
    "DISTRIBVER": _handle_release,
    "DISTRIB_RELEASE": _handle_release,
    "OS_MAJOR_VERSION": _handle_major,
    "OS_MINOR_VERSION": _handle_minor,
}


def match_distro_name(text: str) -> str | None:
    """Find the first known distro name occurring in text.

    Each name is tried case-sensitively, then case-insensitively.
    """
    lowered = text.lower()
    for name in DISTRO_NAMES:
        if name in text or name.lower() in lowered:
            return name
    return None


def split_codename(release: ReleaseInfo) -> None:
    """Move a leading version token out of the codename.

    "18 Bionic" -> codename "Bionic", version "18" (if version was empty)
    """
    if " " not in release.codename:
        return
    first, rest = release.codename.split(None, 1)
    if not contains_digit(first):
        return
    if not release.version:
        release.version = first
    release.codename = rest


def parse_release_text(text: str, release: ReleaseInfo | None = None) -> ReleaseInfo:
    """Extract name, codename and version from release text.

    Args:
        text: Concatenated release file contents
        release: Draft to fill in (a fresh one is created if omitted)

    Returns:
        The filled-in ReleaseInfo
    """
    if release is None:
        release = ReleaseInfo()

    matched = match_distro_name(text)
    if matched:
        log.debug("Release text mentions %s", matched)
        release.name = matched

    for field in tokenize(text):
        handler = FIELD_HANDLERS.get(field.key)
        if handler:
            handler(release, field)

    split_codename(release)
    return release
