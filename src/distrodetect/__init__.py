"""Best-effort detection of the host's Linux distribution or BSD."""

from distrodetect.constants import UNKNOWN, VERSION
from distrodetect.engine import detect
from distrodetect.model import Distro

__version__ = VERSION

__all__ = ["Distro", "UNKNOWN", "detect"]
