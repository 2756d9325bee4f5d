"""Data model for distrodetect."""

from distrodetect.model.identity import Distro, ReleaseInfo

__all__ = ["Distro", "ReleaseInfo"]
