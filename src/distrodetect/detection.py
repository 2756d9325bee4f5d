"""System probing utilities: release files and executables."""

from __future__ import annotations

import glob
import logging
import os
import shutil
import subprocess
from pathlib import Path

from distrodetect.constants import COMMAND_TIMEOUT, ISSUE_PATH, RELEASE_GLOB

log = logging.getLogger(__name__)


def read_release_text(pattern: str = RELEASE_GLOB, fallback: str = ISSUE_PATH) -> str:
    """Collect the contents of every release file plus the issue file.

    Files are read in sorted glob order, then the fallback file is appended.
    Unreadable files are skipped.

    Args:
        pattern: Glob pattern matching release files
        fallback: Extra file appended after the glob matches

    Returns:
        Concatenated text, or an empty string if nothing could be read
    """
    chunks = []
    for filename in [*sorted(glob.glob(pattern)), fallback]:
        path = Path(filename)
        try:
            text = path.read_text(errors="replace")
        except OSError as e:
            log.debug("Skipping %s: %s", path, e)
            continue
        if text and not text.endswith("\n"):
            text += "\n"
        chunks.append(text)
    return "".join(chunks)


def resolve_executable(executable: str) -> Path | None:
    """Resolve an executable name to its path without running it.

    Args:
        executable: Command name, or an absolute path

    Returns:
        Path to the executable, or None if not found
    """
    if not executable:
        return None

    if os.path.isabs(executable):
        if os.path.isfile(executable) and os.access(executable, os.X_OK):
            return Path(executable)
        return None

    # Search PATH
    resolved = shutil.which(executable)
    return Path(resolved) if resolved else None


def has_executable(executable: str) -> bool:
    """Check if an executable is available on the search path."""
    return resolve_executable(executable) is not None


def run_command(shell_command: str, timeout: float = COMMAND_TIMEOUT) -> str:
    """Run a shell command and return its combined output.

    Args:
        shell_command: Command line passed to ``sh -c``
        timeout: Seconds to wait before giving up

    Returns:
        stdout and stderr combined, or an empty string on any failure
    """
    try:
        result = subprocess.run(
            ["sh", "-c", shell_command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as e:
        log.debug("Command %r failed: %s", shell_command, e)
        return ""
    if result.returncode != 0:
        log.debug("Command %r exited with %d", shell_command, result.returncode)
        return ""
    return result.stdout
