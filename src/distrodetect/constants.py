"""Constants for distrodetect."""

VERSION = "1.0.0"

# Release metadata sources
RELEASE_GLOB = "/etc/*release*"
ISSUE_PATH = "/etc/issue"

# Sentinel distro name when nothing matched
UNKNOWN = "Unknown"

APPLE_LOOKUP_URL = "https://support-sp.apple.com/sp/product?edid={version}"
APPLE_LOOKUP_TIMEOUT = 5  # seconds
COMMAND_TIMEOUT = 10  # seconds

# Set to a true value to skip the remote codename lookup
OFFLINE_ENV_VAR = "DISTRODETECT_OFFLINE"
