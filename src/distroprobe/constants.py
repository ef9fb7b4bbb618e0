"""Probe paths and tunables for distribution detection."""

# os-release locations, in priority order
OS_RELEASE_PATH = "/etc/os-release"
OS_RELEASE_FALLBACK_PATH = "/usr/lib/os-release"

LSB_RELEASE_PATH = "/etc/lsb-release"

# Vendor-specific release files probed after the standard ones
REDHAT_RELEASE_PATH = "/etc/redhat-release"
DEBIAN_VERSION_PATH = "/etc/debian_version"
ARCH_RELEASE_PATH = "/etc/arch-release"
SUSE_RELEASE_PATH = "/etc/SuSE-release"

LSB_RELEASE_COMMAND = "lsb_release"
LSB_RELEASE_ARGS = ("-a",)

# Seconds; upper bound for any external command
DEFAULT_COMMAND_TIMEOUT = 120.0

# Seconds; deadline the CLI gives a whole detection call
DEFAULT_DETECT_TIMEOUT = 10.0
