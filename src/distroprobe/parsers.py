"""Parsers for distribution release files and command output.

Every parser is total: malformed content never raises, it just leaves the
corresponding fields empty. Deciding whether a sparse result is good enough
is the detector's job.
"""

from __future__ import annotations

import re
from typing import Iterator

from distroprobe.distribution import Distribution

# Keys recognized in os-release, mapped to Distribution fields
_OS_RELEASE_FIELDS = {
    "NAME": "name",
    "VERSION": "version",
    "VERSION_ID": "version_id",
    "VERSION_CODENAME": "version_codename",
    "PRETTY_NAME": "pretty_name",
    "HOME_URL": "home_url",
    "SUPPORT_URL": "support_url",
    "BUILD_ID": "build_id",
}

_LSB_RELEASE_FIELDS = {
    "DISTRIB_RELEASE": "version_id",
    "DISTRIB_CODENAME": "version_codename",
    "DISTRIB_DESCRIPTION": "pretty_name",
}

# (substring, id, name, id_like) checked in order against redhat-release
_REDHAT_VENDORS: list[tuple[str, str, str, tuple[str, ...] | None]] = [
    ("red hat", "rhel", "Red Hat Enterprise Linux", None),
    ("centos", "centos", "CentOS", None),
    ("fedora", "fedora", "Fedora", None),
    ("rocky", "rocky", "Rocky Linux", ("rhel", "centos", "fedora")),
    ("alma", "almalinux", "AlmaLinux", ("rhel", "centos", "fedora")),
]

_RELEASE_KEYWORD = re.compile("release", re.IGNORECASE)

DEBIAN_NAME = "Debian GNU/Linux"
ARCH_NAME = "Arch Linux"


def unquote(value: str) -> str:
    """Trim a value and strip one pair of matching surrounding quotes.

    No escape sequences are interpreted.
    """
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


def parse_id_like(value: str) -> tuple[str, ...] | None:
    """Split an ID_LIKE value into lowercase IDs.

    Returns:
        Tuple of IDs in declared order, or None if the value holds none
    """
    ids = tuple(part.strip().lower() for part in value.split())
    ids = tuple(part for part in ids if part)
    return ids or None


def _iter_key_values(content: str) -> Iterator[tuple[str, str]]:
    """Yield (key, unquoted value) pairs from KEY=VALUE text."""
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        # Keys are matched verbatim; "ID = x" does not set ID
        if not key:
            continue
        yield key, unquote(value)


def parse_os_release(content: str) -> Distribution:
    """Parse os-release content (/etc/os-release, /usr/lib/os-release)."""
    values: dict = {}
    for key, value in _iter_key_values(content):
        if key == "ID":
            values["id"] = value.lower()
        elif key == "ID_LIKE":
            values["id_like"] = parse_id_like(value)
        elif key in _OS_RELEASE_FIELDS:
            values[_OS_RELEASE_FIELDS[key]] = value
    return Distribution(**values)


def parse_lsb_release(content: str) -> Distribution:
    """Parse /etc/lsb-release content (DISTRIB_* keys)."""
    values: dict = {}
    for key, value in _iter_key_values(content):
        if key == "DISTRIB_ID":
            values["id"] = value.lower()
            values["name"] = value
        elif key in _LSB_RELEASE_FIELDS:
            values[_LSB_RELEASE_FIELDS[key]] = value
    return Distribution(**values)


def parse_redhat_release(content: str) -> Distribution:
    """Parse /etc/redhat-release.

    Handles lines such as:
        Red Hat Enterprise Linux release 9.0 (Plow)
        CentOS Linux release 7.9.2009 (Core)
        Rocky Linux release 9.3 (Blue Onyx)
    """
    content = content.strip()
    lowered = content.lower()

    distro_id, name, id_like = "rhel", "RHEL-based", None
    for needle, vendor_id, vendor_name, vendor_like in _REDHAT_VENDORS:
        if needle in lowered:
            distro_id, name, id_like = vendor_id, vendor_name, vendor_like
            break

    version_id = ""
    match = _RELEASE_KEYWORD.search(content)
    if match:
        remaining = content[match.end() :].strip()
        version_id = remaining.split(" ", 1)[0]

    return Distribution(
        id=distro_id,
        name=name,
        version_id=version_id,
        pretty_name=content,
        id_like=id_like,
    )


def parse_debian_version(content: str) -> Distribution:
    """Parse /etc/debian_version ("12.5" or "bookworm/sid")."""
    content = content.strip()
    version_id = content
    codename = ""
    if "/" in content:
        codename = content.split("/", 1)[0]
        version_id = ""

    if version_id:
        pretty_name = f"{DEBIAN_NAME} {version_id}"
    elif codename:
        pretty_name = f"{DEBIAN_NAME} ({codename})"
    else:
        pretty_name = DEBIAN_NAME

    return Distribution(
        id="debian",
        name=DEBIAN_NAME,
        version_id=version_id,
        version_codename=codename,
        pretty_name=pretty_name,
    )


def parse_arch_release(content: str = "") -> Distribution:
    """Build the Arch Linux record. /etc/arch-release content is ignored."""
    return Distribution(id="arch", name=ARCH_NAME, pretty_name=ARCH_NAME)


def parse_suse_release(content: str) -> Distribution:
    """Parse the legacy /etc/SuSE-release file.

    The first non-blank line is the product name; a ``VERSION = x`` line
    carries the version.
    """
    name = ""
    version_id = ""
    for line in content.splitlines():
        line = line.strip()
        if not line:
            continue
        if not name:
            name = line
        if line.startswith("VERSION"):
            _, sep, value = line.partition("=")
            if sep:
                version_id = value.strip()

    lowered = name.lower()
    if "tumbleweed" in lowered:
        distro_id = "opensuse-tumbleweed"
    elif "leap" in lowered:
        distro_id = "opensuse-leap"
    elif "sles" in lowered or "enterprise" in lowered:
        distro_id = "sles"
    else:
        distro_id = "opensuse"

    return Distribution(id=distro_id, name=name, version_id=version_id, pretty_name=name)


def parse_lsb_release_output(content: str) -> Distribution:
    """Parse the stdout of ``lsb_release -a`` ("Key:\\tValue" lines).

    An empty distributor ID is returned as-is; callers decide whether that
    is acceptable.
    """
    values: dict = {}
    for line in content.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()
        if key == "Distributor ID":
            values["id"] = value.lower()
            values["name"] = value
        elif key == "Description":
            values["pretty_name"] = value
        elif key == "Release":
            values["version_id"] = value
        elif key == "Codename":
            if value != "n/a":
                values["version_codename"] = value
    return Distribution(**values)
