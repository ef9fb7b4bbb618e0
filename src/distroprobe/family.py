"""Distribution family classification."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Family(str, Enum):
    """Coarse distribution family used to pick a package manager."""

    DEBIAN = "debian"
    RHEL = "rhel"
    ARCH = "arch"
    SUSE = "suse"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


# Distribution IDs that belong to a family outright
FAMILY_MEMBERS: dict[Family, frozenset[str]] = {
    Family.DEBIAN: frozenset(
        [
            "debian",
            "ubuntu",
            "linuxmint",
            "pop",
            "elementary",
            "zorin",
            "kali",
            "mx",
            "lmde",
            "raspbian",
            "devuan",
        ]
    ),
    Family.RHEL: frozenset(
        ["fedora", "rhel", "centos", "rocky", "almalinux", "ol", "amzn", "scientific", "oracle"]
    ),
    Family.ARCH: frozenset(
        ["arch", "manjaro", "endeavouros", "garuda", "artix", "arcolinux", "archcraft", "archbang"]
    ),
    Family.SUSE: frozenset(["opensuse", "opensuse-leap", "opensuse-tumbleweed", "sles", "suse"]),
}

# ID_LIKE entries that mark a derivative of a family
FAMILY_PARENTS: dict[Family, frozenset[str]] = {
    Family.DEBIAN: frozenset(["debian", "ubuntu"]),
    Family.RHEL: frozenset(["fedora", "rhel", "centos"]),
    Family.ARCH: frozenset(["arch"]),
    Family.SUSE: frozenset(["suse", "opensuse"]),
}


def _lookup(table: dict[Family, frozenset[str]], distro_id: str) -> Family | None:
    for family, ids in table.items():
        if distro_id in ids:
            return family
    return None


def classify(distro_id: str, id_like: Iterable[str] | None = None) -> Family:
    """Classify a distribution into a family.

    A direct match on the ID wins. Otherwise the first ID_LIKE entry naming
    a known parent distribution decides, so unlisted derivatives still
    resolve.

    Args:
        distro_id: Distribution ID (e.g., "ubuntu"), any case
        id_like: Related distribution IDs in declared order, or None

    Returns:
        The matching Family, or Family.UNKNOWN
    """
    family = _lookup(FAMILY_MEMBERS, distro_id.lower())
    if family is not None:
        return family

    for like in id_like or ():
        family = _lookup(FAMILY_PARENTS, like.lower())
        if family is not None:
            return family

    return Family.UNKNOWN


def list_family_members(family: Family) -> list[str]:
    """Get the distribution IDs that directly belong to a family.

    Returns:
        Sorted list of IDs (empty for Family.UNKNOWN)
    """
    return sorted(FAMILY_MEMBERS.get(family, frozenset()))
