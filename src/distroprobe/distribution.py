"""Distribution model."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

from distroprobe.family import Family, classify

# Separators tried, in order, when splitting VERSION_ID
_VERSION_SEPARATORS = (".", "-", "_")


@dataclass(frozen=True)
class Distribution:
    """A detected Linux distribution.

    Every field defaults to an empty string when the source does not provide
    it. ``family`` is not accepted by the constructor: it is derived from
    ``id`` and ``id_like`` once, when the instance is built.
    """

    id: str = ""  # Lowercase short identifier (e.g., "ubuntu")
    name: str = ""
    version: str = ""  # Free-form (e.g., "24.04 LTS (Noble Numbat)")
    version_id: str = ""  # e.g., "24.04"
    version_codename: str = ""  # e.g., "noble"
    pretty_name: str = ""
    id_like: tuple[str, ...] | None = None  # None when the source declares none
    home_url: str = ""
    support_url: str = ""
    build_id: str = ""  # Set by some rolling releases
    family: Family = field(init=False)

    def __post_init__(self) -> None:
        if self.id_like is not None and not isinstance(self.id_like, tuple):
            object.__setattr__(self, "id_like", tuple(self.id_like))
        object.__setattr__(self, "family", classify(self.id, self.id_like))

    def __str__(self) -> str:
        if self.pretty_name:
            return self.pretty_name
        if self.name:
            if self.version_id:
                return f"{self.name} {self.version_id}"
            return self.name
        if self.id:
            return self.id
        return "Unknown Distribution"

    @property
    def is_debian(self) -> bool:
        return self.family is Family.DEBIAN

    @property
    def is_rhel(self) -> bool:
        return self.family is Family.RHEL

    @property
    def is_arch(self) -> bool:
        return self.family is Family.ARCH

    @property
    def is_suse(self) -> bool:
        return self.family is Family.SUSE

    @property
    def is_unknown(self) -> bool:
        return self.family is Family.UNKNOWN

    @property
    def major_version(self) -> str:
        """Leading component of version_id ("24.04" -> "24")."""
        if not self.version_id:
            return ""
        for sep in _VERSION_SEPARATORS:
            idx = self.version_id.find(sep)
            if idx > 0:
                return self.version_id[:idx]
        return self.version_id

    @property
    def minor_version(self) -> str:
        """Second component of version_id ("24.04" -> "04"), or ""."""
        if not self.version_id:
            return ""
        for sep in _VERSION_SEPARATORS:
            idx = self.version_id.find(sep)
            if 0 <= idx < len(self.version_id) - 1:
                remainder = self.version_id[idx + 1 :]
                for sep2 in _VERSION_SEPARATORS:
                    idx2 = remainder.find(sep2)
                    if idx2 > 0:
                        return remainder[:idx2]
                return remainder
        return ""

    @property
    def is_rolling(self) -> bool:
        """True for rolling releases (Arch family, Tumbleweed, BUILD_ID-only)."""
        if self.is_arch:
            return True
        if self.id == "opensuse-tumbleweed":
            return True
        return bool(self.build_id) and not self.version_id

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "id_like":
                value = list(value or ())
            elif f.name == "family":
                value = value.value
            data[f.name] = value
        return data
