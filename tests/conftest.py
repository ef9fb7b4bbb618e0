"""Shared fixtures for distroprobe tests."""

import pytest

from distroprobe.commands import CommandResult
from distroprobe.context import DetectContext
from distroprobe.detector import Detector
from distroprobe.family import Family
from distroprobe.mock import MockCommandRunner, MockFileReader

UBUNTU_2404 = """PRETTY_NAME="Ubuntu 24.04 LTS"
NAME="Ubuntu"
VERSION_ID="24.04"
VERSION="24.04 LTS (Noble Numbat)"
VERSION_CODENAME=noble
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
SUPPORT_URL="https://help.ubuntu.com/"
"""

UBUNTU_2204 = """PRETTY_NAME="Ubuntu 22.04.3 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04.3 LTS (Jammy Jellyfish)"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
"""

DEBIAN_12 = """PRETTY_NAME="Debian GNU/Linux 12 (bookworm)"
NAME="Debian GNU/Linux"
VERSION_ID="12"
VERSION="12 (bookworm)"
VERSION_CODENAME=bookworm
ID=debian
HOME_URL="https://www.debian.org/"
"""

FEDORA_40 = """NAME="Fedora Linux"
VERSION="40 (Workstation Edition)"
ID=fedora
VERSION_ID=40
PRETTY_NAME="Fedora Linux 40 (Workstation Edition)"
HOME_URL="https://fedoraproject.org/"
"""

RHEL_9 = """NAME="Red Hat Enterprise Linux"
VERSION="9.0 (Plow)"
ID="rhel"
ID_LIKE="fedora"
VERSION_ID="9.0"
PRETTY_NAME="Red Hat Enterprise Linux 9.0 (Plow)"
"""

ROCKY_9 = """NAME="Rocky Linux"
VERSION="9.0 (Blue Onyx)"
ID="rocky"
ID_LIKE="rhel centos fedora"
VERSION_ID="9.0"
PRETTY_NAME="Rocky Linux 9.0 (Blue Onyx)"
"""

ALMALINUX_9 = """NAME="AlmaLinux"
VERSION="9.0 (Emerald Puma)"
ID="almalinux"
ID_LIKE="rhel centos fedora"
VERSION_ID="9.0"
PRETTY_NAME="AlmaLinux 9.0 (Emerald Puma)"
"""

CENTOS_7 = """NAME="CentOS Linux"
VERSION="7 (Core)"
ID="centos"
ID_LIKE="rhel fedora"
VERSION_ID="7"
PRETTY_NAME="CentOS Linux 7 (Core)"
"""

ARCH = """NAME="Arch Linux"
PRETTY_NAME="Arch Linux"
ID=arch
BUILD_ID=rolling
"""

MANJARO = """NAME="Manjaro Linux"
PRETTY_NAME="Manjaro Linux"
ID=manjaro
ID_LIKE=arch
VERSION_ID="23.1.0"
"""

ENDEAVOUROS = """NAME="EndeavourOS"
PRETTY_NAME="EndeavourOS"
ID=endeavouros
ID_LIKE=arch
VERSION_ID="2024.01.25"
BUILD_ID=rolling
"""

OPENSUSE_LEAP_155 = """NAME="openSUSE Leap"
VERSION="15.5"
ID="opensuse-leap"
ID_LIKE="suse opensuse"
VERSION_ID="15.5"
PRETTY_NAME="openSUSE Leap 15.5"
"""

OPENSUSE_TUMBLEWEED = """NAME="openSUSE Tumbleweed"
ID="opensuse-tumbleweed"
ID_LIKE="opensuse suse"
VERSION_ID="20240101"
PRETTY_NAME="openSUSE Tumbleweed"
"""

LINUX_MINT = """NAME="Linux Mint"
VERSION="21.2 (Victoria)"
ID=linuxmint
ID_LIKE="ubuntu debian"
VERSION_ID="21.2"
VERSION_CODENAME=victoria
PRETTY_NAME="Linux Mint 21.2"
"""

POP_OS = """NAME="Pop!_OS"
VERSION="22.04 LTS"
ID=pop
ID_LIKE="ubuntu debian"
VERSION_ID="22.04"
VERSION_CODENAME=jammy
PRETTY_NAME="Pop!_OS 22.04 LTS"
"""

# (label, os-release content, expected id, expected family)
OS_RELEASE_TABLE = [
    ("ubuntu-24.04", UBUNTU_2404, "ubuntu", Family.DEBIAN),
    ("ubuntu-22.04", UBUNTU_2204, "ubuntu", Family.DEBIAN),
    ("debian-12", DEBIAN_12, "debian", Family.DEBIAN),
    ("fedora-40", FEDORA_40, "fedora", Family.RHEL),
    ("rhel-9", RHEL_9, "rhel", Family.RHEL),
    ("rocky-9", ROCKY_9, "rocky", Family.RHEL),
    ("almalinux-9", ALMALINUX_9, "almalinux", Family.RHEL),
    ("centos-7", CENTOS_7, "centos", Family.RHEL),
    ("arch", ARCH, "arch", Family.ARCH),
    ("manjaro", MANJARO, "manjaro", Family.ARCH),
    ("endeavouros", ENDEAVOUROS, "endeavouros", Family.ARCH),
    ("opensuse-leap-15.5", OPENSUSE_LEAP_155, "opensuse-leap", Family.SUSE),
    ("opensuse-tumbleweed", OPENSUSE_TUMBLEWEED, "opensuse-tumbleweed", Family.SUSE),
    ("linuxmint", LINUX_MINT, "linuxmint", Family.DEBIAN),
    ("pop", POP_OS, "pop", Family.DEBIAN),
]

LSB_RELEASE_OUTPUT = """Distributor ID:\tUbuntu
Description:\tUbuntu 22.04 LTS
Release:\t22.04
Codename:\tjammy
"""


@pytest.fixture
def reader():
    """Empty in-memory filesystem."""
    return MockFileReader()


@pytest.fixture
def runner():
    """Command runner with no canned responses (every command is missing)."""
    return MockCommandRunner()


@pytest.fixture
def detector(reader, runner):
    """Detector wired to the mock reader and runner."""
    return Detector(runner=runner, reader=reader)


@pytest.fixture
def lsb_runner():
    """Command runner whose lsb_release reports Ubuntu 22.04."""
    runner = MockCommandRunner()
    runner.set_response("lsb_release", CommandResult.success(LSB_RELEASE_OUTPUT))
    return runner


@pytest.fixture
def cancelled_ctx():
    """Context cancelled before use."""
    ctx = DetectContext.background()
    ctx.cancel()
    return ctx
