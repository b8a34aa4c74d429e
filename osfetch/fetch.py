# osfetch/fetch.py

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

from osfetch.kinds import Architecture, OperatingSystem
from osfetch.utils.osdetect import (
    SystemProperties,
    query_kernel_version,
    read_release_file,
    system_properties,
)

logger = logging.getLogger(__name__)

OS_RELEASE = "/etc/os-release"
LSB_RELEASE = "/etc/lsb-release"

DARWIN_FAILED = "Failed to determine Darwin version"
RELEASE_VERSION_FAILED = "Failed to determine Release version"
RELEASE_NAME_FAILED = "Failed to determine Release Name"

# keyed on the two characters after "10."
LEGACY_MACOS_NAMES = {
    "14": "Mojave",
    "15": "Catalina",
    "16": "Big Sur",  # early Big Sur builds reported 10.16
}
MACOS_NAMES = {
    "11": "Big Sur",
    "12": "Monterey",
    "13": "Ventura",
}


@dataclass(frozen=True)
class Detection:
    """Everything osfetch knows about the host."""
    operating_system: OperatingSystem
    architecture: Architecture
    kernel_version: str
    os_version_number: str
    release_name: str
    fully_constructed_release_name: str

    def to_dict(self) -> dict:
        return {
            "operating_system": self.operating_system.canonical_name,
            "architecture": self.architecture.canonical_name,
            "kernel_version": self.kernel_version,
            "os_version_number": self.os_version_number,
            "release_name": self.release_name,
            "fully_constructed_release_name": self.fully_constructed_release_name,
        }


def codename(version: str) -> str:
    """
    "22.04.1 LTS (Jammy Jellyfish)" -> "Jammy Jellyfish".
    Takes the text after the first "(" up to the last ")".
    """
    _, sep, rest = version.partition("(")
    if not sep:
        rest = version
    head, sep, _ = rest.rpartition(")")
    return head if sep else rest


def macos_release_name(version: str) -> str:
    if version.startswith("10."):
        return LEGACY_MACOS_NAMES.get(version[3:5], "Pre-Mojave macOS")
    return MACOS_NAMES.get(version[0:2], "Post-Ventura macOS")


class OsFetch:
    """
    Detects the host OS once and serves the result for the rest of the
    process. Collaborators can be swapped out:

    - properties: SystemProperties, read from `platform` when omitted
    - os_release_path / lsb_release_path: Linux metadata files
    - kernel_query: callable returning the `uname -r` line or None
    """

    def __init__(
        self,
        properties: Optional[SystemProperties] = None,
        os_release_path=OS_RELEASE,
        lsb_release_path=LSB_RELEASE,
        kernel_query: Optional[Callable[[], Optional[str]]] = None,
    ):
        self._properties = properties
        self.os_release_path = os_release_path
        self.lsb_release_path = lsb_release_path
        self._kernel_query = kernel_query or query_kernel_version
        self._lock = threading.Lock()
        self._detection: Optional[Detection] = None

    def ensure_populated(self):
        if self._detection is not None:
            return
        with self._lock:
            if self._detection is None:
                self._detection = self._detect()

    def is_populated(self) -> bool:
        return self._detection is not None

    def detection(self) -> Detection:
        self.ensure_populated()
        return self._detection

    def get_operating_system(self) -> OperatingSystem:
        return self.detection().operating_system

    def get_architecture(self) -> Architecture:
        return self.detection().architecture

    def get_kernel_version(self) -> str:
        """Linux kernel version, 'NT <version>' on Windows, 'Darwin <version>' on macOS."""
        return self.detection().kernel_version

    def get_os_version_number(self) -> str:
        """'11' on Windows 11, '22.04' on Ubuntu 22.04, '13.1' on macOS Ventura."""
        return self.detection().os_version_number

    def get_release_name(self) -> str:
        return self.detection().release_name

    def get_fully_constructed_release_name(self) -> str:
        """OS, version and release name in one string. Kernel version not included."""
        return self.detection().fully_constructed_release_name

    def _detect(self) -> Detection:
        props = self._properties or system_properties()
        os_name, os_version, os_arch = props

        operating_system = OperatingSystem.resolve(os_name)
        architecture = Architecture.resolve(os_arch)
        # "Windows 11" and friends aren't in the name table
        if operating_system is OperatingSystem.OTHER and (os_name or "").startswith("Windows"):
            operating_system = OperatingSystem.WINDOWS
        logger.debug("Detecting %s/%s from %r", operating_system, architecture, props)

        os_release, lsb_release = {}, {}
        if operating_system is OperatingSystem.LINUX:
            os_release = read_release_file(self.os_release_path)
            lsb_release = read_release_file(self.lsb_release_path)

        kernel_version = self._kernel_version(operating_system, os_version)
        version_number = self._version_number(operating_system, os_name, os_version, os_release, lsb_release)
        release_name = self._release_name(operating_system, version_number, os_release, lsb_release)

        if operating_system is OperatingSystem.WINDOWS:
            full_name = f"Microsoft {os_name}"
        elif operating_system is OperatingSystem.MAC_OS:
            full_name = f'macOS {os_version} "{release_name}"'
        elif operating_system is OperatingSystem.LINUX:
            full_name = f"{version_number} ({release_name})"
        else:
            full_name = "Other OS"

        return Detection(
            operating_system=operating_system,
            architecture=architecture,
            kernel_version=kernel_version,
            os_version_number=version_number,
            release_name=release_name,
            fully_constructed_release_name=full_name,
        )

    def _kernel_version(self, operating_system, os_version) -> str:
        if operating_system is OperatingSystem.WINDOWS:
            return f"NT {os_version}"
        if operating_system is OperatingSystem.LINUX:
            return os_version
        if operating_system is OperatingSystem.MAC_OS:
            line = self._kernel_query()
            if line is None:
                logger.debug("Falling back to %r", DARWIN_FAILED)
                return DARWIN_FAILED
            return f"Darwin {line}"
        return ""

    @staticmethod
    def _version_number(operating_system, os_name, os_version, os_release, lsb_release) -> str:
        if operating_system is OperatingSystem.WINDOWS:
            return os_name.replace("Windows ", "")
        if operating_system is OperatingSystem.MAC_OS:
            return os_version
        if operating_system is OperatingSystem.LINUX:
            return os_release.get(
                "VERSION_ID", lsb_release.get("DISTRIB_RELEASE", RELEASE_VERSION_FAILED)
            )
        return "Unknown"

    @staticmethod
    def _release_name(operating_system, version_number, os_release, lsb_release) -> str:
        if operating_system is OperatingSystem.WINDOWS:
            return "Windows"
        if operating_system is OperatingSystem.MAC_OS:
            return macos_release_name(version_number)
        if operating_system is OperatingSystem.LINUX:
            if "VERSION" in os_release:
                return codename(os_release["VERSION"])
            if "PRETTY_NAME" in os_release:
                return os_release["PRETTY_NAME"]
            return lsb_release.get("DISTRIB_DESCRIPTION", RELEASE_NAME_FAILED)
        return ""


_default = None
_default_lock = threading.Lock()


def default_fetch() -> OsFetch:
    """The process-wide OsFetch, created on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = OsFetch()
    return _default


def ensure_populated():
    default_fetch().ensure_populated()


def is_populated() -> bool:
    return _default is not None and _default.is_populated()


def get_operating_system() -> OperatingSystem:
    return default_fetch().get_operating_system()


def get_architecture() -> Architecture:
    return default_fetch().get_architecture()


def get_kernel_version() -> str:
    return default_fetch().get_kernel_version()


def get_os_version_number() -> str:
    return default_fetch().get_os_version_number()


def get_release_name() -> str:
    return default_fetch().get_release_name()


def get_fully_constructed_release_name() -> str:
    return default_fetch().get_fully_constructed_release_name()
