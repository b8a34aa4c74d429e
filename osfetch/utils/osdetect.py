import logging
import pathlib
import platform
import subprocess
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

UNAME_TIMEOUT = 20
WIN11_FIRST_BUILD = 22000


class SystemProperties(NamedTuple):
    name: str
    version: str
    arch: str


def windows_release(release: str, version: str) -> str:
    """
    Python before 3.12 reports release "10" on Windows 11; the build
    number (third part of the version) tells them apart.
    """
    parts = version.split(".")
    if release == "10" and len(parts) > 2 and parts[2].isdigit() and int(parts[2]) >= WIN11_FIRST_BUILD:
        return "11"
    return release


def system_properties() -> SystemProperties:
    """
    Raw OS name, version and architecture, spelled the way a JVM reports
    os.name / os.version / os.arch.
    """
    system = platform.system()
    if system == "Darwin":
        name = "Mac OS X"
        version = platform.mac_ver()[0] or platform.release()
    elif system == "Windows":
        name = f"Windows {windows_release(platform.release(), platform.version())}"
        version = ".".join(platform.version().split(".")[:2])
    else:
        name = system
        version = platform.release()
    return SystemProperties(name, version, platform.machine().lower())


def parse_release(text: str) -> dict:
    """
    Parse KEY=VALUE lines of an os-release style file.
    Lines that don't split into exactly a key and a value are skipped.
    """
    data = {}
    for line in text.splitlines():
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        parts = line.split("=")
        if len(parts) != 2 or not parts[1]:
            continue
        k, v = parts
        data[k.strip()] = v.strip().replace('"', "")
    return data


def read_release_file(path) -> dict:
    path = pathlib.Path(path)
    if not path.exists():
        logger.debug("%s not present", path)
        return {}
    try:
        return parse_release(path.read_text())
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Reading %s failed → %s", path, e)
        return {}


def query_kernel_version(timeout: float = UNAME_TIMEOUT) -> Optional[str]:
    """
    First line of `uname -r`, or None if it can't be run or prints nothing.
    """
    try:
        out = subprocess.run(
            ["uname", "-r"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
            timeout=timeout,
        ).stdout
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        logger.debug("uname -r failed → %s", e)
        return None
    lines = out.splitlines()
    if not lines:
        logger.debug("uname -r printed nothing")
        return None
    return lines[0]
