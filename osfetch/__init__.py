"""
osfetch: tells you which OS, kernel, architecture and release the
current process runs on.
"""

from osfetch.kinds import Architecture, OperatingSystem
from osfetch.fetch import (
    Detection,
    OsFetch,
    default_fetch,
    ensure_populated,
    is_populated,
    get_operating_system,
    get_architecture,
    get_kernel_version,
    get_os_version_number,
    get_release_name,
    get_fully_constructed_release_name,
)

__version__ = "2.0.1"

__all__ = [
    "Architecture",
    "OperatingSystem",
    "Detection",
    "OsFetch",
    "default_fetch",
    "ensure_populated",
    "is_populated",
    "get_operating_system",
    "get_architecture",
    "get_kernel_version",
    "get_os_version_number",
    "get_release_name",
    "get_fully_constructed_release_name",
]
