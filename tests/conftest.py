import pytest

from osfetch.fetch import OsFetch
from osfetch.utils.osdetect import SystemProperties

JAMMY_OS_RELEASE = """\
PRETTY_NAME="Ubuntu 22.04.1 LTS"
NAME="Ubuntu"
VERSION_ID="22.04"
VERSION="22.04.1 LTS (Jammy Jellyfish)"
VERSION_CODENAME=jammy
ID=ubuntu
ID_LIKE=debian
HOME_URL="https://www.ubuntu.com/"
"""

JAMMY_LSB_RELEASE = """\
DISTRIB_ID=Ubuntu
DISTRIB_RELEASE=22.04
DISTRIB_CODENAME=jammy
DISTRIB_DESCRIPTION="Ubuntu 22.04.1 LTS"
"""


@pytest.fixture
def release_files(tmp_path):
    """
    Returns a helper writing os-release / lsb-release contents into tmp_path.
    Passing None leaves the file out.
    """
    def write(os_release=None, lsb_release=None):
        os_path = tmp_path / "os-release"
        lsb_path = tmp_path / "lsb-release"
        if os_release is not None:
            os_path.write_text(os_release)
        if lsb_release is not None:
            lsb_path.write_text(lsb_release)
        return os_path, lsb_path

    return write


@pytest.fixture
def make_fetch(release_files):
    """
    Builds an OsFetch over fake properties and release files; uname never runs.
    """
    def make(name, version="", arch="amd64", os_release=None, lsb_release=None, uname="22.2.0"):
        os_path, lsb_path = release_files(os_release, lsb_release)
        return OsFetch(
            properties=SystemProperties(name, version, arch),
            os_release_path=os_path,
            lsb_release_path=lsb_path,
            kernel_query=lambda: uname,
        )

    return make
