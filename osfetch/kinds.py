# osfetch/kinds.py

from enum import Enum


class _Kind(Enum):
    """
    Enum whose members carry their commonly used names.
    Index 0 is always the official name.
    """

    def __init__(self, *names):
        self.names = names

    @property
    def canonical_name(self) -> str:
        return self.names[0]

    @classmethod
    def resolve(cls, name):
        """
        Return the member listing `name` among its names (exact match),
        or OTHER when none does.
        """
        for kind in cls:
            if name in kind.names:
                return kind
        return cls.OTHER

    def __str__(self):
        return self.canonical_name


class Architecture(_Kind):
    X86_64 = ("x86_64", "x64", "amd64")
    AARCH64 = ("aarch64", "arm64")
    OTHER = ("other",)


class OperatingSystem(_Kind):
    WINDOWS = ("Windows", "Windows NT", "WinNT", "Win32")
    MAC_OS = ("macOS", "OS X", "Mac OS X", "Mac OS")
    LINUX = ("Linux", "GNU/Linux")
    OTHER = ("other",)
