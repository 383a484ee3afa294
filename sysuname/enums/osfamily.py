import enum


class OSFamily(enum.Enum):
    """Enum describing operating system family of the queried host"""

    WINDOWS = enum.auto()
    DARWIN = enum.auto()
    LINUX = enum.auto()
    SOLARIS = enum.auto()
    BSD = enum.auto()
    HPUX = enum.auto()
    UNKNOWN = enum.auto()
