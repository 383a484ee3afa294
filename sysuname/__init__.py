from .enums import OSFamily
from .errors import UnameError
from .facade import architecture, machine, nodename, release, sysname, uname, version
from .models import (
    BsdUnameRecord,
    DarwinUnameRecord,
    HpuxUnameRecord,
    LinuxUnameRecord,
    SolarisUnameRecord,
    UnameRecord,
    WindowsUnameRecord,
)

__all__ = [
    "sysname",
    "nodename",
    "machine",
    "architecture",
    "release",
    "version",
    "uname",
    "UnameError",
    "OSFamily",
    "UnameRecord",
    "LinuxUnameRecord",
    "DarwinUnameRecord",
    "BsdUnameRecord",
    "SolarisUnameRecord",
    "HpuxUnameRecord",
    "WindowsUnameRecord",
]
