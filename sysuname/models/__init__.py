from .platformsample import PlatformSample
from .unamerecord import (
    RECORD_TYPES,
    BsdUnameRecord,
    DarwinUnameRecord,
    HpuxUnameRecord,
    LinuxUnameRecord,
    SolarisUnameRecord,
    UnameRecord,
    WindowsUnameRecord,
)

__all__ = [
    "PlatformSample",
    "RECORD_TYPES",
    "UnameRecord",
    "LinuxUnameRecord",
    "DarwinUnameRecord",
    "BsdUnameRecord",
    "HpuxUnameRecord",
    "SolarisUnameRecord",
    "WindowsUnameRecord",
]
