from .bsdsource import BsdSource
from .darwinsource import DarwinSource
from .hpuxsource import HpuxSource
from .linuxsource import LinuxSource
from .posixsource import PosixSource
from .solarissource import SolarisSource
from .unamesource import UnameSource, get_source_class
from .unknownsource import UnknownSource
from .windowssource import WindowsSource

__all__ = [
    "UnameSource",
    "PosixSource",
    "LinuxSource",
    "DarwinSource",
    "BsdSource",
    "SolarisSource",
    "HpuxSource",
    "WindowsSource",
    "UnknownSource",
    "get_source_class",
]
