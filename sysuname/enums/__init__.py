from .osfamily import OSFamily
from .systemlocation import SystemLocation

__all__ = [
    "OSFamily",
    "SystemLocation",
]
