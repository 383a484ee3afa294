import enum


class SystemLocation(enum.Enum):
    """Enum defining location of the queried host"""

    LOCAL = enum.auto()
    REMOTE = enum.auto()
