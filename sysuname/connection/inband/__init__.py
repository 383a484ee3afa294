from .inband import CommandArtifact, InBandConnection
from .inbandlocal import LocalShell
from .inbandremote import RemoteShell, SSHConnectionError
from .sshparams import SSHConnectionParams

__all__ = [
    "SSHConnectionParams",
    "SSHConnectionError",
    "LocalShell",
    "RemoteShell",
    "InBandConnection",
    "CommandArtifact",
]
