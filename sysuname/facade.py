###############################################################################
#
# MIT License
#
# Copyright (c) 2025 The sysuname developers
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
###############################################################################
import contextlib
import getpass
import logging
import socket
from typing import Iterator, Optional

from sysuname.classifier import classify, query_platform_id
from sysuname.connection.inband import (
    InBandConnection,
    LocalShell,
    RemoteShell,
    SSHConnectionParams,
)
from sysuname.constants import DEFAULT_LOGGER, LOCAL_HOST_ALIASES
from sysuname.enums import OSFamily, SystemLocation
from sysuname.errors import UnameError
from sysuname.models import UnameRecord
from sysuname.recordbuilder import build_record
from sysuname.sources import UnameSource, get_source_class

__all__ = [
    "sysname",
    "nodename",
    "machine",
    "architecture",
    "release",
    "version",
    "uname",
]

SYSNAME_MAP = {
    OSFamily.WINDOWS: "Windows",
    OSFamily.DARWIN: "Mac OS",
    OSFamily.LINUX: "Linux",
    OSFamily.SOLARIS: "Unix",
    OSFamily.BSD: "Unix",
    OSFamily.HPUX: "HP-UX",
    OSFamily.UNKNOWN: "Unknown",
}

_logger = logging.getLogger(DEFAULT_LOGGER)


def _local_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as exception:
        raise UnameError(f"Unable to read local host name: {str(exception)}") from exception


def _location(host: str, local_hostname: str) -> SystemLocation:
    if host == local_hostname or host.lower() in LOCAL_HOST_ALIASES:
        return SystemLocation.LOCAL
    return SystemLocation.REMOTE


@contextlib.contextmanager
def _open_connection(host: str, local_hostname: str) -> Iterator[InBandConnection]:
    if _location(host, local_hostname) == SystemLocation.LOCAL:
        _logger.info("Using local shell")
        yield LocalShell()
        return

    _logger.info("Initializing SSH connection to %s", host)
    try:
        remote = RemoteShell(SSHConnectionParams(hostname=host, username=getpass.getuser()))
        remote.connect_ssh()
    except UnameError:
        raise
    except Exception as exception:
        raise UnameError(f"Unable to connect to {host}: {str(exception)}") from exception

    try:
        yield remote
    finally:
        remote.close()


@contextlib.contextmanager
def _source(
    host: Optional[str], connection: Optional[InBandConnection]
) -> Iterator[UnameSource]:
    """Open the data source for the OS family of the queried host"""
    local_hostname = _local_hostname()
    if host is None:
        host = local_hostname

    if connection is not None:
        connection_cm = contextlib.nullcontext(connection)
    else:
        connection_cm = _open_connection(host, local_hostname)

    with connection_cm as conn:
        os_family = classify(query_platform_id(conn, logger=_logger))
        _logger.debug("OS Family of %s: %s", host, os_family.name)
        yield get_source_class(os_family)(connection=conn, host=host, logger=_logger)


def sysname(host: Optional[str] = None, connection: Optional[InBandConnection] = None) -> str:
    """Returns the operating system name, e.g. "Linux" or "Windows"

    Args:
        host (Optional[str], optional): host to query. Defaults to the local host.
        connection (Optional[InBandConnection], optional): connection to use instead of opening one. Defaults to None.

    Returns:
        str: operating system name
    """
    with _source(host, connection) as source:
        return SYSNAME_MAP[source.os_family]


def nodename(host: Optional[str] = None, connection: Optional[InBandConnection] = None) -> str:
    """Returns the nodename. This is usually, but not necessarily, the same as the
    system's hostname.
    """
    with _source(host, connection) as source:
        return source.nodename()


def machine(
    host: Optional[str] = None,
    connection: Optional[InBandConnection] = None,
    cpu_num: int = 0,
) -> str:
    """Returns the machine hardware type, e.g. "x86_64"

    Args:
        host (Optional[str], optional): host to query. Defaults to the local host.
        connection (Optional[InBandConnection], optional): connection to use instead of opening one. Defaults to None.
        cpu_num (int, optional): cpu to report on Windows hosts. Defaults to 0.

    Returns:
        str: machine hardware type
    """
    with _source(host, connection) as source:
        return source.machine(cpu_num=cpu_num)


def architecture(
    host: Optional[str] = None,
    connection: Optional[InBandConnection] = None,
    cpu_num: int = 0,
) -> str:
    """Returns the CPU architecture, same as machine()"""
    return machine(host=host, connection=connection, cpu_num=cpu_num)


def release(host: Optional[str] = None, connection: Optional[InBandConnection] = None) -> str:
    """Returns the release number, e.g. "22.04" or "10.0.22631.4037" """
    with _source(host, connection) as source:
        return source.release()


def version(host: Optional[str] = None, connection: Optional[InBandConnection] = None) -> str:
    """Returns the OS version as reported by the release utility of the OS family"""
    with _source(host, connection) as source:
        return source.version()


def uname(
    host: Optional[str] = None, connection: Optional[InBandConnection] = None
) -> UnameRecord:
    """Returns a record containing sysname, nodename, machine, version and release, as
    well as the fields reported only by the OS family of the queried host.

    Args:
        host (Optional[str], optional): host to query. Defaults to the local host.
        connection (Optional[InBandConnection], optional): connection to use instead of opening one. Defaults to None.

    Raises:
        UnameError: if any query on the host fails

    Returns:
        UnameRecord: identity record, the record type depends on the OS family
    """
    with _source(host, connection) as source:
        return build_record(source.fetch())
