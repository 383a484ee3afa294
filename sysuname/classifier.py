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
import logging
import re
import sys
from typing import Optional

from sysuname.connection.inband import InBandConnection, LocalShell
from sysuname.constants import DEFAULT_LOGGER
from sysuname.enums import OSFamily
from sysuname.errors import UnameError

# checked in order, first match wins
OS_FAMILY_PATTERNS: list[tuple[OSFamily, re.Pattern]] = [
    (
        OSFamily.WINDOWS,
        re.compile(r"mswin|msys|mingw|cygwin|bccwin|wince|emc|win32|windows", re.IGNORECASE),
    ),
    (OSFamily.DARWIN, re.compile(r"darwin|mac os", re.IGNORECASE)),
    (OSFamily.LINUX, re.compile(r"linux", re.IGNORECASE)),
    (OSFamily.SOLARIS, re.compile(r"solaris|sunos", re.IGNORECASE)),
    (OSFamily.BSD, re.compile(r"bsd", re.IGNORECASE)),
    (OSFamily.HPUX, re.compile(r"hp-?ux", re.IGNORECASE)),
]

WINDOWS_UNKNOWN_CMD = "not recognized as an internal or external command"


def classify(platform_id: Optional[str]) -> OSFamily:
    """Classify a platform identifier string into an OS family

    Args:
        platform_id (Optional[str]): platform identifier, e.g. sys.platform or `uname -s` output

    Returns:
        OSFamily: matching OS family, OSFamily.UNKNOWN if no pattern matches
    """
    if not platform_id:
        return OSFamily.UNKNOWN

    for os_family, pattern in OS_FAMILY_PATTERNS:
        if pattern.search(platform_id):
            return os_family

    return OSFamily.UNKNOWN


def query_platform_id(
    connection: InBandConnection, logger: Optional[logging.Logger] = None
) -> str:
    """Get the platform identifier of the host behind a connection.

    The local host is identified by sys.platform, any other host is probed with `uname -s`.

    Args:
        connection (InBandConnection): connection to the queried host
        logger (Optional[logging.Logger], optional): python logger object. Defaults to None.

    Raises:
        UnameError: if the probe command could not be run

    Returns:
        str: platform identifier, empty string if it could not be determined
    """
    if logger is None:
        logger = logging.getLogger(DEFAULT_LOGGER)

    if isinstance(connection, LocalShell):
        return sys.platform

    try:
        res = connection.run_command("uname -s")
    except UnameError:
        raise
    except Exception as exception:
        raise UnameError(f"Unable to determine platform: {str(exception)}") from exception

    if WINDOWS_UNKNOWN_CMD in res.stdout + res.stderr:
        return "windows"
    if res.exit_code == 0 and res.stdout:
        return res.stdout.strip()

    logger.warning("Unable to determine OS family, exit code: %s", res.exit_code)
    return ""
