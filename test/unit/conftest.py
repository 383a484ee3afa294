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
from typing import Optional, Union

import pytest

from sysuname.connection.inband import CommandArtifact, InBandConnection


class FakeShell(InBandConnection):
    """Connection returning canned command output, unknown commands exit with 127"""

    def __init__(self, responses: Optional[dict[str, Union[str, CommandArtifact, Exception]]] = None):
        self.responses = responses or {}
        self.commands: list[str] = []

    def run_command(self, command: str, timeout: int = 300, strip: bool = True) -> CommandArtifact:
        self.commands.append(command)
        response = self.responses.get(command)
        if isinstance(response, Exception):
            raise response
        if isinstance(response, CommandArtifact):
            return response
        if response is None:
            return CommandArtifact(
                command=command, stdout="", stderr=f"{command}: not found", exit_code=127
            )
        return CommandArtifact(
            command=command,
            stdout=response.strip() if strip else response,
            stderr="",
            exit_code=0,
        )


UNAME_CMD = "uname -s; uname -n; uname -r; uname -v; uname -m"

LINUX_RESPONSES = {
    "uname -s": "Linux",
    UNAME_CMD: "Linux\ntest_host\n6.8.0-45-generic\n#45-Ubuntu SMP PREEMPT_DYNAMIC\nx86_64",
    "uname -n": "test_host",
    "uname -m": "x86_64",
    "uname -r": "6.8.0-45-generic",
    "lsb_release -r -s": "22.04",
    "cat /proc/sys/kernel/domainname": "(none)",
}

DARWIN_RESPONSES = {
    "uname -s": "Darwin",
    UNAME_CMD: "Darwin\ntest-mac\n23.6.0\nDarwin Kernel Version 23.6.0\narm64",
    "uname -n": "test-mac",
    "uname -m": "arm64",
    "sw_vers -productVersion": "14.6.1",
    "sysctl -n hw.model": "MacBookPro18,3",
}

BSD_RESPONSES = {
    "uname -s": "FreeBSD",
    UNAME_CMD: "FreeBSD\nbsdbox\n14.1-RELEASE\nFreeBSD 14.1-RELEASE GENERIC\namd64",
    "uname -n": "bsdbox",
    "uname -m": "amd64",
    "uname -r": "14.1-RELEASE",
    "sysctl -n hw.model": "Intel(R) Xeon(R) CPU E5-2680 v4 @ 2.40GHz",
}

SOLARIS_RESPONSES = {
    "uname -s": "SunOS",
    UNAME_CMD: "SunOS\nsolbox\n5.11\n11.4.0.15.0\ni86pc",
    "uname -n": "solbox",
    "uname -m": "i86pc",
    "uname -r": "5.11",
    "uname -p": "i386",
    "uname -i": "i86pc",
    "hostid": "8b1c2a3f",
    "smbios -t SMB_TYPE_SYSTEM": "ID    SIZE TYPE\n1     120  SMB_TYPE_SYSTEM (type 1) (system information)\n\n  Manufacturer: Oracle Corporation\n  Product: SUN FIRE X4170 M2 SERVER",
    "domainname": "example.com",
    "isalist": "amd64 pentium_pro+mmx pentium_pro i386",
}

HPUX_RESPONSES = {
    "uname -s": "HP-UX",
    UNAME_CMD: "HP-UX\nhpbox\nB.11.31\nU\nia64",
    "uname -n": "hpbox",
    "uname -m": "ia64",
    "uname -r": "B.11.31",
    "uname -i": "2007218342",
}

WMIC_OS_OUTPUT = "\r\r\n".join(
    [
        "",
        "",
        "BootDevice=\\Device\\HarddiskVolume1",
        "BuildNumber=22631",
        "BuildType=Multiprocessor Free",
        "Caption=Microsoft Windows 11 Enterprise",
        "CodeSet=1252",
        "CountryCode=1",
        "CreationClassName=Win32_OperatingSystem",
        "CSCreationClassName=Win32_ComputerSystem",
        "CSDVersion=",
        "CSName=WINBOX",
        "CurrentTimeZone=-300",
        "Debug=FALSE",
        "Description=",
        "Distributed=FALSE",
        "EncryptionLevel=256",
        "ForegroundApplicationBoost=2",
        "FreePhysicalMemory=10538232",
        "FreeSpaceInPagingFiles=2871164",
        "FreeVirtualMemory=11913268",
        "InstallDate=20240115093012.000000-300",
        "LargeSystemCache=",
        "LastBootUpTime=20241018081502.500000-300",
        "LocalDateTime=20241019101010.123000-300",
        "Locale=0409",
        "Manufacturer=Microsoft Corporation",
        "MaxNumberOfProcesses=4294967295",
        "MaxProcessMemorySize=137438953344",
        "Name=Microsoft Windows 11 Enterprise|C:\\WINDOWS|\\Device\\Harddisk0\\Partition3",
        "NumberOfLicensedUsers=",
        "NumberOfProcesses=312",
        "NumberOfUsers=2",
        "Organization=",
        "OSLanguage=1033",
        "OSProductSuite=256",
        "OSType=18",
        "OtherTypeDescription=",
        "PlusProductID=",
        "PlusVersionNumber=",
        "Primary=TRUE",
        "ProductType=1",
        "RegisteredUser=user@example.com",
        "SerialNumber=00330-80000-00000-AA123",
        "ServicePackMajorVersion=0",
        "ServicePackMinorVersion=0",
        "SizeStoredInPagingFiles=3014656",
        "Status=OK",
        "SuiteMask=272",
        "SystemDevice=\\Device\\HarddiskVolume3",
        "SystemDirectory=C:\\WINDOWS\\system32",
        "SystemDrive=C:",
        "TotalSwapSpaceSize=",
        "TotalVirtualMemorySize=36379676",
        "TotalVisibleMemorySize=33365020",
        "Version=10.0.22631",
        "WindowsDirectory=C:\\WINDOWS",
        "",
        "",
    ]
)

WINDOWS_RESPONSES = {
    "uname -s": CommandArtifact(
        command="uname -s",
        stdout="",
        stderr="'uname' is not recognized as an internal or external command,\r\noperable program or batch file.",
        exit_code=1,
    ),
    "wmic os get /value": WMIC_OS_OUTPUT,
    "wmic cpu get Architecture /value": "\r\r\n\r\r\nArchitecture=9\r\r\n\r\r\n",
    "hostname": "WINBOX",
    "ver": "\r\nMicrosoft Windows [Version 10.0.22631.4037]",
}


@pytest.fixture
def fake_shell():
    return FakeShell


@pytest.fixture
def linux_shell():
    return FakeShell(dict(LINUX_RESPONSES))


@pytest.fixture
def darwin_shell():
    return FakeShell(dict(DARWIN_RESPONSES))


@pytest.fixture
def bsd_shell():
    return FakeShell(dict(BSD_RESPONSES))


@pytest.fixture
def solaris_shell():
    return FakeShell(dict(SOLARIS_RESPONSES))


@pytest.fixture
def hpux_shell():
    return FakeShell(dict(HPUX_RESPONSES))


@pytest.fixture
def windows_shell():
    return FakeShell(dict(WINDOWS_RESPONSES))


@pytest.fixture
def logger():
    return logging.getLogger("test_logger")
