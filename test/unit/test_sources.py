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
import pytest

from sysuname.connection.inband import CommandArtifact
from sysuname.enums import OSFamily
from sysuname.errors import UnameError
from sysuname.sources import (
    BsdSource,
    DarwinSource,
    HpuxSource,
    LinuxSource,
    SolarisSource,
    UnameSource,
    UnknownSource,
    WindowsSource,
    get_source_class,
)


@pytest.mark.parametrize(
    "os_family, expected",
    [
        (OSFamily.WINDOWS, WindowsSource),
        (OSFamily.DARWIN, DarwinSource),
        (OSFamily.LINUX, LinuxSource),
        (OSFamily.SOLARIS, SolarisSource),
        (OSFamily.BSD, BsdSource),
        (OSFamily.HPUX, HpuxSource),
        (OSFamily.UNKNOWN, UnknownSource),
    ],
)
def test_get_source_class(os_family, expected):
    assert get_source_class(os_family) is expected


def test_source_requires_os_family():
    with pytest.raises(TypeError):

        class NoFamilySource(UnameSource):
            def fetch(self):
                pass

            def nodename(self):
                return ""

            def machine(self, cpu_num=0):
                return ""

            def release(self):
                return ""


def test_linux_fetch(linux_shell, logger):
    source = LinuxSource(connection=linux_shell, host="test_host", logger=logger)
    sample = source.fetch()
    assert sample.os_family == OSFamily.LINUX
    assert sample.host == "test_host"
    assert sample.fields == {
        "sysname": "Linux",
        "nodename": "test_host",
        "release": "6.8.0-45-generic",
        "version": "#45-Ubuntu SMP PREEMPT_DYNAMIC",
        "machine": "x86_64",
        "domainname": None,
    }
    assert [artifact.command for artifact in sample.artifacts] == [
        "uname -s; uname -n; uname -r; uname -v; uname -m",
        "cat /proc/sys/kernel/domainname",
    ]


def test_linux_domainname(linux_shell):
    linux_shell.responses["cat /proc/sys/kernel/domainname"] = "corp.example.com"
    sample = LinuxSource(connection=linux_shell, host="test_host").fetch()
    assert sample.get("domainname") == "corp.example.com"


def test_linux_release_lsb(linux_shell):
    source = LinuxSource(connection=linux_shell, host="test_host")
    assert source.release() == "22.04"
    assert source.version() == "22.04"


@pytest.mark.parametrize(
    "version_stdout, expected",
    [
        ('VERSION_ID="22.04"', "22.04"),
        ("VERSION_ID=41", "41"),
        ('VERSION_ID="8.8"\nVERSION_ID="8.8"', "8.8"),
    ],
)
def test_linux_release_os_release_fallback(linux_shell, version_stdout, expected):
    del linux_shell.responses["lsb_release -r -s"]
    linux_shell.responses["cat /etc/*release | grep VERSION_ID"] = version_stdout
    assert LinuxSource(connection=linux_shell, host="test_host").release() == expected


def test_linux_release_kernel_fallback(linux_shell):
    del linux_shell.responses["lsb_release -r -s"]
    assert LinuxSource(connection=linux_shell, host="test_host").release() == "6.8.0-45-generic"


def test_darwin_fetch(darwin_shell):
    source = DarwinSource(connection=darwin_shell, host="test-mac")
    sample = source.fetch()
    assert sample.get("model") == "MacBookPro18,3"
    assert sample.get("sysname") == "Darwin"
    assert source.release() == "14.6.1"


def test_bsd_fetch(bsd_shell):
    source = BsdSource(connection=bsd_shell, host="bsdbox")
    sample = source.fetch()
    assert sample.get("model") == "Intel(R) Xeon(R) CPU E5-2680 v4 @ 2.40GHz"
    assert source.release() == "14.1-RELEASE"
    assert source.machine() == "amd64"


def test_hpux_fetch(hpux_shell):
    sample = HpuxSource(connection=hpux_shell, host="hpbox").fetch()
    assert sample.get("id") == "2007218342"
    assert sample.get("release") == "B.11.31"


def test_solaris_fetch(solaris_shell):
    sample = SolarisSource(connection=solaris_shell, host="solbox").fetch()
    assert sample.get("architecture") == "i386"
    assert sample.get("platform") == "i86pc"
    assert sample.get("hw_serial") == "2333878847"
    assert sample.get("hw_provider") == "Oracle Corporation"
    assert sample.get("srpc_domain") == "example.com"
    assert sample.get("isa_list") == "amd64 pentium_pro+mmx pentium_pro i386"
    assert sample.get("dhcp_cache") is None


def test_solaris_missing_utilities(fake_shell):
    conn = fake_shell({"uname -s; uname -n; uname -r; uname -v; uname -m": "SunOS\nsolbox\n5.11\n11.4\nsun4v"})
    sample = SolarisSource(connection=conn, host="solbox").fetch()
    assert sample.get("hw_serial") is None
    assert sample.get("hw_provider") is None
    assert sample.get("machine") == "sun4v"


def test_posix_uname_failure(linux_shell):
    linux_shell.responses["uname -s; uname -n; uname -r; uname -v; uname -m"] = CommandArtifact(
        command="uname", stdout="", stderr="permission denied", exit_code=1
    )
    with pytest.raises(UnameError):
        LinuxSource(connection=linux_shell, host="test_host").fetch()


def test_posix_uname_malformed(linux_shell):
    linux_shell.responses["uname -s; uname -n; uname -r; uname -v; uname -m"] = "Linux\ntest_host"
    with pytest.raises(UnameError):
        LinuxSource(connection=linux_shell, host="test_host").fetch()


def test_posix_uname_empty_field(linux_shell):
    linux_shell.responses["uname -s; uname -n; uname -r; uname -v; uname -m"] = (
        "Linux\ntest_host\n6.8.0-45-generic\n\nx86_64\n"
    )
    sample = LinuxSource(connection=linux_shell, host="test_host").fetch()
    assert sample.get("version") == ""
    assert sample.get("machine") == "x86_64"

    linux_shell.responses["uname -s; uname -n; uname -r; uname -v; uname -m"] = (
        "Linux\ntest_host\n6.8.0-45-generic\n#45-Ubuntu SMP PREEMPT_DYNAMIC\n\n"
    )
    sample = LinuxSource(connection=linux_shell, host="test_host").fetch()
    assert sample.get("machine") == ""
    assert sample.get("release") == "6.8.0-45-generic"


def test_source_wraps_connection_errors(linux_shell):
    linux_shell.responses["uname -n"] = FileNotFoundError("uname")
    with pytest.raises(UnameError) as exc_info:
        LinuxSource(connection=linux_shell, host="test_host").nodename()
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_windows_fetch(windows_shell):
    sample = WindowsSource(connection=windows_shell, host="WINBOX").fetch()
    assert sample.os_family == OSFamily.WINDOWS
    assert sample.get("Caption") == "Microsoft Windows 11 Enterprise"
    assert sample.get("FreePhysicalMemory") == "10538232"
    assert sample.get("Organization") is None
    assert sample.get("Architecture") == "9"


def test_windows_primary_instance(windows_shell):
    windows_shell.responses["wmic os get /value"] = (
        "Caption=Secondary\nPrimary=FALSE\n\nCaption=Primary OS\nPrimary=TRUE\n"
    )
    sample = WindowsSource(connection=windows_shell, host="WINBOX").fetch()
    assert sample.get("Caption") == "Primary OS"


def test_windows_no_instances(windows_shell):
    windows_shell.responses["wmic os get /value"] = "No Instance(s) Available."
    with pytest.raises(UnameError):
        WindowsSource(connection=windows_shell, host="WINBOX").fetch()


def test_windows_scalars(windows_shell):
    source = WindowsSource(connection=windows_shell, host="WINBOX")
    assert source.nodename() == "WINBOX"
    assert source.machine() == "x86_64"
    assert source.release() == "10.0.22631.4037"
    assert source.version() == "10.0.22631.4037"


def test_windows_machine_cpu_num(windows_shell):
    windows_shell.responses["wmic cpu get Architecture /value"] = (
        "Architecture=9\n\nArchitecture=12\n"
    )
    source = WindowsSource(connection=windows_shell, host="WINBOX")
    assert source.machine(cpu_num=1) == "ARM64"
    with pytest.raises(UnameError):
        source.machine(cpu_num=2)


def test_windows_ver_without_version(windows_shell):
    windows_shell.responses["ver"] = "Microsoft Windows XP"
    assert WindowsSource(connection=windows_shell, host="WINBOX").release() == "Microsoft Windows XP"


def test_unknown_source_runs_no_commands(fake_shell):
    conn = fake_shell()
    source = UnknownSource(connection=conn, host="mystery")
    sample = source.fetch()
    assert sample.fields == {
        "sysname": "Unknown",
        "nodename": "mystery",
        "machine": "Unknown",
        "version": "Unknown",
        "release": "Unknown",
    }
    assert source.release() == "Unknown"
    assert conn.commands == []
