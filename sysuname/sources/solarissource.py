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
import re
from typing import Optional

from sysuname.enums import OSFamily
from sysuname.utils import hex_to_int

from .posixsource import PosixSource


class SolarisSource(PosixSource):
    """Read identity data from Solaris hosts"""

    SUPPORTED_OS_FAMILY = {OSFamily.SOLARIS}

    MANUFACTURER_PATTERN = re.compile(r"^\s*Manufacturer:\s*(.+)$", re.MULTILINE)

    def release(self) -> str:
        return self._require(self._run_sut_cmd("uname -r"))

    def _hw_serial(self) -> Optional[str]:
        """Read the host id, reported as a decimal string like sysinfo(SI_HW_SERIAL)"""
        host_id = self._optional("hostid")
        if host_id is None:
            return None
        serial = hex_to_int(host_id)
        return str(serial) if serial is not None else None

    def _hw_provider(self) -> Optional[str]:
        smbios = self._optional("smbios -t SMB_TYPE_SYSTEM")
        if smbios is None:
            return None
        match = self.MANUFACTURER_PATTERN.search(smbios)
        return match.group(1).strip() if match else None

    def _extras(self) -> dict[str, Optional[str]]:
        return {
            "architecture": self._optional("uname -p"),
            "platform": self._optional("uname -i"),
            "hw_serial": self._hw_serial(),
            "hw_provider": self._hw_provider(),
            "srpc_domain": self._optional("domainname"),
            "isa_list": self._optional("isalist"),
            "dhcp_cache": self._optional("sh -c 'od -An -tx1 /etc/dhcp/*.dhc | tr -d \" \\n\"'"),
        }
