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
from typing import Optional

from sysuname.enums import OSFamily

from .posixsource import PosixSource


class LinuxSource(PosixSource):
    """Read identity data from Linux hosts"""

    SUPPORTED_OS_FAMILY = {OSFamily.LINUX}

    V_STR = "VERSION_ID"

    def release(self) -> str:
        """Read the distribution release, falling back to the os-release file and then
        to the kernel release when lsb_release is not installed
        """
        res = self._run_sut_cmd("lsb_release -r -s")
        if res.exit_code == 0 and res.stdout:
            return res.stdout.strip()

        res = self._run_sut_cmd(f"cat /etc/*release | grep {self.V_STR}")
        if res.exit_code == 0 and res.stdout:
            # only the first match is used when several release files are present
            os_version = res.stdout.splitlines()[0]
            os_version = os_version.removeprefix(f"{self.V_STR}=")
            # remove the ending/starting quotes and spaces
            os_version = os_version.strip('" ')
            if os_version:
                return os_version

        self.logger.warning("Distribution release not found on %s, using kernel release", self.host)
        return self._require(self._run_sut_cmd("uname -r"))

    def _extras(self) -> dict[str, Optional[str]]:
        domainname = self._optional("cat /proc/sys/kernel/domainname")
        if domainname == "(none)":
            domainname = None
        return {"domainname": domainname}
