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
from sysuname.errors import UnameError
from sysuname.models import PlatformSample
from sysuname.recordbuilder import cpu_architecture_name
from sysuname.utils import convert_bool, parse_wmic_instances

from .unamesource import UnameSource


class WindowsSource(UnameSource):
    """Read identity data from Windows hosts through WMI.

    The name of the Win32_OperatingSystem instance is not predictable, so every instance
    is listed and the primary one is used.
    """

    SUPPORTED_OS_FAMILY = {OSFamily.WINDOWS}

    OS_QUERY_CMD = "wmic os get /value"
    CPU_QUERY_CMD = "wmic cpu get Architecture /value"

    VER_PATTERN = re.compile(r"\[Version\s+([\d\.]+)\]")

    def _query(self, command: str) -> list[dict[str, Optional[str]]]:
        instances = parse_wmic_instances(self._require(self._run_sut_cmd(command)))
        if not instances:
            raise UnameError(f"No instances returned by '{command}' on {self.host}")
        return instances

    def _operating_system(self) -> dict[str, Optional[str]]:
        instances = self._query(self.OS_QUERY_CMD)
        for instance in instances:
            if convert_bool(instance.get("Primary")):
                return instance
        return instances[0]

    def _cpu_architecture(self, cpu_num: int = 0) -> Optional[str]:
        instances = self._query(self.CPU_QUERY_CMD)
        if cpu_num >= len(instances):
            raise UnameError(f"CPU {cpu_num} not found on {self.host}")
        return instances[cpu_num].get("Architecture")

    def fetch(self) -> PlatformSample:
        fields = self._operating_system()
        fields["Architecture"] = self._cpu_architecture()
        return self._sample(fields)

    def nodename(self) -> str:
        return self._require(self._run_sut_cmd("hostname"))

    def machine(self, cpu_num: int = 0) -> str:
        return cpu_architecture_name(self._cpu_architecture(cpu_num))

    def release(self) -> str:
        output = self._require(self._run_sut_cmd("ver"))
        match = self.VER_PATTERN.search(output)
        return match.group(1) if match else output
