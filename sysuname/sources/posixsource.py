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
import abc
from typing import Optional

from sysuname.errors import UnameError
from sysuname.models import PlatformSample

from .unamesource import UnameSource

UNAME_FIELDS = ("sysname", "nodename", "release", "version", "machine")


class PosixSource(UnameSource):
    """Parent class for sources which read uname(2) data with the uname utility"""

    UNAME_CMD = "uname -s; uname -n; uname -r; uname -v; uname -m"

    def _uname(self) -> dict[str, Optional[str]]:
        """Read the five POSIX uname fields

        Raises:
            UnameError: if uname fails or its output is malformed

        Returns:
            dict[str, Optional[str]]: uname field name to value
        """
        # lines are stripped individually, an empty field still holds its line
        output = self._require(self._run_sut_cmd(self.UNAME_CMD, strip=False), strip=False)
        lines = [line.strip() for line in output.splitlines()]
        if len(lines) != len(UNAME_FIELDS):
            raise UnameError(
                f"Unexpected uname output on {self.host}, expected {len(UNAME_FIELDS)} lines, got {len(lines)}"
            )
        return dict(zip(UNAME_FIELDS, lines))

    @abc.abstractmethod
    def _extras(self) -> dict[str, Optional[str]]:
        """Read the fields reported only by this OS family"""

    def fetch(self) -> PlatformSample:
        fields = self._uname()
        fields.update(self._extras())
        return self._sample(fields)

    def nodename(self) -> str:
        return self._require(self._run_sut_cmd("uname -n"))

    def machine(self, cpu_num: int = 0) -> str:
        return self._require(self._run_sut_cmd("uname -m"))
