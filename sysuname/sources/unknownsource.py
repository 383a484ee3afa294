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
from sysuname.models import PlatformSample

from .unamesource import UnameSource

UNKNOWN = "Unknown"


class UnknownSource(UnameSource):
    """Source for hosts whose OS family could not be determined, no commands are run"""

    SUPPORTED_OS_FAMILY = {OSFamily.UNKNOWN}

    def fetch(self) -> PlatformSample:
        fields: dict[str, Optional[str]] = {
            "sysname": UNKNOWN,
            "nodename": self.nodename(),
            "machine": UNKNOWN,
            "version": UNKNOWN,
            "release": UNKNOWN,
        }
        return self._sample(fields)

    def nodename(self) -> str:
        return self.host

    def machine(self, cpu_num: int = 0) -> str:
        return UNKNOWN

    def release(self) -> str:
        return UNKNOWN
