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
import inspect
import logging
from typing import ClassVar, Optional

from sysuname.connection.inband import CommandArtifact, InBandConnection
from sysuname.constants import DEFAULT_LOGGER
from sysuname.enums import OSFamily
from sysuname.errors import UnameError
from sysuname.models import PlatformSample
from sysuname.utils import get_all_subclasses


class UnameSource(abc.ABC):
    """Parent class for all sources of raw platform identity data"""

    SUPPORTED_OS_FAMILY: ClassVar[set[OSFamily]] = set()

    def __init__(
        self,
        connection: InBandConnection,
        host: str,
        logger: Optional[logging.Logger] = None,
    ):
        """source init function

        Args:
            connection (InBandConnection): connection used to run commands on the queried host
            host (str): name of the queried host
            logger (Optional[logging.Logger], optional): python logger object. Defaults to None.
        """
        if logger is None:
            logger = logging.getLogger(DEFAULT_LOGGER)

        self.connection = connection
        self.host = host
        self.logger = logger
        self.artifacts: list[CommandArtifact] = []

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not inspect.isabstract(cls) and not cls.SUPPORTED_OS_FAMILY:
            raise TypeError(f"No supported OS family set for {cls.__name__}")

    def _run_sut_cmd(self, command: str, strip: bool = True) -> CommandArtifact:
        """Run a command on the queried host

        Args:
            command (str): command to run
            strip (bool, optional): strip output of command. Defaults to True.

        Raises:
            UnameError: if the command could not be run

        Returns:
            CommandArtifact: command result object
        """
        self.logger.debug("Running command on %s: %s", self.host, command)
        try:
            res = self.connection.run_command(command=command, strip=strip)
        except UnameError:
            raise
        except Exception as exception:
            raise UnameError(
                f"Failed to run '{command}' on {self.host}: {str(exception)}"
            ) from exception

        self.artifacts.append(res)
        return res

    def _require(self, res: CommandArtifact, strip: bool = True) -> str:
        """Get the output of a command which must succeed

        Args:
            res (CommandArtifact): command result
            strip (bool, optional): strip the output. Defaults to True.

        Raises:
            UnameError: if the command exited with a non zero exit code

        Returns:
            str: command output
        """
        if res.exit_code != 0:
            raise UnameError(
                f"'{res.command}' failed on {self.host} with exit code {res.exit_code}: {res.stderr}"
            )
        return res.stdout.strip() if strip else res.stdout

    def _optional(self, command: str) -> Optional[str]:
        """Run a command whose output is optional

        Args:
            command (str): command to run

        Returns:
            Optional[str]: stripped command output, None if the command failed or printed nothing
        """
        res = self._run_sut_cmd(command)
        if res.exit_code != 0:
            self.logger.warning(
                "'%s' failed on %s with exit code %s", command, self.host, res.exit_code
            )
            return None
        return res.stdout.strip() or None

    @property
    def os_family(self) -> OSFamily:
        return next(iter(self.SUPPORTED_OS_FAMILY))

    def _sample(self, fields: dict[str, Optional[str]]) -> PlatformSample:
        return PlatformSample(
            os_family=self.os_family,
            host=self.host,
            fields=fields,
            artifacts=self.artifacts,
        )

    @abc.abstractmethod
    def fetch(self) -> PlatformSample:
        """Read all identity data from the queried host

        Returns:
            PlatformSample: raw platform data
        """

    @abc.abstractmethod
    def nodename(self) -> str:
        """Read the network node name of the queried host"""

    @abc.abstractmethod
    def machine(self, cpu_num: int = 0) -> str:
        """Read the machine hardware type of the queried host

        Args:
            cpu_num (int, optional): cpu to report, only used where the data source lists cpus. Defaults to 0.
        """

    @abc.abstractmethod
    def release(self) -> str:
        """Read the OS release of the queried host"""

    def version(self) -> str:
        """Read the OS version of the queried host, this is the release reported by the
        family's release utility
        """
        return self.release()


def get_source_class(os_family: OSFamily) -> type[UnameSource]:
    """Get the source class which handles an OS family

    Args:
        os_family (OSFamily): OS family

    Raises:
        UnameError: if no source, or more than one source, handles the OS family

    Returns:
        type[UnameSource]: source class
    """
    matches = [
        source_class
        for source_class in get_all_subclasses(UnameSource)
        if os_family in source_class.SUPPORTED_OS_FAMILY
    ]
    if len(matches) != 1:
        raise UnameError(f"Expected one source for {os_family.name}, found {len(matches)}")
    return matches[0]
