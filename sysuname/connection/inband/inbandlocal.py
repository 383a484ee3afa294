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
import subprocess

from .inband import CommandArtifact, InBandConnection


class LocalShell(InBandConnection):

    def run_command(self, command: str, timeout: int = 300, strip: bool = True) -> CommandArtifact:
        """Run a local in band shell command

        Args:
            command (str): command to run
            timeout (int, optional): timeout for command in seconds. Defaults to 300.
            strip (bool, optional): strip output of command. Defaults to True.

        Returns:
            CommandArtifact: command result object
        """
        res = subprocess.run(
            command,
            encoding="utf-8",
            errors="replace",
            shell=True,
            timeout=timeout,
            capture_output=True,
            check=False,
        )

        return CommandArtifact(
            command=command,
            stdout=res.stdout.strip() if strip else res.stdout,
            stderr=res.stderr.strip() if strip else res.stderr,
            exit_code=res.returncode,
        )
