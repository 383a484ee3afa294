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
import socket

import paramiko
from paramiko.ssh_exception import (
    AuthenticationException,
    BadHostKeyException,
    SSHException,
)

from sysuname.errors import UnameError

from .inband import CommandArtifact, InBandConnection
from .sshparams import SSHConnectionParams


class SSHConnectionError(UnameError):
    """A general exception for ssh connection failures"""


class RemoteShell(InBandConnection):
    """Utility class for running shell commands on a remote host"""

    def __init__(
        self,
        ssh_params: SSHConnectionParams,
    ) -> None:
        self.ssh_params = ssh_params
        self.client = paramiko.SSHClient()
        self.client.set_missing_host_key_policy(paramiko.AutoAddPolicy())

    def connect_ssh(self):
        try:
            self.client.connect(
                hostname=str(self.ssh_params.hostname),
                port=self.ssh_params.port,
                username=self.ssh_params.username,
                password=(
                    self.ssh_params.password.get_secret_value()
                    if self.ssh_params.password
                    else None
                ),
                key_filename=self.ssh_params.key_filename,
                pkey=self.ssh_params.pkey,
                timeout=10,
                look_for_keys=True,
                auth_timeout=60,
                banner_timeout=200,
            )
        except socket.timeout as err:
            raise SSHConnectionError("SSH Request timeout") from err
        except socket.gaierror as err:
            raise SSHConnectionError("Hostname could not be resolved") from err
        except AuthenticationException as err:
            raise SSHConnectionError("SSH Authentication failed") from err
        except BadHostKeyException as err:
            raise SSHConnectionError("Unable to verify server's host key") from err
        except ConnectionResetError as err:
            raise SSHConnectionError("Connection reset by peer") from err
        except SSHException as err:
            raise SSHConnectionError("Unable to establish SSH connection") from err
        except EOFError as err:
            raise SSHConnectionError("EOFError during SSH connection") from err

    def run_command(
        self,
        command: str,
        timeout: int = 30,
        strip: bool = True,
    ) -> CommandArtifact:
        """Run a shell command over ssh

        Args:
            command (str): command to run
            timeout (int, optional): timeout for command in seconds. Defaults to 30.
            strip (bool, optional): strip output of command. Defaults to True.

        Returns:
            CommandArtifact: Command artifact with stdout, stderr, which have been decoded and stripped as well as exit code
        """
        try:
            _, stdout, stderr = self.client.exec_command(command, timeout=timeout)
            stdout_str = stdout.read().decode("utf-8", errors="replace")
            stderr_str = stderr.read().decode("utf-8", errors="replace")
            exit_code = stdout.channel.recv_exit_status()
        except TimeoutError:
            stderr_str = "Command timed out"
            stdout_str = ""
            exit_code = 124

        return CommandArtifact(
            command=command,
            stdout=stdout_str.strip() if strip else stdout_str,
            stderr=stderr_str.strip() if strip else stderr_str,
            exit_code=exit_code,
        )

    def close(self):
        self.client.close()
