"""
Synchronous execution of provisioning commands.
"""

import logging
import shlex
import subprocess

from arkenv.config.constants import ALREADY_INITIALIZED_MARKER
from arkenv.errors import ExecutionError

logger = logging.getLogger("executor")


class CommandExecutor:
    """
    Runs an external command to completion and returns its stdout.

    A failure whose stderr contains `benign_marker` means the target is
    already in the desired state; it is reported as an empty result instead
    of an error, so provisioning commands can be repeated safely.

    Usage:
        executor = CommandExecutor()
        addr = executor.execute(["nigiri", "arkd", "wallet", "address"]).decode().strip()
    """

    def __init__(self, benign_marker: str = ALREADY_INITIALIZED_MARKER):
        self.benign_marker = benign_marker

    def execute(self, cmd: list[str] | str) -> bytes:
        """
        Run a command and return its raw stdout.

        Raises:
            ExecutionError: If the command fails (includes stderr) and the
                failure is not benign, or the executable cannot be started.
        """
        if isinstance(cmd, str):
            cmd = shlex.split(cmd)

        logger.debug(f"exec: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True)
        except OSError as e:
            raise ExecutionError(cmd, None, stderr=str(e).encode()) from e

        if result.returncode == 0:
            return result.stdout

        if self.is_benign(result.stderr):
            logger.info(f"{' '.join(cmd[:4])}: {self.benign_marker}, continuing...")
            return b""

        raise ExecutionError(cmd, result.returncode, result.stdout, result.stderr)

    def is_benign(self, stderr: bytes | None) -> bool:
        if not stderr:
            return False
        return self.benign_marker in stderr.decode(errors="replace")
