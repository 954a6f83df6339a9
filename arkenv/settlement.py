"""
Runs the settlement subprocess to completion.
"""

import logging
import subprocess
from collections.abc import Callable

from arkenv.errors import SubprocessError

logger = logging.getLogger("settlement")


class SettlementRunner:
    """
    Spawns a long-running child, forwards its stderr to the log and blocks
    until it exits. No timeout is applied to the child.

    Usage:
        SettlementRunner().run(["nigiri", "ark", "settle", "--password", "secret"])
    """

    def __init__(self, spawn: Callable[..., subprocess.Popen] = subprocess.Popen):
        self._spawn = spawn

    def run(self, cmd: list[str]) -> None:
        """
        Run `cmd` until it terminates.

        Raises:
            SubprocessError: If the process cannot be spawned or exits non-zero
        """
        logger.info(f"spawning {cmd[0]}")
        try:
            proc = self._spawn(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.PIPE)
        except OSError as e:
            raise SubprocessError(f"failed to spawn {cmd[0]}: {e}") from e

        with proc:
            if proc.stderr is not None:
                for line in proc.stderr:
                    text = line.decode(errors="replace").rstrip()
                    if text:
                        logger.info(f"settle stderr: {text}")

            returncode = proc.wait()

        if returncode != 0:
            raise SubprocessError(f"settle process exited with code {returncode}", returncode)
