"""
Errors raised while bootstrapping the Ark environment.

Anything not listed here (malformed JSON, missing fields, HTTP failures on a
non-polling call) propagates unwrapped and is just as fatal.
"""


class BootstrapError(Exception):
    """Base class for bootstrap failures."""


class ExecutionError(BootstrapError):
    """Raised when a provisioning command fails and the failure is not benign."""

    def __init__(
        self,
        cmd: list[str],
        returncode: int | None,
        stdout: bytes = b"",
        stderr: bytes = b"",
    ):
        self.cmd = cmd
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            f"command failed (exit {returncode}):\n"
            f"  cmd: {' '.join(cmd)}\n"
            f"  stderr: {stderr.decode(errors='replace').strip()}"
        )


class ReadinessTimeoutError(BootstrapError):
    """Raised when a readiness poll exhausts its retry budget."""

    def __init__(self, description: str, max_retries: int):
        self.description = description
        self.max_retries = max_retries
        super().__init__(f"{description} failed to be ready after {max_retries} retries")


class SubprocessError(BootstrapError):
    """Raised when the settlement subprocess exits non-zero or cannot be spawned."""

    def __init__(self, message: str, returncode: int | None = None):
        self.returncode = returncode
        super().__init__(message)
