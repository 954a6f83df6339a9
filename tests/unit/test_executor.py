"""CommandExecutor unit tests, run against real short-lived Python processes."""

import logging
import shlex
import sys

import pytest

from arkenv.errors import ExecutionError
from arkenv.executor import CommandExecutor


def py(code: str) -> list[str]:
    return [sys.executable, "-c", code]


def failing_with(stderr: str, code: int = 1) -> list[str]:
    return py(f"import sys; sys.stderr.write({stderr!r}); sys.exit({code})")


class TestExecute:
    def test_returns_stdout_bytes(self):
        out = CommandExecutor().execute(py("print('bcrt1qaddress')"))
        assert out.strip() == b"bcrt1qaddress"

    def test_accepts_string_command(self):
        cmd = f"{shlex.quote(sys.executable)} -c 'print(42)'"
        assert CommandExecutor().execute(cmd).strip() == b"42"

    @pytest.mark.parametrize(
        "stderr",
        [
            "wallet already initialized",
            "Error: wallet already initialized\n",
            "rpc error: code = Unknown desc = already initialized",
        ],
    )
    def test_benign_failure_is_empty_success(self, stderr):
        assert CommandExecutor().execute(failing_with(stderr)) == b""

    def test_other_failure_propagates(self):
        with pytest.raises(ExecutionError) as excinfo:
            CommandExecutor().execute(failing_with("failed to connect to arkd", code=2))

        err = excinfo.value
        assert err.returncode == 2
        assert err.stderr == b"failed to connect to arkd"
        assert "failed to connect to arkd" in str(err)

    def test_marker_on_stdout_is_not_benign(self):
        cmd = py("import sys; print('already initialized'); sys.exit(1)")
        with pytest.raises(ExecutionError):
            CommandExecutor().execute(cmd)

    def test_missing_executable(self):
        with pytest.raises(ExecutionError) as excinfo:
            CommandExecutor().execute(["definitely-not-a-real-binary-xyz"])
        assert excinfo.value.returncode is None
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_custom_marker(self):
        executor = CommandExecutor(benign_marker="already unlocked")
        assert executor.execute(failing_with("wallet already unlocked")) == b""
        with pytest.raises(ExecutionError):
            executor.execute(failing_with("wallet already initialized"))

    def test_benign_failure_logs_marker_and_command(self, caplog):
        caplog.set_level(logging.INFO, logger="executor")
        executor = CommandExecutor(benign_marker="already unlocked")

        executor.execute(failing_with("wallet already unlocked"))

        messages = [r.getMessage() for r in caplog.records if r.name == "executor"]
        assert any("already unlocked, continuing" in m for m in messages)
        assert any(m.startswith(sys.executable) for m in messages)
        assert not any("Wallet already initialized" in m for m in messages)


class TestIsBenign:
    def test_empty_stderr(self):
        executor = CommandExecutor()
        assert not executor.is_benign(b"")
        assert not executor.is_benign(None)

    def test_non_utf8_stderr(self):
        assert CommandExecutor().is_benign(b"\xff\xfe already initialized")
