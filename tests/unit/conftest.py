"""Shared fakes for the bootstrap collaborators."""

import json

import pytest

from arkenv.ark_server import ServerInfo
from arkenv.config import BootstrapConfig, RetryBudget
from arkenv.step_logging import set_current_step

READY_STATUS = b"initialized: true\nunlocked: true\nsynced: true\n"
NOT_SYNCED_STATUS = b"initialized: true\nunlocked: true\nsynced: false\n"

SERVER_PUBKEY = "02" + "ab" * 32
ARKD_ADDRESS = "bcrt1qarkdwalletaddress"
BOARDING_ADDRESS = "bcrt1pboardingaddress"


class FakeExecutor:
    """Answers `nigiri` commands from canned outputs and records every call."""

    def __init__(self, wallet_ready_on: int | None = 1, receive_output: bytes | None = None):
        self.wallet_ready_on = wallet_ready_on
        self.receive_output = receive_output or json.dumps(
            {"offchain_address": "tark1qoffchain", "boarding_address": BOARDING_ADDRESS}
        ).encode()
        self.calls: list[list[str]] = []
        self.status_checks = 0
        self.failures: dict[tuple[str, ...], Exception] = {}

    def fail_on(self, prefix: tuple[str, ...], error: Exception) -> None:
        self.failures[prefix] = error

    def execute(self, cmd: list[str]) -> bytes:
        self.calls.append(cmd)
        args = tuple(cmd[1:])
        for prefix, error in self.failures.items():
            if args[: len(prefix)] == prefix:
                raise error

        if args[:3] == ("arkd", "wallet", "status"):
            self.status_checks += 1
            ready = self.wallet_ready_on is not None and self.status_checks >= self.wallet_ready_on
            return READY_STATUS if ready else NOT_SYNCED_STATUS
        if args[:3] == ("arkd", "wallet", "address"):
            return f"  {ARKD_ADDRESS}\n".encode()
        if args[:2] == ("ark", "receive"):
            return self.receive_output
        return b""

    def commands(self, *prefix: str) -> list[list[str]]:
        return [c for c in self.calls if tuple(c[1 : 1 + len(prefix)]) == prefix]


class FakeServer:
    def __init__(self, ready_on_probe: int = 1):
        self.ready_on_probe = ready_on_probe
        self.probes = 0
        self.info_calls = 0

    def is_reachable(self) -> bool:
        self.probes += 1
        return self.probes >= self.ready_on_probe

    def get_info(self) -> ServerInfo:
        self.info_calls += 1
        return ServerInfo.from_json({"pubkey": SERVER_PUBKEY, "network": "regtest"})


class FakeSettlement:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[list[str]] = []

    def run(self, cmd: list[str]) -> None:
        self.calls.append(cmd)
        if self.error is not None:
            raise self.error


class SleepRecorder:
    def __init__(self):
        self.delays: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture(autouse=True)
def reset_current_step():
    set_current_step(None)
    yield
    set_current_step(None)


@pytest.fixture
def sleeper():
    return SleepRecorder()


@pytest.fixture
def config():
    return BootstrapConfig(
        service_budget=RetryBudget(max_retries=5, retry_delay=2.0),
        wallet_budget=RetryBudget(max_retries=4, retry_delay=1.5),
        confirmation_delay=5.0,
    )
