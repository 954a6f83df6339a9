"""
Drives a local Ark regtest stack from "containers started" to "client funded
and settled".

The sequence is strictly linear:

    wait_service -> provision_wallet -> wait_wallet -> fetch_info
    -> fund_service_addr -> service_funding_delay -> init_client
    -> fetch_boarding_addr -> fund_boarding_addr -> boarding_funding_delay
    -> settle -> done

Any exception aborts the remaining steps. Retries only happen inside the two
readiness polls; nothing already done is rolled back.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from arkenv.ark_server import ArkServerClient, ServerInfo
from arkenv.config import BootstrapConfig, Step
from arkenv.executor import CommandExecutor
from arkenv.settlement import SettlementRunner
from arkenv.step_logging import set_current_step
from arkenv.wait import poll_until_ready
from arkenv.wallet import NigiriCommands, WalletStatus, parse_boarding_address


class ExecutorProtocol(Protocol):
    def execute(self, cmd: list[str]) -> bytes: ...


class ServerProtocol(Protocol):
    def is_reachable(self) -> bool: ...

    def get_info(self) -> ServerInfo: ...


class SettlementProtocol(Protocol):
    def run(self, cmd: list[str]) -> None: ...


@dataclass
class BootstrapResult:
    """Values produced along the way, handed back to the caller."""

    server_pubkey: str
    arkd_address: str
    boarding_address: str


class ArkBootstrap:
    """
    Runs the bootstrap sequence once.

    All collaborators are injectable; the defaults talk to the real `nigiri`
    CLI and the Ark server over HTTP.

    Usage:
        result = ArkBootstrap(BootstrapConfig()).run()
        print(result.boarding_address)
    """

    def __init__(
        self,
        config: BootstrapConfig | None = None,
        executor: ExecutorProtocol | None = None,
        server: ServerProtocol | None = None,
        settlement: SettlementProtocol | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or BootstrapConfig()
        self.executor = executor or CommandExecutor()
        self.server = server or ArkServerClient(self.config.info_url, self.config.http_timeout)
        self.settlement = settlement or SettlementRunner()
        self.cmds = NigiriCommands(self.config.nigiri_bin)
        self.step: Step | None = None
        self._sleep = sleep
        self.logger = logging.getLogger("bootstrap")

    def run(self) -> BootstrapResult:
        """
        Execute every step in order.

        Raises:
            ReadinessTimeoutError: If the server or wallet never becomes ready
            ExecutionError: If a provisioning command fails non-benignly
            SubprocessError: If settlement fails
        """
        try:
            result = self._run_steps()
        except Exception:
            self._enter(Step.Failed)
            raise

        self._enter(Step.Done)
        self.logger.info("Ark server and client setup completed successfully")
        return result

    def _run_steps(self) -> BootstrapResult:
        cfg = self.config

        self._enter(Step.WaitService)
        self.wait_for_server()

        self._enter(Step.ProvisionWallet)
        self.provision_wallet()

        self._enter(Step.WaitWallet)
        self.wait_for_wallet()

        self._enter(Step.FetchInfo)
        info = self.server.get_info()
        self.logger.info(f"Ark Server Public Key: {info.pubkey}")

        self._enter(Step.FundServiceAddr)
        arkd_address = self.executor.execute(self.cmds.wallet_address()).decode().strip()
        self.logger.info(f"Funding arkd address: {arkd_address}")
        self.executor.execute(self.cmds.faucet(arkd_address))

        self._enter(Step.ServiceFundingDelay)
        self._sleep(cfg.confirmation_delay)

        self._enter(Step.InitClient)
        self.executor.execute(
            self.cmds.client_init(cfg.server_url, cfg.explorer_url, cfg.password, cfg.network)
        )

        self._enter(Step.FetchBoardingAddr)
        boarding_address = parse_boarding_address(self.executor.execute(self.cmds.receive()))

        self._enter(Step.FundBoardingAddr)
        self.logger.info(f"Funding boarding address: {boarding_address}")
        self.executor.execute(self.cmds.faucet(boarding_address))

        self._enter(Step.BoardingFundingDelay)
        self._sleep(cfg.confirmation_delay)

        self._enter(Step.Settle)
        self.settlement.run(self.cmds.settle(cfg.password))
        self.logger.info("Settlement completed successfully")

        return BootstrapResult(
            server_pubkey=info.pubkey,
            arkd_address=arkd_address,
            boarding_address=boarding_address,
        )

    def wait_for_server(self) -> None:
        budget = self.config.service_budget
        poll_until_ready(
            self.server.is_reachable,
            max_retries=budget.max_retries,
            retry_delay=budget.retry_delay,
            description="ARK server",
            sleep=self._sleep,
        )

    def provision_wallet(self) -> None:
        """Create and unlock the arkd wallet; both are no-ops if already done."""
        cfg = self.config
        self.executor.execute(self.cmds.wallet_create(cfg.password, cfg.mnemonic))
        self.executor.execute(self.cmds.wallet_unlock(cfg.password))

    def wallet_status(self) -> WalletStatus:
        output = self.executor.execute(self.cmds.wallet_status())
        return WalletStatus.parse(output.decode(errors="replace"))

    def wait_for_wallet(self) -> None:
        budget = self.config.wallet_budget
        poll_until_ready(
            lambda: self.wallet_status().is_ready,
            max_retries=budget.max_retries,
            retry_delay=budget.retry_delay,
            description="arkd wallet",
            sleep=self._sleep,
        )

    def _enter(self, step: Step) -> None:
        self.step = step
        set_current_step(step)
        self.logger.debug(f"entering step {step}")
