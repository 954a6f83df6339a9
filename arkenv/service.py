"""
flexitest service exposing an already bootstrapped Ark stack to tests.
"""

import flexitest

from arkenv.ark_server import ArkServerClient
from arkenv.bootstrap import BootstrapResult
from arkenv.config import BootstrapConfig
from arkenv.executor import CommandExecutor
from arkenv.wallet import NigiriCommands, WalletStatus


class ArkService(flexitest.Service):
    """
    The Ark stack is run by `nigiri`, outside of flexitest, so there is no
    process to start or stop here. The service only carries the bootstrap
    result as props and gives tests access to the server and wallet.
    """

    def __init__(self, config: BootstrapConfig, result: BootstrapResult):
        super().__init__(
            {
                "server_url": config.server_url,
                "info_url": config.info_url,
                "server_pubkey": result.server_pubkey,
                "arkd_address": result.arkd_address,
                "boarding_address": result.boarding_address,
            }
        )
        self.config = config
        self._executor = CommandExecutor()
        self._cmds = NigiriCommands(config.nigiri_bin)

    def start(self):
        pass

    def stop(self):
        pass

    def is_started(self) -> bool:
        return True

    def check_status(self) -> bool:
        return self.create_client().is_reachable()

    def create_client(self) -> ArkServerClient:
        return ArkServerClient(self.config.info_url, self.config.http_timeout)

    def wallet_status(self) -> WalletStatus:
        output = self._executor.execute(self._cmds.wallet_status())
        return WalletStatus.parse(output.decode(errors="replace"))
