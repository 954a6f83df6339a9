"""
Wallet status parsing and `nigiri` command builders.
"""

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class WalletStatus:
    initialized: bool
    unlocked: bool
    synced: bool

    @property
    def is_ready(self) -> bool:
        return self.initialized and self.unlocked and self.synced

    @staticmethod
    def parse(output: str) -> "WalletStatus":
        """Parse the text printed by `nigiri arkd wallet status`."""
        return WalletStatus(
            initialized="initialized: true" in output,
            unlocked="unlocked: true" in output,
            synced="synced: true" in output,
        )


def parse_boarding_address(output: bytes | str) -> str:
    """
    Extract the boarding address from `nigiri ark receive` JSON.

    Raises:
        json.JSONDecodeError: If the output is not JSON
        KeyError: If `boarding_address` is missing
    """
    return json.loads(output)["boarding_address"]


class NigiriCommands:
    """
    Builds the argument lists for every `nigiri` invocation of the bootstrap.

    Usage:
        cmds = NigiriCommands()
        executor.execute(cmds.faucet(addr))
    """

    def __init__(self, nigiri_bin: str = "nigiri"):
        self.bin = nigiri_bin

    def wallet_status(self) -> list[str]:
        return [self.bin, "arkd", "wallet", "status"]

    def wallet_create(self, password: str, mnemonic: str) -> list[str]:
        # fmt: off
        return [
            self.bin, "arkd", "wallet", "create",
            "--password", password,
            "--mnemonic", mnemonic,
        ]
        # fmt: on

    def wallet_unlock(self, password: str) -> list[str]:
        return [self.bin, "arkd", "wallet", "unlock", "--password", password]

    def wallet_address(self) -> list[str]:
        return [self.bin, "arkd", "wallet", "address"]

    def faucet(self, address: str) -> list[str]:
        return [self.bin, "faucet", address]

    def client_init(
        self, server_url: str, explorer_url: str, password: str, network: str
    ) -> list[str]:
        # fmt: off
        return [
            self.bin, "ark", "init",
            "--server-url", server_url,
            "--explorer", explorer_url,
            "--password", password,
            "--network", network,
        ]
        # fmt: on

    def receive(self) -> list[str]:
        return [self.bin, "ark", "receive"]

    def settle(self, password: str) -> list[str]:
        return [self.bin, "ark", "settle", "--password", password]
