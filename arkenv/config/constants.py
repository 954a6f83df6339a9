"""
Constants used throughout the bootstrap.
"""

from enum import Enum

DEFAULT_PASSWORD = "secret"

# Deterministic 24-word mnemonic so every run provisions the same arkd wallet.
DEFAULT_MNEMONIC = " ".join(["abandon"] * 24)

# Substring in a failing command's stderr meaning the resource is already provisioned.
ALREADY_INITIALIZED_MARKER = "already initialized"


class Step(str, Enum):
    """
    States of the bootstrap sequence, in execution order.

    Using str Enum allows the step to be logged and compared as a plain string.
    """

    WaitService = "wait_service"
    ProvisionWallet = "provision_wallet"
    WaitWallet = "wait_wallet"
    FetchInfo = "fetch_info"
    FundServiceAddr = "fund_service_addr"
    ServiceFundingDelay = "service_funding_delay"
    InitClient = "init_client"
    FetchBoardingAddr = "fetch_boarding_addr"
    FundBoardingAddr = "fund_boarding_addr"
    BoardingFundingDelay = "boarding_funding_delay"
    Settle = "settle"
    Done = "done"
    Failed = "failed"

    def __str__(self) -> str:
        """Allow direct use in f-strings and format operations."""
        return self.value
