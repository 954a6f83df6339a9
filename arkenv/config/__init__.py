"""
Configuration dataclasses and constants.
"""

from arkenv.config.config import BootstrapConfig, RetryBudget
from arkenv.config.constants import (
    ALREADY_INITIALIZED_MARKER,
    DEFAULT_MNEMONIC,
    DEFAULT_PASSWORD,
    Step,
)

__all__ = [
    # config.py
    "BootstrapConfig",
    "RetryBudget",
    # constants.py
    "ALREADY_INITIALIZED_MARKER",
    "DEFAULT_MNEMONIC",
    "DEFAULT_PASSWORD",
    "Step",
]
