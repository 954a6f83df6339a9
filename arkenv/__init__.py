"""
Bootstrap library for a local Ark regtest environment.
Provides the orchestrator, command execution, readiness polling and settlement.
"""

from .bootstrap import ArkBootstrap, BootstrapResult
from .config import BootstrapConfig, RetryBudget
from .errors import BootstrapError, ExecutionError, ReadinessTimeoutError, SubprocessError
from .wait import poll_until_ready

__all__ = [
    "ArkBootstrap",
    "BootstrapResult",
    "BootstrapConfig",
    "RetryBudget",
    "BootstrapError",
    "ExecutionError",
    "ReadinessTimeoutError",
    "SubprocessError",
    "poll_until_ready",
]
