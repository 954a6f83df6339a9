"""Environment configurations for functional tests."""

from envconfigs.ark import ArkEnvConfig

__all__ = [
    "ArkEnvConfig",
]
