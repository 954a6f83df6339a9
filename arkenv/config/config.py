"""
Configuration dataclasses for the bootstrap.
"""

from dataclasses import asdict, dataclass, field

import toml

from arkenv.config.constants import DEFAULT_MNEMONIC, DEFAULT_PASSWORD


@dataclass
class RetryBudget:
    max_retries: int = field(default=30)
    retry_delay: float = field(default=2.0)  # seconds

    def __post_init__(self):
        if self.max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {self.max_retries}")
        if self.retry_delay < 0:
            raise ValueError(f"retry_delay must not be negative, got {self.retry_delay}")


@dataclass
class BootstrapConfig:
    server_url: str = field(default="http://localhost:7070")
    explorer_url: str = field(default="http://chopsticks:3000")
    network: str = field(default="regtest")
    password: str = field(default=DEFAULT_PASSWORD)
    mnemonic: str = field(default=DEFAULT_MNEMONIC)
    nigiri_bin: str = field(default="nigiri")
    service_budget: RetryBudget = field(default_factory=RetryBudget)
    wallet_budget: RetryBudget = field(default_factory=RetryBudget)
    confirmation_delay: float = field(default=5.0)  # seconds, after each faucet call
    http_timeout: float = field(default=10.0)

    @property
    def info_url(self) -> str:
        return f"{self.server_url.rstrip('/')}/v1/info"

    def as_toml_string(self) -> str:
        d = asdict(self)
        # Password is never written to disk.
        d.pop("password")
        return toml.dumps(d)
