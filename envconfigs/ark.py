"""Ark environment configuration."""

import os

import flexitest

from arkenv.base_test import ARK_SERVICE
from arkenv.bootstrap import ArkBootstrap
from arkenv.config import BootstrapConfig
from arkenv.service import ArkService


class ArkEnvConfig(flexitest.EnvConfig):
    """
    Ark environment: bootstraps an already running `nigiri` stack and exposes
    it as a single service.
    """

    def __init__(self, config: BootstrapConfig | None = None):
        self.config = config or BootstrapConfig()

    def init(self, ectx: flexitest.EnvContext) -> flexitest.LiveEnv:
        datadir = ectx.make_service_dir(ARK_SERVICE)
        with open(os.path.join(datadir, "bootstrap.toml"), "w") as f:
            f.write(self.config.as_toml_string())

        result = ArkBootstrap(self.config).run()

        services = {
            ARK_SERVICE: ArkService(self.config, result),
        }

        return flexitest.LiveEnv(services)
