"""Server info checks on the bootstrapped environment."""

import logging

import flexitest

from arkenv.base_test import ArkTest

logger = logging.getLogger(__name__)


@flexitest.register
class TestServerInfo(ArkTest):
    """The info endpoint keeps reporting the pubkey seen during bootstrap."""

    def __init__(self, ctx: flexitest.InitContext):
        ctx.set_env("ark")

    def main(self, ctx):
        ark = self.get_ark()
        assert ark.check_status(), "Ark server not reachable after bootstrap"

        info = ark.create_client().get_info()
        logger.info(f"server pubkey: {info.pubkey}")
        expected = ark.get_prop("server_pubkey")
        assert info.pubkey == expected, f"Expected pubkey {expected}, got {info.pubkey}"

        return True
