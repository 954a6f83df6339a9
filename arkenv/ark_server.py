"""
HTTP client for the Ark server info endpoint.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import requests


@dataclass
class ServerInfo:
    """Parsed `/v1/info` response. Only the pubkey is consumed."""

    pubkey: str
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @staticmethod
    def from_json(data: dict[str, Any]) -> "ServerInfo":
        return ServerInfo(pubkey=data["pubkey"], raw=data)


class ArkServerClient:
    """
    Talks to the Ark server over plain HTTP.

    Usage:
        server = ArkServerClient("http://localhost:7070/v1/info")
        if server.is_reachable():
            print(server.get_info().pubkey)
    """

    def __init__(self, info_url: str, timeout: float = 10.0):
        self.info_url = info_url
        self.timeout = timeout
        self.logger = logging.getLogger("ark_server")

    def is_reachable(self) -> bool:
        """
        Readiness probe: true as soon as the request completes at the transport
        level. The status code and body are ignored.
        """
        try:
            requests.get(self.info_url, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.debug(f"info probe failed: {e}")
            return False
        return True

    def get_info(self) -> ServerInfo:
        """
        Fetch and parse the server info.

        Raises:
            requests.RequestException: If the HTTP request fails
            ValueError: If the body is not JSON
            KeyError: If the response has no `pubkey`
        """
        resp = requests.get(self.info_url, timeout=self.timeout)
        resp.raise_for_status()
        return ServerInfo.from_json(resp.json())
