"""Client modules for gateway and REST communication."""

from discordlink.client.rest import RestClient
from discordlink.client.streaming import GatewayClient

__all__ = ["RestClient", "GatewayClient"]
