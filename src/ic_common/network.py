"""Network selection — which replica the ledger client talks to."""

from dataclasses import dataclass
from enum import Enum

from config.settings import Settings, settings
from src.ic_common.errors import InvalidNetworkConfigurationError


class Network(str, Enum):
    LOCAL = "local"
    IC = "ic"


@dataclass(frozen=True)
class NetworkConfig:
    network: Network
    host: str

    @property
    def is_local(self) -> bool:
        return self.network is Network.LOCAL

    @classmethod
    def from_name(cls, name: str, cfg: Settings | None = None) -> "NetworkConfig":
        """Resolve a DFX_NETWORK value. Unknown names are fatal, never defaulted."""
        cfg = cfg or settings
        try:
            network = Network(name)
        except ValueError:
            raise InvalidNetworkConfigurationError(name) from None
        host = cfg.LOCAL_HOST if network is Network.LOCAL else cfg.IC_HOST
        return cls(network=network, host=host)


def get_network_config(cfg: Settings | None = None) -> NetworkConfig:
    """Network config for the configured DFX_NETWORK."""
    cfg = cfg or settings
    return NetworkConfig.from_name(cfg.DFX_NETWORK, cfg)
