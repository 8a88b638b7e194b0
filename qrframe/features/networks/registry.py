"""Fixed catalog of supported chains for QR Frame."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any


@dataclass(frozen=True)
class Network:
    key: str
    display_name: str
    explorer_url_template: str
    accent_color: str
    button_label: str | None = None

    @property
    def label(self) -> str:
        return self.button_label or self.display_name

    def explorer_url(self, address: str) -> str:
        return self.explorer_url_template + address


_NETWORK_ENTRIES = (
    Network("eth", "Ethereum", "https://etherscan.io/address/", "#627EEA"),
    Network("base", "Base", "https://basescan.org/address/", "#0052FF"),
    Network("op", "Optimism", "https://optimistic.etherscan.io/address/", "#FF0420"),
    Network("arb", "Arbitrum", "https://arbiscan.io/address/", "#28A0EF"),
    Network("polygon", "Polygon", "https://polygonscan.com/address/", "#8247E5"),
    Network("bnb", "BNB Chain", "https://bscscan.com/address/", "#F3BA2F"),
    Network("avax", "Avalanche", "https://snowtrace.io/address/", "#E84142"),
    Network("fantom", "Fantom", "https://ftmscan.com/address/", "#1969FF"),
    Network(
        "gnos",
        "Gnosis Chain",
        "https://gnosisscan.io/address/",
        "#48A9A6",
        button_label="Gnosis",
    ),
)


class NetworkRegistry:
    """Read-only, ordered mapping of network key to ``Network``."""

    def __init__(self, networks: Iterable[Network]):
        entries: dict[str, Network] = {}
        for network in networks:
            if network.key in entries:
                raise ValueError(f"Duplicate network key: {network.key}")
            entries[network.key] = network
        self._networks: Mapping[str, Network] = MappingProxyType(entries)

    @property
    def networks(self) -> Mapping[str, Network]:
        return self._networks

    def lookup(self, key: Any) -> Network | None:
        if not isinstance(key, str):
            return None
        return self._networks.get(key)

    def __iter__(self) -> Iterator[Network]:
        return iter(self._networks.values())


DEFAULT_REGISTRY = NetworkRegistry(_NETWORK_ENTRIES)
NETWORKS: Mapping[str, Network] = DEFAULT_REGISTRY.networks


def lookup(key: Any) -> Network | None:
    return DEFAULT_REGISTRY.lookup(key)
