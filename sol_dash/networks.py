from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional
from urllib.parse import quote

from solana.rpc.commitment import Commitment, Finalized


class Network(str, Enum):
    DEVNET = "devnet"
    MAINNET = "mainnet"
    LOCALNET = "localnet"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Endpoint:
    url: str
    commitment: Commitment


ENDPOINTS = {
    Network.DEVNET:   Endpoint("https://api.devnet.solana.com", Finalized),
    Network.MAINNET:  Endpoint("https://api.mainnet-beta.solana.com", Finalized),
    Network.LOCALNET: Endpoint("http://localhost:8899", Finalized),
}

# Explorer's ?cluster= value; mainnet is the default cluster and takes none.
EXPLORER_CLUSTER = {
    Network.DEVNET: "devnet",
    Network.MAINNET: None,
    Network.LOCALNET: "custom",
}


def resolve(network: Network, overrides: Optional[Mapping[Network, str]] = None) -> Endpoint:
    """Map a network to its RPC endpoint and commitment level.

    `overrides` replaces the URL for a network (see config.Settings); the
    commitment level is always the built-in one.
    """
    ep = ENDPOINTS[Network(network)]
    url = (overrides or {}).get(Network(network))
    if url:
        return Endpoint(url, ep.commitment)
    return ep


def explorer_tx_url(signature, network: Network, endpoint: Optional[Endpoint] = None) -> str:
    url = f"https://explorer.solana.com/tx/{signature}"
    cluster = EXPLORER_CLUSTER[Network(network)]
    if cluster == "custom":
        rpc = endpoint.url if endpoint else ENDPOINTS[Network.LOCALNET].url
        return f"{url}?cluster=custom&customUrl={quote(rpc, safe='')}"
    if cluster:
        return f"{url}?cluster={cluster}"
    return url
