from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

from .networks import Network

RPC_ENV = {
    Network.DEVNET:   "SOL_DASH_DEVNET_RPC",
    Network.MAINNET:  "SOL_DASH_MAINNET_RPC",
    Network.LOCALNET: "SOL_DASH_LOCALNET_RPC",
}


@dataclass(frozen=True)
class Settings:
    home: Path
    log_level: str = "INFO"
    rpc_overrides: dict = field(default_factory=dict)

    @property
    def log_path(self) -> Path:
        return self.home / "sol-dash.log"


def load_env() -> None:
    # .env next to where the command is run; real environment variables win
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def load_settings() -> Settings:
    load_env()
    home = Path(os.getenv("SOL_DASH_HOME") or Path.home() / ".sol-dash").expanduser()
    level = (os.getenv("SOL_DASH_LOG_LEVEL") or "INFO").upper()
    overrides = {}
    for net, var in RPC_ENV.items():
        url = (os.getenv(var) or "").strip()
        if url:
            overrides[net] = url
    return Settings(home=home, log_level=level, rpc_overrides=overrides)
