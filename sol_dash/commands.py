from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from .networks import Network


@dataclass(frozen=True)
class GenerateArgs:
    output_file: Optional[Path] = None


@dataclass(frozen=True)
class BalanceArgs:
    address: Optional[str] = None
    keypair: Optional[Path] = None
    network: Network = Network.DEVNET


@dataclass(frozen=True)
class AirdropArgs:
    value: Decimal
    address: Optional[str] = None
    keypair: Optional[Path] = None
    network: Network = Network.DEVNET


@dataclass(frozen=True)
class TransferArgs:
    from_keypair: Path
    to: str
    value: Decimal
    network: Network = Network.DEVNET


Command = Union[GenerateArgs, BalanceArgs, AirdropArgs, TransferArgs]
