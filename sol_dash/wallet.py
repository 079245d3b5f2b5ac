from __future__ import annotations
import os, json, logging
from dataclasses import dataclass
from decimal import Decimal, DecimalException, ROUND_DOWN
from pathlib import Path
from typing import Optional, Union

from solders.keypair import Keypair
from solders.pubkey import Pubkey

from .errors import (
    InvalidAddress, InvalidAmount, KeypairReadError, KeypairWriteError, MissingIdentity,
)

log = logging.getLogger(__name__)

LAMPORTS_PER_SOL = 1_000_000_000
MAX_LAMPORTS = 2**64 - 1

PathLike = Union[str, os.PathLike]


@dataclass(frozen=True)
class Identity:
    address: Optional[Pubkey] = None
    keypair: Optional[Keypair] = None

    def pubkeys(self) -> list[Pubkey]:
        # address first, then the keypair's own pubkey; both when both were given
        out = []
        if self.address is not None:
            out.append(self.address)
        if self.keypair is not None:
            out.append(self.keypair.pubkey())
        return out


def parse_pubkey(address: str) -> Pubkey:
    try:
        return Pubkey.from_string(address)
    except Exception as e:
        raise InvalidAddress(address, e) from e


def load_keypair(path: PathLike) -> Keypair:
    """Read a keypair file written by solana-keygen (JSON array of 64 ints).

    A JSON string holding a base58 secret key is accepted too.
    """
    try:
        raw = json.loads(Path(path).read_text())
        if isinstance(raw, list):
            return Keypair.from_bytes(bytes(raw))
        if isinstance(raw, str):
            return Keypair.from_base58_string(raw)
        raise ValueError("Unsupported keypair format; expected Solana CLI JSON array")
    except Exception as e:
        raise KeypairReadError(path, e) from e


def write_keypair(kp: Keypair, path: PathLike) -> Path:
    p = Path(path)
    try:
        if p.parent and not p.parent.exists():
            p.parent.mkdir(parents=True, exist_ok=True)
        # owner-only from creation; fchmod also tightens a pre-existing file before the secret lands
        fd = os.open(p, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            if hasattr(os, "fchmod"):
                os.fchmod(f.fileno(), 0o600)
            f.write(json.dumps(list(bytes(kp))))
    except OSError as e:
        raise KeypairWriteError(path, e) from e
    log.info("wrote keypair for %s to %s", kp.pubkey(), p)
    return p


def load_identity(address: Optional[str] = None, keypair_path: Optional[PathLike] = None) -> Identity:
    if address is None and keypair_path is None:
        raise MissingIdentity()
    pub = parse_pubkey(address) if address is not None else None
    kp = load_keypair(keypair_path) if keypair_path is not None else None
    return Identity(address=pub, keypair=kp)


def sol_to_lamports(sol) -> int:
    try:
        amount = Decimal(str(sol))
        if not amount.is_finite() or amount < 0:
            raise InvalidAmount(f"Invalid SOL amount: {sol}")
        # compare before scaling so huge exponents never reach the multiply
        if amount > Decimal(MAX_LAMPORTS) / LAMPORTS_PER_SOL:
            raise InvalidAmount(f"SOL amount too large: {sol}")
        return int((amount * LAMPORTS_PER_SOL).to_integral_value(rounding=ROUND_DOWN))
    except DecimalException as e:
        raise InvalidAmount(f"Invalid SOL amount: {sol!r}") from e


def lamports_to_sol(lamports: int) -> Decimal:
    return Decimal(int(lamports)) / Decimal(LAMPORTS_PER_SOL)


def fmt_sol(lamports: int) -> str:
    # 2_500_000_000 -> "2.5", 0 -> "0", 1 -> "0.000000001"
    d = lamports_to_sol(lamports).normalize()
    return format(d, "f")
