from __future__ import annotations
import argparse, asyncio, logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from . import __version__, output
from .commands import AirdropArgs, BalanceArgs, Command, GenerateArgs, TransferArgs
from .config import load_settings
from .errors import InvalidAmount, WalletError
from .handlers import run
from .networks import Network
from .utils import get_logger
from .wallet import sol_to_lamports

log = logging.getLogger(__name__)


def sol_amount(text: str) -> Decimal:
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not amount.is_finite() or amount < 0:
        raise argparse.ArgumentTypeError(f"amount must be a non-negative number of SOL: {text!r}")
    try:
        sol_to_lamports(amount)
    except InvalidAmount as e:
        raise argparse.ArgumentTypeError(str(e))
    return amount


def _add_network(p: argparse.ArgumentParser) -> None:
    p.add_argument("-n", "--network", type=Network, choices=list(Network), default=Network.DEVNET,
                   help="cluster to talk to (default: devnet)")


def _add_wallet(p: argparse.ArgumentParser) -> None:
    p.add_argument("-a", "--address", help="the public key of the wallet")
    p.add_argument("-k", "--keypair", type=Path, help="the path to the keypair file")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sol-dash", description="Solana wallet utility")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("--verbose", action="store_true", help="echo log records to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="generate keypair and optionally save it to a file")
    gen.add_argument("-o", "--output-file", type=Path,
                     help="file where the generated keypair should be saved")

    bal = sub.add_parser("balance", help="check wallet balance")
    _add_wallet(bal)
    _add_network(bal)

    air = sub.add_parser("airdrop", help="request airdrop")
    _add_wallet(air)
    _add_network(air)
    air.add_argument("-v", "--value", type=sol_amount, required=True, help="amount of SOL to request")

    tx = sub.add_parser("transfer", help="transfer sol")
    tx.add_argument("-f", "--from", dest="from_keypair", type=Path, required=True,
                    help="the path to the keypair file for the wallet where you want to transfer from")
    tx.add_argument("-t", "--to", required=True,
                    help="the wallet address of the wallet where you want to transfer to")
    _add_network(tx)
    tx.add_argument("-v", "--value", type=sol_amount, required=True, help="amount of SOL to send")
    return ap


def to_command(ns: argparse.Namespace) -> Command:
    if ns.command == "generate":
        return GenerateArgs(output_file=ns.output_file)
    if ns.command == "balance":
        return BalanceArgs(address=ns.address, keypair=ns.keypair, network=ns.network)
    if ns.command == "airdrop":
        return AirdropArgs(value=ns.value, address=ns.address, keypair=ns.keypair, network=ns.network)
    if ns.command == "transfer":
        return TransferArgs(from_keypair=ns.from_keypair, to=ns.to, value=ns.value, network=ns.network)
    raise ValueError(f"unknown command {ns.command!r}")


def parse_args(argv=None) -> tuple[Command, argparse.Namespace]:
    ns = build_parser().parse_args(argv)
    return to_command(ns), ns


def main(argv=None) -> int:
    command, ns = parse_args(argv)
    settings = load_settings()
    get_logger(settings.log_path, settings.log_level, verbose=ns.verbose)
    log.info("running %s", type(command).__name__)
    try:
        asyncio.run(run(command, settings))
    except WalletError as e:
        log.error("%s: %s", type(e).__name__, e)
        output.error(str(e))
        return 1
    return 0
