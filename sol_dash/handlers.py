from __future__ import annotations
import logging
from typing import Optional

from solders.keypair import Keypair
from solders.system_program import TransferParams, transfer
from solders.transaction import Transaction

from . import output
from .commands import AirdropArgs, BalanceArgs, Command, GenerateArgs, TransferArgs
from .config import Settings
from .errors import AirdropNotSupported
from .networks import Endpoint, Network, explorer_tx_url, resolve
from .rpc import connect as open_rpc
from .wallet import fmt_sol, load_identity, load_keypair, parse_pubkey, sol_to_lamports, write_keypair

log = logging.getLogger(__name__)

AIRDROP_NETWORKS = (Network.DEVNET, Network.LOCALNET)
WARNING = "DO NOT SHARE THIS KEYPAIR OR THE KEYPAIR FILE WITH ANYONE"


def generate_keypair(args: GenerateArgs) -> Keypair:
    kp = Keypair()
    if args.output_file is not None:
        path = write_keypair(kp, args.output_file)
        output.say(f"Keypair saved to {output.value(path, 'bold green')}")
    else:
        output.say("[bold yellow]No output file specified[/bold yellow]")
    output.say(f"Wallet address: {output.value(kp.pubkey(), 'bold blue')}")
    output.say("Keypair:")
    output.raw(str(list(bytes(kp))))
    output.say(f"[bold red]{WARNING}[/bold red]")
    return kp


async def get_balance_handler(args: BalanceArgs, rpc) -> list[int]:
    identity = load_identity(args.address, args.keypair)
    balances = []
    # address and keypair both given -> two queries, one line each
    for pub in identity.pubkeys():
        lamports = await rpc.get_balance(pub)
        log.info("balance of %s on %s: %d lamports", pub, args.network, lamports)
        output.say(f"Your SOL balance is: {output.value(fmt_sol(lamports), 'bold green')}")
        balances.append(lamports)
    return balances


def ensure_airdrop_allowed(network: Network) -> None:
    if Network(network) not in AIRDROP_NETWORKS:
        raise AirdropNotSupported(network)


async def request_airdrop_handler(args: AirdropArgs, rpc, endpoint: Optional[Endpoint] = None) -> list:
    ensure_airdrop_allowed(args.network)
    identity = load_identity(args.address, args.keypair)
    lamports = sol_to_lamports(args.value)
    sigs = []
    for pub in identity.pubkeys():
        log.info("requesting airdrop of %d lamports to %s on %s", lamports, pub, args.network)
        sig = await rpc.request_airdrop(pub, lamports)
        output.say(f"Airdrop requested successfully, signature: {output.value(sig, 'bold yellow')}")
        output.say(f"Explorer: {explorer_tx_url(sig, args.network, endpoint)}")
        sigs.append(sig)
    return sigs


def build_transfer(sender: Keypair, to, lamports: int, recent_blockhash) -> Transaction:
    ix = transfer(TransferParams(from_pubkey=sender.pubkey(), to_pubkey=to, lamports=lamports))
    return Transaction.new_signed_with_payer([ix], sender.pubkey(), [sender], recent_blockhash)


async def transfer_handler(args: TransferArgs, rpc, endpoint: Optional[Endpoint] = None):
    sender = load_keypair(args.from_keypair)
    to = parse_pubkey(args.to)
    lamports = sol_to_lamports(args.value)

    blockhash = await rpc.get_latest_blockhash()
    tx = build_transfer(sender, to, lamports, blockhash)
    log.info("transferring %d lamports %s -> %s on %s", lamports, sender.pubkey(), to, args.network)
    sig = await rpc.send_and_confirm(tx)

    output.say(f"Transfer successful, signature: {output.value(sig, 'bold yellow')}")
    output.say(f"Explorer: {explorer_tx_url(sig, args.network, endpoint)}")
    return sig


async def run(command: Command, settings: Settings):
    if isinstance(command, GenerateArgs):
        return generate_keypair(command)
    if not isinstance(command, (BalanceArgs, AirdropArgs, TransferArgs)):
        raise TypeError(f"unknown command: {command!r}")
    if isinstance(command, AirdropArgs):
        # refuse before opening a client
        ensure_airdrop_allowed(command.network)

    endpoint = resolve(command.network, settings.rpc_overrides)
    async with open_rpc(endpoint) as rpc:
        if isinstance(command, BalanceArgs):
            return await get_balance_handler(command, rpc)
        if isinstance(command, AirdropArgs):
            return await request_airdrop_handler(command, rpc, endpoint)
        return await transfer_handler(command, rpc, endpoint)
