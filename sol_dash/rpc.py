"""Narrow async view of the Solana RPC client.

Handlers only ever need four calls: balance, airdrop, latest blockhash and
send-and-confirm. `WalletRpc` exposes exactly those over solana-py's
`AsyncClient` so tests can hand the handlers a fake with the same methods.
Every client failure comes back as `RpcError` with the original message.
"""
from __future__ import annotations
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from solana.rpc.async_api import AsyncClient
from solana.rpc.types import TxOpts
from solders.hash import Hash
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from .errors import RpcError
from .networks import Endpoint

log = logging.getLogger(__name__)


class WalletRpc:
    def __init__(self, client: AsyncClient, commitment):
        self.client = client
        self.commitment = commitment

    async def get_balance(self, pubkey: Pubkey) -> int:
        try:
            resp = await self.client.get_balance(pubkey, commitment=self.commitment)
        except Exception as e:
            raise RpcError(f"getBalance({pubkey})", e) from e
        return resp.value

    async def request_airdrop(self, pubkey: Pubkey, lamports: int) -> Signature:
        try:
            resp = await self.client.request_airdrop(pubkey, lamports, commitment=self.commitment)
        except Exception as e:
            raise RpcError(f"requestAirdrop({pubkey}, {lamports})", e) from e
        return resp.value

    async def get_latest_blockhash(self) -> Hash:
        try:
            resp = await self.client.get_latest_blockhash(commitment=self.commitment)
        except Exception as e:
            raise RpcError("getLatestBlockhash", e) from e
        return resp.value.blockhash

    async def send_and_confirm(self, tx: Transaction) -> Signature:
        opts = TxOpts(skip_preflight=False, preflight_commitment=self.commitment)
        try:
            resp = await self.client.send_raw_transaction(bytes(tx), opts=opts)
            sig = resp.value
            log.info("sent transaction %s, waiting for %s confirmation", sig, self.commitment)
            confirmed = await self.client.confirm_transaction(sig, commitment=self.commitment)
        except Exception as e:
            raise RpcError("sendTransaction", e) from e
        # confirm_transaction only waits for the commitment level; the status carries the outcome
        status = confirmed.value[0] if confirmed.value else None
        if status is None:
            raise RpcError("sendTransaction", RuntimeError(f"no status returned for {sig}"))
        if status.err is not None:
            raise RpcError("sendTransaction", RuntimeError(f"transaction {sig} failed: {status.err}"))
        return sig


def client_for(endpoint: Endpoint) -> AsyncClient:
    return AsyncClient(endpoint.url, commitment=endpoint.commitment)


@asynccontextmanager
async def connect(endpoint: Endpoint) -> AsyncIterator[WalletRpc]:
    client = client_for(endpoint)
    log.info("using RPC %s (commitment=%s)", endpoint.url, endpoint.commitment)
    try:
        yield WalletRpc(client, endpoint.commitment)
    finally:
        await client.close()
