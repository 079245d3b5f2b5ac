import json, os
from contextlib import asynccontextmanager

import pytest
from solders.hash import Hash
from solders.keypair import Keypair

CHAIN_TIP = Hash(b"abc".ljust(32, b"\0"))
TX_SIG = "3n4ZrXmuW6cdvpLW9qVwFvmSExpG9N7qdd2HzXPLQtNxXyeC6nTrfYQuNYvqGsZ9kbkaLXHbxPTdPDTsfEFyRMaZ"
AIRDROP_SIG = "4gJ8S1SZAmzfL5vPx2CKXgPBDJ1Eb1wq6y5nF3hmBKgMqpqwoe1Z3cdLsVy28hPD5WPoGKFsmTXe5h97AvZrC4tm"


class FakeRpc:
    """Stands in for rpc.WalletRpc; records every call."""

    def __init__(self, balance=0, blockhash=CHAIN_TIP, signature=TX_SIG, airdrop_signature=AIRDROP_SIG):
        self.balance = balance
        self.blockhash = blockhash
        self.signature = signature
        self.airdrop_signature = airdrop_signature
        self.calls = []
        self.sent = []

    async def get_balance(self, pubkey):
        self.calls.append(("get_balance", pubkey))
        return self.balance

    async def request_airdrop(self, pubkey, lamports):
        self.calls.append(("request_airdrop", pubkey, lamports))
        return self.airdrop_signature

    async def get_latest_blockhash(self):
        self.calls.append(("get_latest_blockhash",))
        return self.blockhash

    async def send_and_confirm(self, tx):
        self.calls.append(("send_and_confirm", tx))
        self.sent.append(tx)
        return self.signature


@pytest.fixture(scope="session", autouse=True)
def sol_dash_home(tmp_path_factory):
    # keeps the rotating log file out of the real home directory
    home = tmp_path_factory.mktemp("sol-dash-home")
    old = os.environ.get("SOL_DASH_HOME")
    os.environ["SOL_DASH_HOME"] = str(home)
    yield home
    if old is None:
        os.environ.pop("SOL_DASH_HOME", None)
    else:
        os.environ["SOL_DASH_HOME"] = old


@pytest.fixture
def fake_rpc():
    return FakeRpc()


@pytest.fixture
def patch_connect(monkeypatch):
    """Route handlers.run through a FakeRpc instead of a live AsyncClient."""
    state = {"rpc": FakeRpc(), "endpoints": []}

    @asynccontextmanager
    async def fake_connect(endpoint):
        state["endpoints"].append(endpoint)
        yield state["rpc"]

    monkeypatch.setattr("sol_dash.handlers.open_rpc", fake_connect)
    return state


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def keypair_file(tmp_path, keypair):
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(keypair))))
    return path
