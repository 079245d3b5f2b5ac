from __future__ import annotations


class WalletError(Exception):
    """Base class for every failure reported to the user."""


class MissingIdentity(WalletError):
    def __init__(self):
        super().__init__("Either `address` or `keypair` must be provided.")


class InvalidAddress(WalletError):
    def __init__(self, address: str, cause: Exception | None = None):
        msg = f"Invalid public key address: {address}"
        if cause is not None:
            msg += f" ({cause})"
        super().__init__(msg)
        self.address = address


class KeypairReadError(WalletError):
    def __init__(self, path, cause: Exception):
        super().__init__(f"Failed to read keypair from file `{path}`: {cause}")
        self.path = path


class KeypairWriteError(WalletError):
    def __init__(self, path, cause: Exception):
        super().__init__(f"Failed to write keypair to file `{path}`: {cause}")
        self.path = path


class AirdropNotSupported(WalletError):
    def __init__(self, network):
        super().__init__(
            f"You can only request for an airdrop on devnet or localnet at the moment (got {network})"
        )
        self.network = network


class InvalidAmount(WalletError):
    pass


class RpcError(WalletError):
    def __init__(self, operation: str, cause: Exception):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
