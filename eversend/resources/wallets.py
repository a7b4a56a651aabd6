"""Wallet operations."""

from eversend.resources.base import Resource, require, segment
from eversend.types import Wallet


class Wallets(Resource):
    def get_wallets(self) -> list[Wallet]:
        """List every wallet on the account."""
        return self._request("GET", "/wallets", model=list[Wallet], data_key="wallets")

    def get_wallet(self, wallet_id: str) -> Wallet:
        """Get a single wallet.

        Args:
            wallet_id: Wallet currency code (e.g., "UGX")
        """
        wallet_id = segment("wallet_id", wallet_id)
        return self._request("GET", f"/wallets/{wallet_id}", model=Wallet, data_key="wallet")

    def activate_wallet(self, wallet_id: str) -> Wallet:
        body = {"wallet": require("wallet_id", wallet_id)}
        return self._request(
            "POST", "/wallets/activate", model=Wallet, data_key="wallet", json=body
        )

    def deactivate_wallet(self, wallet_id: str) -> Wallet:
        body = {"wallet": require("wallet_id", wallet_id)}
        return self._request(
            "POST", "/wallets/deactivate", model=Wallet, data_key="wallet", json=body
        )
