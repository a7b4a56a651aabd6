"""Crypto deposit addresses and their transactions."""

from eversend.params import CreateCryptoAddressParams
from eversend.resources.base import Resource, segment
from eversend.types import AssetChains, CryptoAddress, CryptoTransaction


class Crypto(Resource):
    def get_asset_chains(self, coin: str) -> AssetChains:
        """List the chains a coin can be received on (e.g., "USDT")."""
        coin = segment("coin", coin)
        return self._request(
            "GET", f"/crypto/assets/{coin}", model=AssetChains, data_key="chains"
        )

    def get_addresses(self) -> list[CryptoAddress]:
        return self._request(
            "GET", "/crypto/addresses", model=list[CryptoAddress], data_key="addresses"
        )

    def create_address(self, params: CreateCryptoAddressParams) -> CryptoAddress:
        return self._request(
            "POST",
            "/crypto/addresses",
            model=CryptoAddress,
            data_key="address",
            json=params.to_payload(),
        )

    def get_transactions(self) -> list[CryptoTransaction]:
        return self._request(
            "GET",
            "/crypto/transactions",
            model=list[CryptoTransaction],
            data_key="transactions",
        )
