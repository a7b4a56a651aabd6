"""Currency exchange between wallets."""

from eversend.params import CreateExchangeQuotationParams
from eversend.resources.base import Resource, require
from eversend.types import ExchangeQuotation, ExchangeResult


class Exchange(Resource):
    def create_quotation(self, params: CreateExchangeQuotationParams) -> ExchangeQuotation:
        """Lock a rate for exchanging between two wallets.

        Returns:
            Quotation whose ``token`` is passed to ``create_exchange``
        """
        return self._request(
            "POST", "/exchanges/quotation", model=ExchangeQuotation, json=params.to_payload()
        )

    def create_exchange(self, token: str) -> ExchangeResult:
        """Execute a previously quoted exchange."""
        body = {"token": require("token", token)}
        return self._request("POST", "/exchanges", model=ExchangeResult, json=body)
