"""Outbound transfers to banks, mobile money and other Eversend accounts.

A payout is two calls: a quotation, which locks the rate and fees and
returns a token, then a transaction that spends that token.
"""

from eversend.params import (
    BankPayoutParams,
    BeneficiaryPayoutParams,
    EversendPayoutParams,
    EversendPayoutQuotationParams,
    MomoPayoutParams,
    PayoutQuotationParams,
)
from eversend.resources.base import Resource, segment
from eversend.types import Country, DeliveryBank, PayoutQuotation, PayoutTransaction

TRANSACTION_PATH = "/payouts/transaction"


class Payouts(Resource):
    def get_delivery_countries(self) -> list[Country]:
        return self._request(
            "GET", "/payouts/countries", model=list[Country], data_key="countries"
        )

    def get_delivery_banks(self, country: str) -> list[DeliveryBank]:
        """List banks that accept payouts in a country.

        Args:
            country: ISO country code (e.g., "NG")
        """
        country = segment("country", country)
        return self._request(
            "GET", f"/payouts/banks/{country}", model=list[DeliveryBank], data_key="banks"
        )

    def create_quotation(self, params: PayoutQuotationParams) -> PayoutQuotation:
        """Quote a mobile-money or bank payout."""
        return self._request(
            "POST", "/payouts/quotation", model=PayoutQuotation, json=params.to_payload()
        )

    def create_eversend_quotation(
        self, params: EversendPayoutQuotationParams
    ) -> PayoutQuotation:
        """Quote a payout to another Eversend account."""
        return self._request(
            "POST", "/payouts/quotation", model=PayoutQuotation, json=params.to_payload()
        )

    def create_momo_transaction(self, params: MomoPayoutParams) -> PayoutTransaction:
        return self._transaction(params.to_payload())

    def create_bank_transaction(self, params: BankPayoutParams) -> PayoutTransaction:
        return self._transaction(params.to_payload())

    def create_beneficiary_transaction(
        self, params: BeneficiaryPayoutParams
    ) -> PayoutTransaction:
        """Pay out to a saved beneficiary."""
        return self._transaction(params.to_payload())

    def create_eversend_transaction(self, params: EversendPayoutParams) -> PayoutTransaction:
        return self._transaction(params.to_payload())

    def _transaction(self, body: dict) -> PayoutTransaction:
        return self._request(
            "POST", TRANSACTION_PATH, model=PayoutTransaction, data_key="transaction", json=body
        )
