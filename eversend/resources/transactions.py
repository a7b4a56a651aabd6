"""Transaction history."""

from typing import Optional

from eversend.params import GetTransactionsParams
from eversend.resources.base import Resource, segment
from eversend.types import Transaction, TransactionPage


class Transactions(Resource):
    def get_transactions(
        self, params: Optional[GetTransactionsParams] = None
    ) -> TransactionPage:
        """List transactions, optionally filtered.

        Args:
            params: Filters; page and limit are passed through as given

        Returns:
            One page of transactions with the totals the API reports
        """
        query = params.to_payload() if params is not None else None
        return self._request("GET", "/transactions", model=TransactionPage, params=query)

    def get_transaction(self, transaction_id: str) -> Transaction:
        """Get one transaction by its ``transactionId``.

        Raises:
            NotFound: If the API returns no matching transaction
        """
        transaction_id = segment("transaction_id", transaction_id)
        return self._request(
            "GET",
            f"/transactions/{transaction_id}",
            model=list[Transaction],
            data_key="transactions",
            first=True,
        )
