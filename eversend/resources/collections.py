"""Inbound payments."""

from eversend.params import CollectionFeesParams, MobileMoneyCollectionParams
from eversend.resources.base import Resource, require
from eversend.types import CollectionFees, MobileMoneyCollection


class Collections(Resource):
    def get_collection_fees(self, params: CollectionFeesParams) -> CollectionFees:
        return self._request(
            "GET", "/collections/fees", model=CollectionFees, params=params.to_payload()
        )

    def get_collection_otp(self, phone: str) -> str:
        """Send a one-time PIN to the paying phone number.

        Returns:
            The ``pinId`` to send back with the PIN in ``initiate_momo_collection``
        """
        query = {"phone": require("phone", phone)}
        return self._request(
            "GET", "/collections/otp", model=str, data_key="pinId", params=query
        )

    def initiate_momo_collection(
        self, params: MobileMoneyCollectionParams
    ) -> MobileMoneyCollection:
        """Request a mobile-money payment from a customer."""
        return self._request(
            "POST", "/collections/momo", model=MobileMoneyCollection, json=params.to_payload()
        )
