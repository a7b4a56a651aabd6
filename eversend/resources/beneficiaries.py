"""Saved payout recipients."""

from typing import Optional, Sequence

from eversend.params import (
    CreateBeneficiaryParams,
    EditBeneficiaryParams,
    GetBankDetailsParams,
    GetBeneficiariesParams,
)
from eversend.resources.base import Resource, segment
from eversend.types import BankDetails, Beneficiary


class Beneficiaries(Resource):
    def get_beneficiaries(
        self, params: Optional[GetBeneficiariesParams] = None
    ) -> list[Beneficiary]:
        query = params.to_payload() if params is not None else None
        return self._request(
            "GET",
            "/beneficiaries",
            model=list[Beneficiary],
            data_key="beneficiaries",
            params=query,
        )

    def get_beneficiary(self, beneficiary_id: int) -> Beneficiary:
        beneficiary_id = segment("beneficiary_id", beneficiary_id)
        return self._request(
            "GET",
            f"/beneficiaries/{beneficiary_id}",
            model=Beneficiary,
            data_key="beneficiary",
        )

    def create_beneficiary(self, params: CreateBeneficiaryParams) -> None:
        return self._request("POST", "/beneficiaries", json=params.to_payload())

    def create_beneficiaries(self, items: Sequence[CreateBeneficiaryParams]) -> None:
        """Save several beneficiaries in one request."""
        if not items:
            raise ValueError("items must not be empty")
        return self._request("POST", "/beneficiaries", json=[item.to_payload() for item in items])

    def edit_beneficiary(self, beneficiary_id: int, params: EditBeneficiaryParams) -> None:
        beneficiary_id = segment("beneficiary_id", beneficiary_id)
        return self._request("PUT", f"/beneficiaries/{beneficiary_id}", json=params.to_payload())

    def delete_beneficiary(self, beneficiary_id: int) -> None:
        beneficiary_id = segment("beneficiary_id", beneficiary_id)
        return self._request("DELETE", f"/beneficiaries/{beneficiary_id}")

    def check_eversend_account(
        self, email: Optional[str] = None, phone: Optional[str] = None
    ) -> bool:
        """Check whether an email or phone number belongs to an Eversend account.

        Note:
            At least one of email or phone must be provided.
        """
        if not email and not phone:
            raise ValueError("One of email or phone must be provided")
        body = {}
        if email:
            body["email"] = email
        if phone:
            body["phone"] = phone
        return self._request(
            "POST",
            "/beneficiaries/accounts/eversend",
            model=bool,
            data_key="accountExists",
            json=body,
        )

    def get_bank_details(self, params: GetBankDetailsParams) -> BankDetails:
        """Resolve the holder name of a bank account."""
        return self._request(
            "POST",
            "/beneficiaries/accounts/banks",
            model=BankDetails,
            json=params.to_payload(),
        )
