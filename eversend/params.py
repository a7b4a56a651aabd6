"""Parameter models for Eversend API operations.

Fields use snake_case names in Python and are sent under the camelCase keys
the API expects. Optional fields left as ``None`` are dropped from the
request entirely.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from eversend.types import (
    CollectionMethod,
    Currency,
    TransactionRange,
    TransactionStatus,
    TransactionType,
)


class EversendParams(BaseModel):
    """Base for request parameters."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
    )

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the wire representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ==================== Transactions ====================


class GetTransactionsParams(EversendParams):
    """Filters for the transaction history. Every field is optional."""

    currency: Optional[Currency] = None
    from_date: Optional[str] = Field(default=None, alias="from")  # YYYY-MM-DD
    to_date: Optional[str] = Field(default=None, alias="to")  # YYYY-MM-DD
    limit: Optional[int] = Field(default=None, ge=1)
    page: Optional[int] = Field(default=None, ge=1)
    range: Optional[TransactionRange] = None
    search: Optional[str] = None
    status: Optional[TransactionStatus] = None
    type: Optional[TransactionType] = None


# ==================== Exchange ====================


class CreateExchangeQuotationParams(EversendParams):
    from_currency: str = Field(alias="from")
    to_currency: str = Field(alias="to")
    amount: Union[int, float] = Field(gt=0)


# ==================== Beneficiaries ====================


class GetBeneficiariesParams(EversendParams):
    beneficiary_type: Optional[str] = Field(default=None, alias="type")  # momo, bank
    search: Optional[str] = None
    limit: Optional[int] = Field(default=None, ge=1)
    page: Optional[int] = Field(default=None, ge=1)


class CreateBeneficiaryParams(EversendParams):
    first_name: str
    last_name: str
    country: str
    phone_number: str
    is_bank: bool = False
    is_momo: bool = False
    bank_name: Optional[str] = None
    bank_code: Optional[str] = None
    bank_account_name: Optional[str] = None
    bank_account_number: Optional[str] = None


class EditBeneficiaryParams(EversendParams):
    first_name: str
    last_name: str
    phone_number: str
    bank_name: Optional[str] = None
    bank_code: Optional[str] = None
    bank_account_name: Optional[str] = None
    bank_account_number: Optional[str] = None


class GetBankDetailsParams(EversendParams):
    account_number: str
    bank_code: str
    country_code: str


# ==================== Payouts ====================


class PayoutQuotationParams(EversendParams):
    """Quotation for a mobile-money or bank payout."""

    amount: Union[int, float] = Field(gt=0)
    amount_type: str  # SOURCE, DESTINATION
    destination_country: str
    destination_currency: str
    source_wallet: str
    type: str  # momo, bank


class EversendPayoutQuotationParams(EversendParams):
    """Quotation for a payout to another Eversend account.

    ``identifier`` names which of ``email``, ``phone`` or ``tag`` locates
    the recipient.
    """

    amount: Union[int, float] = Field(gt=0)
    amount_type: str
    source_wallet: str
    identifier: str  # email, phone, tag
    email: Optional[str] = None
    phone: Optional[str] = None
    tag: Optional[str] = None


class MomoPayoutParams(EversendParams):
    token: str
    country: str
    first_name: str
    last_name: str
    phone_number: str
    transaction_ref: str


class BankPayoutParams(EversendParams):
    token: str
    country: str
    first_name: str
    last_name: str
    phone_number: str
    bank_name: str
    bank_code: str
    bank_account_name: str
    bank_account_number: str
    transaction_ref: str


class BeneficiaryPayoutParams(EversendParams):
    token: str
    beneficiary_id: str
    transaction_ref: Optional[str] = None


class EversendPayoutParams(EversendParams):
    token: str
    transaction_ref: str


# ==================== Collections ====================


class CollectionFeesParams(EversendParams):
    amount: Union[int, float] = Field(gt=0)
    currency: str
    method: CollectionMethod


class Otp(EversendParams):
    pin: str
    pin_id: str


class MobileMoneyCollectionParams(EversendParams):
    amount: Union[int, float] = Field(gt=0)
    country: str
    currency: str
    phone_number: str = Field(alias="phone")
    customer: Optional[dict[str, Any]] = None
    otp: Optional[Otp] = None
    redirect_url: Optional[str] = None
    transaction_ref: Optional[str] = None


# ==================== Crypto ====================


class CreateCryptoAddressParams(EversendParams):
    asset_id: str
    owner_name: str
    destination_address_description: str
    purpose: Optional[str] = None
