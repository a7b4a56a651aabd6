"""Type definitions for the Eversend SDK."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class EversendModel(BaseModel):
    """Base for API records: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class Currency(str, Enum):
    """Wallet currencies supported by the transaction filters."""

    GHS = "GHS"
    KES = "KES"
    NGN = "NGN"
    RWF = "RWF"
    TZS = "TZS"
    UGX = "UGX"
    USD = "USD"


class TransactionType(str, Enum):
    COLLECTION = "collection"
    EXCHANGE = "exchange"
    PAYOUT = "payout"


class TransactionStatus(str, Enum):
    FAILED = "failed"
    PENDING = "pending"
    SUCCESSFUL = "successful"


class TransactionRange(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class CollectionMethod(str, Enum):
    MOMO = "momo"
    BANK = "bank"


class PaymentType(str, Enum):
    MOMO = "momo"
    EVERSEND = "eversend"
    BANK = "bank"


# ==================== Wallets ====================


class Wallet(EversendModel):
    """Currency-denominated balance held by the account."""

    currency: str
    currency_type: Optional[str] = None  # fiat, crypto
    amount: Optional[float] = None
    balance: Optional[float] = None
    enabled: Optional[bool] = None
    name: Optional[str] = None
    icon: Optional[str] = None
    amount_in_base_currency: Optional[float] = None
    is_main: Optional[bool] = None


# ==================== Transactions ====================


class AccountBalance(EversendModel):
    after: str
    before: str


class TransactionAccount(EversendModel):
    amount: float
    balance: AccountBalance
    currency: str


class TransactionMeta(EversendModel):
    source: Optional[TransactionAccount] = None
    destination: Optional[TransactionAccount] = None


class Transaction(EversendModel):
    """Transaction record."""

    id: int
    transaction_id: str
    type: str  # collection, exchange, payout
    status: str  # failed, pending, successful
    amount: str
    currency: str
    account_id: Optional[int] = None
    balance_after: Optional[str] = None
    balance_before: Optional[str] = None
    beneficiary: Optional[Any] = None
    beneficiary_id: Optional[int] = None
    destination_amount: Optional[str] = None
    destination_currency: Optional[str] = None
    destination_country: Optional[str] = None
    source_country: Optional[str] = None
    source_currency: Optional[str] = None
    fees: Optional[str] = None
    is_refunded: Optional[bool] = None
    merchant_id: Optional[str] = None
    meta: Optional[TransactionMeta] = None
    reason: Optional[str] = None
    user_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TransactionPage(EversendModel):
    """One page of the transaction history."""

    transactions: list[Transaction]
    total: Optional[int] = None
    limit: Optional[int] = None
    page: Optional[int] = None
    balance: Optional[float] = None
    total_payouts: Optional[str] = None
    total_collections: Optional[str] = None


# ==================== Exchange ====================


class ExchangeQuote(EversendModel):
    """Rate and balances locked by an exchange quotation."""

    base_amount: float
    base_currency: str
    dest_amount: float
    dest_currency: str
    rate: float
    base_wallet_before: Optional[float] = None
    base_wallet_after: Optional[float] = None
    dest_wallet_before: Optional[float] = None
    dest_wallet_after: Optional[float] = None


class ExchangeQuotation(EversendModel):
    """A time-limited price lock; ``token`` is passed to ``create_exchange``."""

    token: str
    quotation: ExchangeQuote
    expires_at: Optional[str] = None


class ExchangeAccount(EversendModel):
    amount: float
    currency: str
    balance: AccountBalance


class ExchangeResult(EversendModel):
    source: ExchangeAccount
    destination: ExchangeAccount


# ==================== Beneficiaries ====================


class Beneficiary(EversendModel):
    """Saved payout recipient."""

    id: int
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    email: Optional[str] = None
    country: Optional[str] = None
    bank_name: Optional[str] = None
    bank_code: Optional[str] = None
    bank_account_name: Optional[str] = None
    bank_account_number: Optional[str] = None
    avatar: Optional[str] = None
    is_eversend: Optional[bool] = None
    is_bank: Optional[bool] = None
    is_momo: Optional[bool] = None


class BankDetails(EversendModel):
    account_name: str
    account_number: str
    bank_code: str


# ==================== Payouts ====================


class Country(EversendModel):
    """Payout delivery country."""

    country: str
    id: str
    name: str
    payment_types: list[PaymentType] = Field(default_factory=list)
    phone_prefix: Optional[str] = None


class BankBranch(EversendModel):
    id: str
    code: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None


class DeliveryBank(EversendModel):
    id: str
    name: str
    active: Optional[bool] = None
    branch: Optional[BankBranch] = None


class PayoutQuote(EversendModel):
    amount: float
    amount_type: str  # SOURCE, DESTINATION
    type: str  # momo, bank, eversend
    source_currency: str
    destination_currency: str
    source_country: Optional[str] = None
    destination_country: Optional[str] = None
    source_amount: Optional[str] = None
    destination_amount: Optional[str] = None
    exchange_rate: Optional[str] = None
    total_amount: Optional[str] = None
    total_fees: Optional[str] = None


class PayoutQuotation(EversendModel):
    """A time-limited price lock; ``token`` is passed to a payout transaction."""

    token: str
    quotation: PayoutQuote


class PayoutBeneficiary(EversendModel):
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    id: Optional[int] = None
    country: Optional[str] = None
    bank_name: Optional[str] = None
    bank_code: Optional[str] = None
    bank_account_name: Optional[str] = None
    bank_account_number: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class PayoutTransaction(EversendModel):
    """Outbound transfer record."""

    transaction_id: str
    status: str
    amount: float
    currency: str
    type: Optional[str] = None
    transaction_ref: Optional[str] = None
    beneficiary: Optional[PayoutBeneficiary] = None
    balance_before: Optional[float] = None
    balance_after: Optional[float] = None
    fees: Optional[float] = None
    source_currency: Optional[str] = None
    destination_amount: Optional[str] = None
    destination_country: Optional[str] = None
    destination_currency: Optional[str] = None
    reason: Optional[str] = None
    user_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# ==================== Collections ====================


class CollectionFees(BaseModel):
    """Fee breakdown for a collection; the API sends these keys in snake_case."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    amount: str
    currency: str
    charges: str
    total_to_pay: str
    payment_method: Optional[str] = None
    amount_available_to_load: Optional[str] = None
    max_load_amount: Optional[str] = None
    max_limit: Optional[str] = None
    min_load_amount: Optional[str] = None
    new_balance: Optional[str] = None


class MobileMoneyCollection(EversendModel):
    """Inbound mobile-money payment request."""

    transaction_id: str
    status: str
    amount: str
    currency: str
    type: Optional[str] = None
    transaction_ref: Optional[str] = None
    customer: Optional[dict[str, Any]] = None
    balance_before: Optional[str] = None
    balance_after: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


# ==================== Accounts ====================


class Account(EversendModel):
    """Business profile of the account holder."""

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    town: Optional[str] = None
    country: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
    is_verified: Optional[bool] = None


# ==================== Crypto ====================


class AssetChains(BaseModel):
    """Chain ids keyed by the network's display name."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    binance_smart_chain: Optional[str] = Field(
        default=None, alias="Binance Smart Chain (BEP20)"
    )
    ethereum: Optional[str] = Field(default=None, alias="Ethereum (ERC20)")
    tron: Optional[str] = Field(default=None, alias="TRON (TRC20)")


class CryptoAddress(EversendModel):
    address: str
    coin: str
    owner_name: Optional[str] = None
    purpose: Optional[str] = None
    destination_address_description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class CryptoTransaction(EversendModel):
    id: int
    transaction_id: str
    amount: str
    status: str
    sub_status: Optional[str] = None
    account_id: Optional[int] = None
    address_id: Optional[int] = None
    address: Optional[CryptoAddress] = None
    meta: dict[str, Any] = Field(default_factory=dict)
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
