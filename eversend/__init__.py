"""Eversend SDK - Python client for the Eversend API."""

from eversend._version import __version__
from eversend.auth import Credentials, Token
from eversend.client import AsyncEversend, Eversend
from eversend.config import EversendSettings
from eversend.exceptions import (
    ApiError,
    AuthenticationFailed,
    BadRequest,
    Conflict,
    DecodeError,
    EversendError,
    Forbidden,
    NotFound,
    RateLimitExceeded,
    ServerError,
    TransportError,
    UnprocessableEntity,
)
from eversend.params import (
    BankPayoutParams,
    BeneficiaryPayoutParams,
    CollectionFeesParams,
    CreateBeneficiaryParams,
    CreateCryptoAddressParams,
    CreateExchangeQuotationParams,
    EditBeneficiaryParams,
    EversendPayoutParams,
    EversendPayoutQuotationParams,
    GetBankDetailsParams,
    GetBeneficiariesParams,
    GetTransactionsParams,
    MobileMoneyCollectionParams,
    MomoPayoutParams,
    Otp,
    PayoutQuotationParams,
)
from eversend.types import (
    Account,
    AssetChains,
    BankDetails,
    Beneficiary,
    CollectionFees,
    CollectionMethod,
    Country,
    CryptoAddress,
    CryptoTransaction,
    Currency,
    DeliveryBank,
    ExchangeQuotation,
    ExchangeResult,
    MobileMoneyCollection,
    PayoutQuotation,
    PayoutTransaction,
    Transaction,
    TransactionPage,
    TransactionRange,
    TransactionStatus,
    TransactionType,
    Wallet,
)

__all__ = [
    "__version__",
    # Clients
    "Eversend",
    "AsyncEversend",
    "EversendSettings",
    "Credentials",
    "Token",
    # Exceptions
    "EversendError",
    "AuthenticationFailed",
    "TransportError",
    "DecodeError",
    "ApiError",
    "BadRequest",
    "Forbidden",
    "NotFound",
    "Conflict",
    "UnprocessableEntity",
    "RateLimitExceeded",
    "ServerError",
    # Parameters
    "GetTransactionsParams",
    "CreateExchangeQuotationParams",
    "GetBeneficiariesParams",
    "CreateBeneficiaryParams",
    "EditBeneficiaryParams",
    "GetBankDetailsParams",
    "PayoutQuotationParams",
    "EversendPayoutQuotationParams",
    "MomoPayoutParams",
    "BankPayoutParams",
    "BeneficiaryPayoutParams",
    "EversendPayoutParams",
    "CollectionFeesParams",
    "MobileMoneyCollectionParams",
    "Otp",
    "CreateCryptoAddressParams",
    # Types
    "Currency",
    "TransactionType",
    "TransactionStatus",
    "TransactionRange",
    "CollectionMethod",
    "Wallet",
    "Transaction",
    "TransactionPage",
    "ExchangeQuotation",
    "ExchangeResult",
    "Beneficiary",
    "BankDetails",
    "Country",
    "DeliveryBank",
    "PayoutQuotation",
    "PayoutTransaction",
    "CollectionFees",
    "MobileMoneyCollection",
    "Account",
    "AssetChains",
    "CryptoAddress",
    "CryptoTransaction",
]
