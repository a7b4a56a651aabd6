"""Resource groups of the Eversend API."""

from eversend.resources.accounts import Accounts
from eversend.resources.beneficiaries import Beneficiaries
from eversend.resources.collections import Collections
from eversend.resources.crypto import Crypto
from eversend.resources.exchange import Exchange
from eversend.resources.payouts import Payouts
from eversend.resources.transactions import Transactions
from eversend.resources.wallets import Wallets

__all__ = [
    "Accounts",
    "Beneficiaries",
    "Collections",
    "Crypto",
    "Exchange",
    "Payouts",
    "Transactions",
    "Wallets",
]
