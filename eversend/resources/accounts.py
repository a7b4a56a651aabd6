"""Account profile."""

from eversend.resources.base import Resource
from eversend.types import Account


class Accounts(Resource):
    def get_profile(self) -> Account:
        return self._request("GET", "/account", model=Account)
