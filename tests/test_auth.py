"""Tests for credentials, token expiry and the blocking token cache."""

import base64
import json
import threading
from concurrent.futures import ThreadPoolExecutor

import httpx
import pytest

from eversend.auth import Credentials, Token, TokenCache, TokenResponse, token_ttl
from eversend.exceptions import AuthenticationFailed, TransportError

from conftest import BASE_URL, FakeApi


def make_jwt(claims: dict) -> str:
    def part(data: dict) -> str:
        raw = base64.urlsafe_b64encode(json.dumps(data).encode()).decode()
        return raw.rstrip("=")

    return f"{part({'alg': 'HS256'})}.{part(claims)}.signature"


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def make_cache(api: FakeApi, clock=None) -> TokenCache:
    http = httpx.Client(transport=httpx.MockTransport(api.handler))
    kwargs = {"clock": clock} if clock else {}
    return TokenCache(http, Credentials("id1", "secret1"), BASE_URL, **kwargs)


def test_credentials_require_both_values():
    """Test Credentials rejects an empty id or secret."""
    with pytest.raises(ValueError):
        Credentials("", "secret")
    with pytest.raises(ValueError):
        Credentials("id", "")


def test_credentials_repr_hides_secret():
    """Test the secret is left out of repr."""
    assert "secret1" not in repr(Credentials("id1", "secret1"))


def test_token_with_zero_ttl_is_expired():
    """Test a zero ttl token is expired immediately."""
    token = Token(value="t", obtained_at=100.0, ttl=0)
    assert token.is_expired(100.0)


def test_token_with_negative_ttl_is_expired():
    """Test a negative ttl token is expired."""
    token = Token(value="t", obtained_at=100.0, ttl=-5)
    assert token.is_expired(99.0)


def test_token_expires_at_boundary():
    """Test a token expires exactly at obtained_at plus ttl."""
    token = Token(value="t", obtained_at=100.0, ttl=60)
    assert not token.is_expired(159.9)
    assert token.is_expired(160.0)


def test_token_without_ttl_never_expires():
    """Test a token without ttl never expires."""
    token = Token(value="t", obtained_at=100.0, ttl=None)
    assert token.expires_at is None
    assert not token.is_expired(1e12)


def test_ttl_from_expires_in():
    """Test ttl is taken from expiresIn."""
    data = TokenResponse.model_validate({"token": "t", "expiresIn": 3600})
    assert token_ttl(data, wall_now=0) == 3600


def test_ttl_from_iso_expires_at():
    """Test ttl is computed from an ISO expiresAt."""
    data = TokenResponse.model_validate({"token": "t", "expiresAt": "1970-01-01T01:00:00Z"})
    assert token_ttl(data, wall_now=600) == pytest.approx(3000)


def test_ttl_from_millisecond_expires_at():
    """Test ttl is computed from an epoch expiresAt in milliseconds."""
    data = TokenResponse.model_validate({"token": "t", "expires_at": 7_200_000})
    assert token_ttl(data, wall_now=0) == pytest.approx(7_200_000)
    data = TokenResponse.model_validate({"token": "t", "expires_at": 2_000_000_000_000})
    assert token_ttl(data, wall_now=1_999_999_000) == pytest.approx(1000)


def test_ttl_from_jwt_exp_claim():
    """Test ttl is computed from the JWT exp claim."""
    data = TokenResponse.model_validate({"token": make_jwt({"exp": 5000})})
    assert token_ttl(data, wall_now=4000) == 1000


def test_ttl_unknown_for_opaque_token():
    """Test an opaque token with no expiry fields has no ttl."""
    data = TokenResponse.model_validate({"token": "opaque-token"})
    assert token_ttl(data, wall_now=0) is None


def test_get_token_sends_credentials():
    """Test the exchange sends clientId and clientSecret headers."""
    api = FakeApi()
    cache = make_cache(api)

    token = cache.get_token()

    assert token.value == "tok-a"
    request = api.auth_calls[0]
    assert request.headers["clientId"] == "id1"
    assert request.headers["clientSecret"] == "secret1"


def test_valid_token_is_served_from_cache():
    """Test a valid token is returned without a new exchange."""
    api = FakeApi()
    cache = make_cache(api)

    first = cache.get_token()
    second = cache.get_token()

    assert first is second
    assert len(api.auth_calls) == 1


def test_expired_token_is_refreshed():
    """Test an expired token triggers a new exchange."""
    api = FakeApi()
    api.auth_extra = {"expiresIn": 60}
    clock = FakeClock()
    cache = make_cache(api, clock=clock)

    assert cache.get_token().value == "tok-a"
    clock.now += 59
    assert cache.get_token().value == "tok-a"
    clock.now += 1
    assert cache.get_token().value == "tok-b"
    assert len(api.auth_calls) == 2


def test_zero_ttl_token_is_refreshed_before_every_use():
    """Test a zero ttl token is exchanged on every call."""
    api = FakeApi()
    api.auth_extra = {"expiresIn": 0}
    cache = make_cache(api, clock=FakeClock())

    cache.get_token()
    cache.get_token()

    assert len(api.auth_calls) == 2


def test_concurrent_callers_share_one_exchange():
    """Test concurrent threads trigger a single credential exchange."""
    api = FakeApi(auth_delay=0.2)
    cache = make_cache(api)
    barrier = threading.Barrier(8)

    def call():
        barrier.wait()
        return cache.get_token()

    with ThreadPoolExecutor(max_workers=8) as pool:
        tokens = list(pool.map(lambda _: call(), range(8)))

    assert len(api.auth_calls) == 1
    assert {t.value for t in tokens} == {"tok-a"}


def test_concurrent_callers_share_a_failed_exchange():
    """Test every waiting thread sees the same failed exchange."""
    api = FakeApi(auth_delay=0.3)
    api.json("GET", "/auth/token", {"message": "bad credentials"}, status_code=401)
    cache = make_cache(api)
    barrier = threading.Barrier(6)
    errors = []

    def call():
        barrier.wait()
        try:
            cache.get_token()
        except AuthenticationFailed as e:
            errors.append(e)

    with ThreadPoolExecutor(max_workers=6) as pool:
        for _ in range(6):
            pool.submit(call)

    assert len(errors) == 6
    assert len(api.auth_calls) == 1
    assert cache.token is None


def test_invalidate_ignores_stale_token():
    """Test invalidating an old token keeps the newer one cached."""
    api = FakeApi()
    cache = make_cache(api)

    stale = cache.get_token()
    cache.invalidate(stale)
    fresh = cache.get_token()
    cache.invalidate(stale)

    assert cache.token is fresh
    assert fresh.value == "tok-b"


def test_rejected_credentials_raise_authentication_failed():
    """Test an error status from the identity endpoint raises AuthenticationFailed."""
    api = FakeApi()
    api.json("GET", "/auth/token", {"message": "invalid client"}, status_code=401)
    cache = make_cache(api)

    with pytest.raises(AuthenticationFailed) as exc_info:
        cache.get_token()

    assert exc_info.value.status_code == 401
    assert cache.token is None


def test_identity_response_without_token_raises_authentication_failed():
    """Test a body without a token raises AuthenticationFailed."""
    api = FakeApi()
    api.json("GET", "/auth/token", {"status": 200})
    cache = make_cache(api)

    with pytest.raises(AuthenticationFailed):
        cache.get_token()


def test_token_inside_envelope_is_accepted():
    """Test a token nested under data is accepted."""
    api = FakeApi()
    api.json("GET", "/auth/token", {"code": 200, "success": True, "data": {"token": "tok-z"}})
    cache = make_cache(api)

    assert cache.get_token().value == "tok-z"


def test_unreachable_identity_endpoint_raises_authentication_failed():
    """Test a connection failure during the exchange raises AuthenticationFailed."""
    api = FakeApi()
    api.on("GET", "/auth/token", httpx.ConnectError("Connection refused"))
    cache = make_cache(api)

    with pytest.raises(AuthenticationFailed) as exc_info:
        cache.get_token()

    cause = exc_info.value.__cause__
    assert isinstance(cause, TransportError)
    assert isinstance(cause.cause, httpx.ConnectError)


def test_seeded_token_skips_exchange():
    """Test a seeded token is used without an exchange."""
    api = FakeApi()
    cache = make_cache(api)
    cache.seed("pre-issued")

    assert cache.get_token().value == "pre-issued"
    assert api.auth_calls == []
