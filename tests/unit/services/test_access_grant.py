import pytest

from assurerates.services.access_grant import AccessGrantIssuer, resolve_secret


class FakeClock:
    def __init__(self, now=1_700_000_000.0):
        self.now = now

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def issuer(clock):
    return AccessGrantIssuer(b'test-signing-key', clock=clock)


def test_issue_sets_ten_minute_expiry(issuer, clock):
    grant = issuer.issue()
    assert grant.expires_at == int(clock.now * 1000) + 600000
    assert grant.max_age == 600
    assert grant.token.split('.')[1] == str(grant.expires_at)


def test_tokens_are_unique(issuer):
    assert issuer.issue().token != issuer.issue().token


def test_valid_grant(issuer):
    grant = issuer.issue()
    assert issuer.verify(grant.token, grant.token, str(grant.expires_at)) == (True, 'valid', grant.expires_at)


def test_expiry_is_optional_when_verifying(issuer):
    grant = issuer.issue()
    assert issuer.verify(grant.token, grant.token)[0]


def test_expired_grant(issuer, clock):
    grant = issuer.issue()
    clock.now += 601
    valid, reason, _ = issuer.verify(grant.token, grant.token)
    assert not valid
    assert reason == 'expired'


def test_missing_cookie(issuer):
    grant = issuer.issue()
    assert issuer.verify(None, grant.token)[:2] == (False, 'missing_cookie')


def test_cookie_must_match_presented_token(issuer):
    first, second = issuer.issue(), issuer.issue()
    assert issuer.verify(first.token, second.token)[:2] == (False, 'token_mismatch')


def test_tampered_expiry_fails_signature(issuer):
    nonce, expires_at, signature = issuer.issue().token.split('.')
    forged = f"{nonce}.{int(expires_at) + 3600000}.{signature}"
    assert issuer.verify(forged, forged)[:2] == (False, 'bad_signature')


def test_grant_from_other_key_rejected(issuer, clock):
    other = AccessGrantIssuer(b'another-key', clock=clock).issue()
    assert issuer.verify(other.token, other.token)[:2] == (False, 'bad_signature')


def test_presented_expiry_must_match(issuer):
    grant = issuer.issue()
    assert issuer.verify(grant.token, grant.token, str(grant.expires_at + 1))[:2] == (False, 'expiry_mismatch')


@pytest.mark.parametrize('token', ['garbage', 'a.b.c', 'a.1'])
def test_malformed_tokens(issuer, token):
    assert issuer.verify(token, token)[:2] == (False, 'malformed_token')


def test_empty_secret_refused():
    with pytest.raises(ValueError):
        AccessGrantIssuer(b'')


def test_resolve_secret():
    assert resolve_secret('configured') == b'configured'
    assert len(resolve_secret(None)) == 32
