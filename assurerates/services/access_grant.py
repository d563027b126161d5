"""
Access grants for the post-submit confirmation page.

A grant is a signed, self-describing token:

    <nonce>.<expires_at_ms>.<hmac_sha256_hex>

The signature covers the nonce and the expiry, so the confirmation page can
check a presented grant with nothing but the signing key and the clock.
There is no server-side store, and therefore no revocation.
"""

import hashlib
import hmac
import logging
import secrets
import time
from typing import Callable, Optional, Tuple

from assurerates.models.schemas import AccessGrant

logger = logging.getLogger(__name__)

ACCESS_COOKIE_NAME = 'thankyou_access'
GRANT_TTL_SECONDS = 10 * 60


class AccessGrantIssuer:
    def __init__(self, secret: bytes, ttl_seconds: int = GRANT_TTL_SECONDS,
                 clock: Callable[[], float] = time.time):
        if not secret:
            raise ValueError("Access grant secret must not be empty")
        self.secret = secret
        self.ttl_seconds = ttl_seconds
        self.clock = clock

    def _now_ms(self) -> int:
        return int(self.clock() * 1000)

    def _sign(self, message: str) -> str:
        return hmac.new(self.secret, message.encode(), hashlib.sha256).hexdigest()

    def issue(self) -> AccessGrant:
        """Mint a fresh grant; two calls never share a token"""
        nonce = secrets.token_urlsafe(16)
        expires_at = self._now_ms() + self.ttl_seconds * 1000
        message = f"{nonce}.{expires_at}"
        return AccessGrant(
            token=f"{message}.{self._sign(message)}",
            expires_at=expires_at,
            max_age=self.ttl_seconds
        )

    def verify(self, cookie_token: Optional[str], presented_token: Optional[str],
               presented_expires_at: Optional[str] = None) -> Tuple[bool, str, Optional[int]]:
        """
        Check the cookie against the token the client carried over.

        Returns (valid, reason, expires_at). The cookie must equal the
        presented token, carry a valid signature, match the presented expiry
        when one is given, and not be expired.
        """
        if not cookie_token:
            return False, 'missing_cookie', None
        if not presented_token or not hmac.compare_digest(cookie_token, presented_token):
            return False, 'token_mismatch', None

        parts = cookie_token.split('.')
        if len(parts) != 3 or not parts[1].isdigit():
            return False, 'malformed_token', None

        nonce, expires_raw, signature = parts
        if not hmac.compare_digest(self._sign(f"{nonce}.{expires_raw}"), signature):
            logger.warning("Access grant with invalid signature presented")
            return False, 'bad_signature', None

        expires_at = int(expires_raw)
        if presented_expires_at is not None and str(presented_expires_at) != expires_raw:
            return False, 'expiry_mismatch', None
        if self._now_ms() >= expires_at:
            return False, 'expired', expires_at

        return True, 'valid', expires_at


def resolve_secret(configured: Optional[str]) -> bytes:
    """Signing key from configuration, or a per-process random one"""
    if configured:
        return configured.encode()
    logger.warning("ACCESS_TOKEN_SECRET not set; using a per-process signing key")
    return secrets.token_bytes(32)
