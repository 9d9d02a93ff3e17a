"""Rotating anti-forgery nonce issuance and verification."""

from __future__ import annotations

import hashlib
import hmac
import math
import time
from collections.abc import Callable

from field_catalog_picker.configuration.defaults import DEFAULT_NONCE_LIFETIME_SECONDS
from field_catalog_picker.configuration.runtime_settings import TransportSettings

_NONCE_LENGTH = 10


class NonceIssuer:
    """Issues nonces bound to an action and a session, valid for two half-lifetime ticks."""

    def __init__(
        self,
        secret: bytes | str,
        *,
        lifetime_seconds: int = DEFAULT_NONCE_LIFETIME_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        if not secret:
            raise ValueError("Nonce secret must not be empty.")
        self._secret = secret
        self._lifetime_seconds = lifetime_seconds
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        secret: bytes | str,
        settings: TransportSettings,
        *,
        clock: Callable[[], float] = time.time,
    ) -> NonceIssuer:
        return cls(secret, lifetime_seconds=settings.nonce_lifetime_seconds, clock=clock)

    @property
    def lifetime_seconds(self) -> int:
        return self._lifetime_seconds

    def tick(self) -> int:
        return math.ceil(self._clock() / (self._lifetime_seconds / 2))

    def create(self, action: str, session_token: str) -> str:
        return self._digest(self.tick(), action, session_token)

    def verify(self, nonce: str, action: str, session_token: str) -> bool:
        """Accept nonces minted during the current or the previous tick."""
        if not nonce:
            return False
        current = self.tick()
        for tick in (current, current - 1):
            expected = self._digest(tick, action, session_token)
            if hmac.compare_digest(expected, nonce):
                return True
        return False

    def _digest(self, tick: int, action: str, session_token: str) -> str:
        message = f"{tick}|{action}|{session_token}".encode()
        digest = hmac.new(self._secret, message, hashlib.sha256).hexdigest()
        return digest[-_NONCE_LENGTH - 2 : -2]
