"""
Session token codec (signed JWTs).

Tokens are never stored. A token carries the user id (`sub`) and the user's
mobile number, and is valid until `exp`. Whether the user still exists is the
session guard's concern, not the codec's.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import jwt

DEFAULT_TTL = timedelta(days=7)


class InvalidToken(RuntimeError):
    pass


@dataclass(frozen=True)
class TokenClaims:
    user_id: int
    mobile: str
    issued_at: int
    expires_at: int


class TokenCodec:
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret:
            raise ValueError("Token secret is empty.")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl_s = int(ttl.total_seconds())
        self._clock = clock

    def now_epoch_s(self) -> int:
        return int(self._clock())

    def issue(self, user: Mapping[str, Any]) -> str:
        issued_at = self.now_epoch_s()
        payload = {
            "sub": str(user["id"]),
            "mobile": str(user.get("mobile_number") or ""),
            "iat": issued_at,
            "exp": issued_at + self._ttl_s,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        raw = (token or "").strip()
        if not raw:
            raise InvalidToken("Token is empty.")

        try:
            # Expiry is checked against our own clock below.
            payload = jwt.decode(
                raw,
                self._secret,
                algorithms=[self._algorithm],
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidToken("Invalid token.") from exc

        subject = str(payload.get("sub") or "").strip()
        if not subject.isdigit():
            raise InvalidToken("Invalid token subject.")

        try:
            issued_at = int(payload["iat"])
            expires_at = int(payload["exp"])
        except (TypeError, ValueError) as exc:
            raise InvalidToken("Invalid token timestamps.") from exc

        if self.now_epoch_s() >= expires_at:
            raise InvalidToken("Token has expired.")

        return TokenClaims(
            user_id=int(subject),
            mobile=str(payload.get("mobile") or ""),
            issued_at=issued_at,
            expires_at=expires_at,
        )
