"""
Tokens
------

Issues and verifies the signed access tokens handed out by ``POST /jwt``.
A token carries whatever identity payload it was issued for (at least
an ``email``) along with its issue and expiry times.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict, Any

from jose import jwt, ExpiredSignatureError, JWTError

from rentwheels.config import access_token_lifetime


class TokenVerificationError(Exception):
    pass


class TokenService:
    """
    Signs and verifies tokens with a server-held secret.

    The service holds no state besides its secret, so it
    may be shared freely between requests.
    """

    def __init__(self, secret: str, lifetime: timedelta = access_token_lifetime, algorithm: str = "HS256"):
        if not secret:
            raise ValueError("A token secret is required.")
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def issue(self, claims: Dict[str, Any]) -> str:
        """Creates a token for the given claims, valid for the lifetime of the service."""
        issued_at = datetime.now(timezone.utc)
        payload = {
            **claims,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_token(self, token) -> Dict[str, Any]:
        """
        Given a token, verifies it, returning its claims.

        :raises TokenVerificationError: When the provided token is invalid or expired.
        """
        if not isinstance(token, str):
            raise TokenVerificationError(f"Token must be of type string, not {type(token).__name__}.")

        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenVerificationError("Token is expired.") from e
        except JWTError as e:
            raise TokenVerificationError("Token is invalid.") from e
