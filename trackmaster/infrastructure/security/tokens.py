"""Signed bearer tokens (HS256 JWT) via python-jose.

Payload: ``{"userId": <int>, "email": <str>, "exp": <unix time>}``. There is
no revocation list; logging out means the client discards its token.
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from trackmaster.application.interfaces import TokenIssuer
from trackmaster.domain.entities import Identity
from trackmaster.domain.exceptions import AuthError

logger = logging.getLogger(__name__)


class JoseTokenIssuer(TokenIssuer):
    """Issues and verifies tokens signed with the process-wide secret."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_days: int = 20):
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = timedelta(days=expires_days)

    def issue(self, user_id: int, email: str) -> str:
        payload = {
            "userId": user_id,
            "email": email,
            "exp": datetime.now(timezone.utc) + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Identity:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise AuthError() from None
        except JWTError as e:
            logger.info("Rejected invalid token: %s", e)
            raise AuthError() from None

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, int) or not isinstance(email, str):
            logger.info("Rejected token without identity claims")
            raise AuthError()
        return Identity(user_id=user_id, email=email)
