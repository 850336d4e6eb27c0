"""Authentication guard for mutating and account routes."""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from trackmaster.application.interfaces import TokenIssuer
from trackmaster.domain.entities import Identity
from trackmaster.domain.exceptions import AuthError
from trackmaster.infrastructure.dependencies import get_token_issuer

# auto_error=False so a missing header goes through the uniform error body
_bearer = HTTPBearer(auto_error=False)


async def require_identity(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> Identity:
    """Verify the ``Authorization: Bearer <token>`` header.

    The decoded identity is returned and also kept on ``request.state.identity``.

    Raises:
        AuthError: missing header, malformed token, bad signature or expiry.
    """
    if credentials is None or not credentials.credentials:
        raise AuthError()
    identity = token_issuer.decode(credentials.credentials)
    request.state.identity = identity
    return identity
