"""
Bearer token verification

Tokens are issued by the separate auth service; this service only verifies
them and reads the principal id from the `sub` claim.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header
import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


BEARER_PREFIX = 'bearer '


class JwtAuth:
    def __init__(self, *, secret: str | None = None, algorithm: str | None = None) -> None:
        self.secret = secret if secret is not None else settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.token_expire_days = 7

    def create_jwt_token(self, *, principal_id: str) -> str:
        # Mirrors the auth service's token shape; used by local tooling and tests
        now = datetime.now(timezone.utc)
        payload = {
            'sub': principal_id,
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid token')

    def get_principal_id_from_header(self, authorization: Optional[str]) -> str:
        if not authorization:
            raise AuthenticationError('Not authenticated')

        token = authorization.strip()
        if token.lower().startswith(BEARER_PREFIX):
            token = token[len(BEARER_PREFIX) :].strip()
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)
        principal_id = payload.get('sub')
        if not principal_id or not isinstance(principal_id, str):
            raise AuthenticationError('Invalid token')
        return principal_id


@inject
async def get_current_principal(
    jwt_auth: JwtAuth = Depends(Provide['jwt_auth']),
    authorization: Optional[str] = Header(None),
) -> str:
    """Authenticated principal id (stateless, no store lookup)"""
    return jwt_auth.get_principal_id_from_header(authorization)
