from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import jwt, JWTError
from pydantic import BaseModel

from affirmations.config import config
from affirmations.errors import UnauthorizedError

bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    id: str
    email: Optional[str] = None


class AuthService:
    """Verifies identity-provider tokens. Tokens are never issued here."""

    @staticmethod
    def decode_token(token: str) -> dict:
        try:
            return jwt.decode(
                token,
                config.JWT_SECRET,
                algorithms=[config.JWT_ALG],
                issuer=config.JWT_ISSUER or None,
                options={"verify_aud": False},
            )
        except JWTError:
            raise UnauthorizedError("Invalid token.")

    @classmethod
    def verify_token(cls, token: str) -> CurrentUser:
        payload = cls.decode_token(token)

        scope = payload.get("scope")
        if scope is not None and scope != "access":
            raise UnauthorizedError("Invalid token scope.")

        user_id = payload.get("sub")
        if not user_id:
            raise UnauthorizedError("Missing subject claim.")

        return CurrentUser(id=str(user_id), email=payload.get("email"))

    @classmethod
    def require_user(cls, token: Optional[str]) -> CurrentUser:
        if not token:
            raise UnauthorizedError()

        return cls.verify_token(token)

    @classmethod
    async def get_current_user(
        cls,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> CurrentUser:
        return cls.require_user(credentials.credentials if credentials else None)
