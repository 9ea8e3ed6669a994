import hashlib
import hmac
import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Union

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from pydantic import SecretStr, ValidationError

from core.config import settings
from core.errors import TokenExpired, TokenInvalid
from schemas.auth import ClaimsUser, TokenClaims

logger = logging.getLogger(__name__)

pwd_ctx = CryptContext(schemes=["argon2"], deprecated="auto")
bearer = HTTPBearer(auto_error=False)


def _to_plain(p: Union[str, SecretStr]) -> str:
    return p.get_secret_value() if isinstance(p, SecretStr) else p


def hash_password(password: Union[str, SecretStr]) -> str:
    return pwd_ctx.hash(_to_plain(password))


def verify_password(plain: Union[str, SecretStr], hashed: str) -> bool:
    return pwd_ctx.verify(_to_plain(plain), hashed)


def dummy_verify_password() -> None:
    """Spend the time of a real verification when there is no user to check against."""
    pwd_ctx.dummy_verify()


def generate_refresh_token() -> str:
    return secrets.token_urlsafe(48)


def hash_refresh_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def refresh_token_matches(token: str, stored_hash: str | None) -> bool:
    if not stored_hash:
        return False
    return hmac.compare_digest(hash_refresh_token(token), stored_hash)


def create_access_token(user: ClaimsUser, expires_delta: timedelta | None = None) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
        "user": user.model_dump(mode="json"),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.JWT_ALG)


def decode_access_token(token: str, *, verify_exp: bool = True) -> TokenClaims:
    """Check the signature (and expiry unless told not to) and return the claims.

    Raises TokenExpired only for an otherwise valid token whose ``exp`` has
    passed; every other problem is TokenInvalid.
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALG],
            options={"verify_exp": verify_exp},
        )
    except ExpiredSignatureError as exc:
        raise TokenExpired() from exc
    except JWTError as exc:
        raise TokenInvalid() from exc

    try:
        return TokenClaims.model_validate(payload)
    except ValidationError as exc:
        raise TokenInvalid() from exc


def verify_access_token(token: str) -> ClaimsUser:
    return decode_access_token(token).user


def current_user(credentials: HTTPAuthorizationCredentials | None = Depends(bearer)) -> ClaimsUser:
    """Authenticate the request from its bearer token; no store lookup happens here."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise TokenInvalid()
    try:
        return verify_access_token(credentials.credentials)
    except (TokenInvalid, TokenExpired) as exc:
        logger.debug("Rejected access token: %s", exc.kind)
        raise
