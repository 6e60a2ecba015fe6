import logging
from datetime import datetime, timedelta, UTC
from typing import Optional

from fastapi import Header
from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext
from tasknotes.config import SECRET_KEY, ALGORITHM

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

BCRYPT_MAX_BYTES = 72


def hash_password(password: str):
    """Hash a password after validating bcrypt's 72-byte limit.

    Raises ValueError if the UTF-8 encoding of the password exceeds 72 bytes.
    """
    if isinstance(password, str) and len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        raise ValueError("password too long: must be at most 72 bytes when UTF-8 encoded")
    return pwd_context.hash(password)


def verify_password(plain, hashed):
    """Verify a plaintext password against a hash.

    A ValueError from the backend (for example plain >72 bytes) counts as a
    mismatch so the caller answers with an authentication failure.
    """
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        return False


def create_token(user_id: int):
    # read expiry at call-time so tests (and runtime overrides) that modify
    # tasknotes.config.ACCESS_TOKEN_EXPIRE_MINUTES take effect immediately
    import tasknotes.config as _cfg
    expire = datetime.now(UTC) + timedelta(minutes=_cfg.ACCESS_TOKEN_EXPIRE_MINUTES)
    data = {"sub": str(user_id), "exp": int(expire.timestamp())}  # JWT spec uses Unix timestamp
    return jwt.encode(data, SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> Optional[int]:
    """Return the user id carried by ``token``, or None if it is unusable."""
    try:
        # jwt.decode validates exp automatically
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        logger.debug("rejecting expired token")
        return None
    except JWTError:
        logger.debug("rejecting invalid token")
        return None
    try:
        return int(payload.get("sub"))
    except (TypeError, ValueError):
        logger.debug("rejecting token without a usable subject")
        return None


def _extract_token(authorization: Optional[str], token_query: Optional[str]) -> Optional[str]:
    """Return token from Authorization header (Bearer ...) or token query param (compat).
    Header has precedence.
    """
    if authorization:
        parts = authorization.split()
        if len(parts) == 2 and parts[0].lower() == "bearer":
            return parts[1]
    return token_query


def current_user_id(authorization: Optional[str] = Header(None), token: Optional[str] = None) -> Optional[int]:
    """FastAPI dependency resolving the caller to a user id, or None if anonymous.

    Services decide what anonymous means: reads come back empty, writes fail.
    """
    tok = _extract_token(authorization, token)
    if not tok:
        return None
    return decode_token(tok)
