# pomoauth/core/security.py

import logging
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import BaseModel, ConfigDict, StrictInt, ValidationError, field_validator


logger = logging.getLogger(__name__)

ALGORITHM = "HS256"
BCRYPT_ROUNDS = 10
ACCESS_TOKEN_EXPIRE = timedelta(days=30)
MAX_USER_ID = 2**63 - 1


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


class TokenCreationError(Exception):
    """The server could not sign a session token."""


class InvalidTokenError(Exception):
    """A session token failed signature, expiry or claim validation."""


class TokenClaims(BaseModel):
    """
    Claim set carried by a session token.

    `sub` travels as a decimal string (JWT subjects are strings) and is
    parsed into the numeric user id here. Anything else fails validation.
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    sub: int
    exp: StrictInt

    @field_validator("sub", mode="before")
    @classmethod
    def _parse_subject(cls, value):
        if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
            raise ValueError("subject must be a decimal user id")
        subject = int(value)
        if not 0 < subject <= MAX_USER_ID:
            raise ValueError("subject is outside the user id range")
        return subject


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Stored password hash could not be identified")
        return False


def dummy_verify():
    """Spend the same bcrypt work as a real check when no user matched."""
    pwd_context.dummy_verify()


def create_access_token(user_id: int, secret: str | None, expires_delta: timedelta | None = None) -> str:
    if not secret:
        raise TokenCreationError("signing secret is not configured")

    if expires_delta is None:
        expires_delta = ACCESS_TOKEN_EXPIRE
    expire = datetime.now(timezone.utc) + expires_delta
    to_encode = {"sub": str(user_id), "exp": int(expire.timestamp())}
    try:
        return jwt.encode(to_encode, secret, algorithm=ALGORITHM)
    except JWTError as e:
        raise TokenCreationError(str(e)) from e


def decode_access_token(token: str, secret: str | None) -> TokenClaims:
    if not token:
        raise InvalidTokenError("empty token")
    if not secret:
        raise InvalidTokenError("signing secret is not configured")

    try:
        payload = jwt.decode(
            token,
            secret,
            # HS256 only; other HMAC variants are rejected with everything else
            algorithms=[ALGORITHM],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    try:
        claims = TokenClaims.model_validate(payload)
    except ValidationError as e:
        raise InvalidTokenError("malformed claim set") from e

    if claims.exp <= int(datetime.now(timezone.utc).timestamp()):
        raise InvalidTokenError("token expired")
    return claims
