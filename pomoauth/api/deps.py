# pomoauth/api/deps.py

import logging
from fastapi import Depends, HTTPException, Request, status
from fastapi.security import APIKeyCookie
from pomoauth.config import Settings
from pomoauth.core.security import InvalidTokenError, decode_access_token
from pomoauth.core.store import UserStore, get_user_store
from pomoauth.models.user import User


logger = logging.getLogger(__name__)

COOKIE_NAME = "token"

token_cookie = APIKeyCookie(name=COOKIE_NAME, auto_error=False)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized"
    )


def require_auth(
    token: str | None = Depends(token_cookie),
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Gate for protected routes. Stops at the first failing check and
    otherwise hands the resolved user to the handler.
    """
    if not token:
        logger.debug("Rejected request without a session cookie")
        raise _unauthorized()

    try:
        claims = decode_access_token(token, settings.secret_key)
    except InvalidTokenError as e:
        logger.info("Rejected session token: %s", e)
        raise _unauthorized() from None

    user = store.find_by_field("id", claims.sub)
    if user is None:
        logger.info("Rejected session token for missing user %s", claims.sub)
        raise _unauthorized()

    return user
