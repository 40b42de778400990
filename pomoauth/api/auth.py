# pomoauth/api/auth.py

import logging
from datetime import timedelta
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pomoauth.api.deps import COOKIE_NAME, get_settings, require_auth
from pomoauth.config import Settings
from pomoauth.core.security import (
    TokenCreationError,
    create_access_token,
    dummy_verify,
    get_password_hash,
    verify_password,
)
from pomoauth.core.store import StoreError, UserStore, get_user_store
from pomoauth.models.user import User, UserOut


logger = logging.getLogger(__name__)

router = APIRouter()


class SignUpRequest(BaseModel):
    email: str
    password: str
    username: str


class SignInRequest(BaseModel):
    email: str
    password: str


def error_response(message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# -------------------------------
# Account Endpoints
# -------------------------------

@router.post("/signup")
def signup(body: SignUpRequest, store: UserStore = Depends(get_user_store)):
    """
    Creates an account. No session is issued; the client signs in afterwards.
    """
    try:
        hashed = get_password_hash(body.password)
    except (ValueError, TypeError):
        logger.warning("Password hashing failed during sign-up")
        return error_response("Failed to hash password")

    try:
        user = store.create(email=body.email, username=body.username, password_hash=hashed)
    except StoreError as e:
        logger.warning("Sign-up rejected by the user store: %s", e.__cause__.__class__.__name__)
        return error_response("Failed to create user")

    logger.info("Created user %s", user.id)
    return {"success": "user created"}


@router.post("/login")
def login(
    body: SignInRequest,
    response: Response,
    store: UserStore = Depends(get_user_store),
    settings: Settings = Depends(get_settings),
):
    """
    Verifies credentials and sets the session cookie.
    Unknown email and wrong password produce the same error.
    """
    user = store.find_by_field("email", body.email)
    if user is None:
        dummy_verify()
        logger.info("Sign-in failed")
        return error_response("Invalid email or password")

    if not verify_password(body.password, user.password):
        logger.info("Sign-in failed")
        return error_response("Invalid email or password")

    try:
        token = create_access_token(
            user.id,
            settings.secret_key,
            expires_delta=timedelta(days=settings.token_expire_days)
        )
    except TokenCreationError as e:
        logger.error("Could not create session token: %s", e)
        return error_response("Failed to create token")

    response.set_cookie(
        key=COOKIE_NAME,
        value=token,
        max_age=settings.token_max_age,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    logger.info("User %s signed in", user.id)
    return {"success": "login successful"}


@router.post("/logout")
def logout(response: Response, settings: Settings = Depends(get_settings)):
    response.set_cookie(
        key=COOKIE_NAME,
        value="",
        max_age=-1,
        path="/",
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    return {"message": "Logged out successfully"}


@router.get("/validate")
def validate(current_user: User = Depends(require_auth)):
    """
    Echoes the user attached by the auth gate.
    """
    return {"message": UserOut.model_validate(current_user).model_dump(mode="json")}
