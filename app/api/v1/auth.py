import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from jose import JWTError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.deps import get_token_payload
from app.core.security import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    verify_password,
)
from app.crud import user as crud_user
from app.database import get_db
from app.schemas.auth import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_refresh_cookie(response: Response, refresh_token: str) -> None:
    """HttpOnly refresh cookie; cross-site (Secure + SameSite=None) in production"""
    response.set_cookie(
        key=settings.REFRESH_COOKIE_NAME,
        value=refresh_token,
        httponly=True,
        secure=settings.is_production,
        samesite="none" if settings.is_production else "lax",
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
    )


@router.post("/login", response_model=TokenResponse)
def login(user_in: LoginRequest, response: Response, db: Session = Depends(get_db)):
    """
    Login with username/password - return an access token and set the refresh cookie
    """
    user = crud_user.get_by_username(db, user_in.username)
    if not user or not verify_password(user_in.password, user.password_hash):
        logger.warning(f"Failed login for username={user_in.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    claims = {"user_id": user.id, "username": user.username}
    _set_refresh_cookie(response, create_refresh_token(claims))

    logger.info(f"User logged in: {user.username}")
    return TokenResponse(token=create_access_token(claims))


@router.post("/refresh", response_model=TokenResponse)
def refresh(request: Request):
    """
    Issue a new access token from the refresh cookie
    """
    refresh_token = request.cookies.get(settings.REFRESH_COOKIE_NAME)
    if not refresh_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing refresh token",
        )

    try:
        payload = decode_refresh_token(refresh_token)
    except JWTError as e:
        logger.warning(f"Refresh error: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired refresh token",
        )

    claims = {"user_id": payload.get("user_id"), "username": payload.get("username")}
    return TokenResponse(token=create_access_token(claims))


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.REFRESH_COOKIE_NAME)
    return {"message": "Logged out"}


@router.get("/me")
def get_current_user_profile(payload: dict = Depends(get_token_payload)):
    """
    Get the decoded claims of the current access token
    """
    return {"user": payload}
