# ============================================================================
# FILE: songboard/api/v1/endpoints/auth.py
# ============================================================================
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from songboard.db.session import get_db
from songboard.api.dependencies import require_current_user, get_session_token
from songboard.schemas.user import LoginRequest, UserResponse, MessageResponse
from songboard.services.user_service import user_service
from songboard.config import settings
from songboard.db.models.user import User
from typing import Optional
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/login", response_model=UserResponse)
async def login(
    login_data: LoginRequest,
    response: Response,
    db: Session = Depends(get_db)
):
    """
    Login with a nickname (the account is created on first use)
    Sets the session cookie
    """
    user, token = user_service.login(db, login_data.nickname)
    
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return user

@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db)
):
    """
    End the current session
    Succeeds even without a session
    """
    if token:
        user_service.logout(db, token)
        response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}

@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(require_current_user)
):
    """
    Get current user information
    Requires authentication
    """
    return current_user
