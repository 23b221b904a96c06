# ============================================================================
# FILE: songboard/api/dependencies.py
# ============================================================================
from fastapi import Depends
from fastapi.security import APIKeyCookie
from sqlalchemy.orm import Session
from songboard.db.session import get_db
from songboard.db.models.user import User
from songboard.services.user_service import user_service
from songboard.config import settings
from typing import Optional

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

def get_session_token(token: Optional[str] = Depends(session_cookie)) -> Optional[str]:
    """Session token from the request cookie, if any"""
    return token or None

def require_current_user(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db)
) -> User:
    """
    Require an authenticated user (AuthError -> 401 otherwise)
    Use this dependency for protected endpoints
    """
    return user_service.get_user_by_token(db, token)
