# ============================================================================
# FILE: songboard/services/user_service.py
# ============================================================================
from typing import Optional, Tuple
from sqlalchemy.orm import Session
from songboard.db.models.user import User
from songboard.db.models.auth_session import AuthSession
from songboard.db.session import write_lock
from songboard.db.utils import next_id, utcnow
from songboard.core.errors import AuthError, ValidationError
from songboard.core.security import create_session_token
import logging

logger = logging.getLogger(__name__)

class UserService:
    """Service layer for nickname login and sessions"""
    
    def get_user_by_nickname(self, db: Session, nickname: str) -> Optional[User]:
        """Get user by nickname"""
        return db.query(User).filter(User.nickname == nickname).first()
    
    def login(self, db: Session, nickname: Optional[str]) -> Tuple[User, str]:
        """
        Log in with a nickname.
        Creates the user on first use; always opens a new session.
        Returns the user and the new session token.
        """
        trimmed = nickname.strip() if isinstance(nickname, str) else ""
        if not trimmed:
            raise ValidationError("Nickname is required", code="nickname_required")
        
        with write_lock:
            try:
                user = self.get_user_by_nickname(db, trimmed)
                if not user:
                    user = User(id=next_id(db, User), nickname=trimmed, created_at=utcnow())
                    db.add(user)
                    db.flush()
                    logger.info(f"User created: {user.id}")
                
                session = AuthSession(
                    id=next_id(db, AuthSession),
                    user_id=user.id,
                    token=create_session_token(),
                    created_at=utcnow(),
                )
                db.add(session)
                db.commit()
                db.refresh(user)
                logger.info(f"Session {session.id} opened for user {user.id}")
                return user, session.token
            except Exception as e:
                db.rollback()
                logger.error(f"Error logging in: {e}")
                raise
    
    def logout(self, db: Session, token: Optional[str]) -> bool:
        """Delete the session holding this token; False if there was none"""
        if not token:
            return False
        
        with write_lock:
            try:
                deleted = db.query(AuthSession).filter(AuthSession.token == token).delete()
                db.commit()
                if deleted:
                    logger.info("Session closed")
                return bool(deleted)
            except Exception as e:
                db.rollback()
                logger.error(f"Error logging out: {e}")
                raise
    
    def get_user_by_token(self, db: Session, token: Optional[str]) -> User:
        """Resolve a session token to its user or raise AuthError"""
        if not token:
            raise AuthError("Login required", code="not_authenticated")
        
        session = db.query(AuthSession).filter(AuthSession.token == token).first()
        if not session:
            raise AuthError("Session is not valid", code="invalid_session")
        
        user = db.get(User, session.user_id)
        if not user:
            raise AuthError("User not found", code="user_not_found")
        return user

# Create singleton instance
user_service = UserService()
