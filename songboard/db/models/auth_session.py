# ============================================================================
# FILE: songboard/db/models/auth_session.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from songboard.db.base import Base
from songboard.db.utils import utcnow

class AuthSession(Base):
    """Login session; lives until logout deletes it"""
    __tablename__ = "sessions"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    token = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="sessions")
