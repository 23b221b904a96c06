# ============================================================================
# FILE: songboard/db/models/user.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from songboard.db.base import Base
from songboard.db.utils import utcnow

class User(Base):
    """Board member, created on first login with a nickname"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    nickname = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    
    # Relationships
    sessions = relationship("AuthSession", back_populates="user")
    songs = relationship("Song", back_populates="owner")
    likes = relationship("Like", back_populates="user")
