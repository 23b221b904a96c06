# ============================================================================
# FILE: songboard/db/models/like.py
# ============================================================================
from sqlalchemy import Column, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from songboard.db.base import Base
from songboard.db.utils import utcnow

class Like(Base):
    """Junction table between users and the songs they like"""
    __tablename__ = "likes"
    __table_args__ = (
        UniqueConstraint("user_id", "song_id", name="uq_likes_user_song"),
    )
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    song_id = Column(Integer, ForeignKey("songs.id"), index=True, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    
    # Relationships
    user = relationship("User", back_populates="likes")
    song = relationship("Song", back_populates="likes")
