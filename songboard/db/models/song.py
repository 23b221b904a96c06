# ============================================================================
# FILE: songboard/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from songboard.db.base import Base
from songboard.db.utils import utcnow

class Song(Base):
    """Submitted song; immutable once created"""
    __tablename__ = "songs"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=False)
    title = Column(String(100), nullable=False)
    artist = Column(String(80), nullable=False)
    genre = Column(String(40), index=True, nullable=False)
    youtube_url = Column(String, nullable=False)  # canonical watch URL
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    
    # Relationships
    owner = relationship("User", back_populates="songs")
    likes = relationship("Like", back_populates="song")
