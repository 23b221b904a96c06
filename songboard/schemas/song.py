# ============================================================================
# FILE: songboard/schemas/song.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

class SongCreate(BaseModel):
    """
    Schema for submitting a song.
    Fields are validated by the service, so missing values become a 400.
    """
    title: Optional[str] = None
    artist: Optional[str] = None
    genre: Optional[str] = None
    youtube_url: Optional[str] = Field(default=None, alias="youtubeUrl")
    
    class Config:
        populate_by_name = True

class SongResponse(BaseModel):
    """Schema for song response"""
    id: int
    title: str
    artist: str
    genre: str
    youtube_url: str
    owner_id: int
    created_at: datetime

class SongWithLikes(SongResponse):
    """Song plus its computed like count"""
    like_count: int

class RecommendedSong(SongWithLikes):
    """score is only present on personalized recommendations"""
    score: Optional[int] = None

class LikedSong(SongWithLikes):
    liked_at: datetime

class LikeToggleResponse(BaseModel):
    liked: bool
    like_count: int

class LikeStatusResponse(BaseModel):
    liked: bool
