# ============================================================================
# FILE: songboard/api/v1/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from songboard.db.session import get_db
from songboard.api.dependencies import require_current_user
from songboard.schemas.song import (
    SongCreate,
    SongResponse,
    SongWithLikes,
    LikeToggleResponse,
    LikeStatusResponse
)
from songboard.services.song_service import song_service, parse_song_id
from songboard.services.like_service import like_service
from songboard.db.models.user import User
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=SongResponse, status_code=status.HTTP_201_CREATED)
async def create_song(
    song_data: SongCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Submit a song
    The YouTube link is rewritten to its canonical watch URL
    """
    return song_service.create_song(
        db,
        current_user.id,
        song_data.title,
        song_data.artist,
        song_data.genre,
        song_data.youtube_url,
    )

@router.get("", response_model=List[SongWithLikes])
async def list_songs(
    genre: Optional[str] = None,
    sort: str = "recent",
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    List songs with like counts
    - **genre**: only this genre ("all" or absent for every genre)
    - **sort**: "recent" (default) or "popular"
    """
    return song_service.list_songs(db, genre=genre, sort=sort)

@router.post("/{song_id}/like", response_model=LikeToggleResponse)
async def toggle_like(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Like or unlike a song
    Requires authentication
    """
    return like_service.toggle_like(db, current_user.id, parse_song_id(song_id))

@router.get("/{song_id}/like", response_model=LikeStatusResponse)
async def get_like_status(
    song_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Whether the current user likes this song"""
    return {"liked": like_service.is_liked(db, current_user.id, parse_song_id(song_id))}
