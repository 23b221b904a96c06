# ============================================================================
# FILE: songboard/api/v1/endpoints/genres.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from songboard.db.session import get_db
from songboard.api.dependencies import require_current_user
from songboard.services.song_service import song_service
from songboard.config import settings
from songboard.db.models.user import User

router = APIRouter()

@router.get("", response_model=List[str])
async def list_genres(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """Distinct genres of the songs on the board, sorted"""
    return song_service.list_genres(db)

@router.get("/options", response_model=List[str])
async def genre_options():
    """Genres offered when submitting a song"""
    return settings.GENRE_OPTIONS
