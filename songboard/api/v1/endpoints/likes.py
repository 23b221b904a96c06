# ============================================================================
# FILE: songboard/api/v1/endpoints/likes.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from songboard.db.session import get_db
from songboard.api.dependencies import require_current_user
from songboard.schemas.song import LikedSong
from songboard.services.like_service import like_service
from songboard.db.models.user import User

router = APIRouter()

@router.get("/my-likes", response_model=List[LikedSong])
async def get_my_likes(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Songs the current user likes, most recently liked first
    Requires authentication
    """
    return like_service.get_liked_songs(db, current_user.id)
