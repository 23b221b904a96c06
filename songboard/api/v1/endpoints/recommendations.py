# ============================================================================
# FILE: songboard/api/v1/endpoints/recommendations.py
# ============================================================================
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from songboard.db.session import get_db
from songboard.api.dependencies import require_current_user
from songboard.schemas.song import RecommendedSong
from songboard.services.recommendation_service import recommendation_service
from songboard.db.models.user import User

router = APIRouter()

@router.get("", response_model=List[RecommendedSong], response_model_exclude_none=True)
async def get_recommendations(
    db: Session = Depends(get_db),
    current_user: User = Depends(require_current_user)
):
    """
    Personalized recommendations (up to 20)
    Without any likes yet, the most popular songs are returned without a score
    """
    return recommendation_service.get_recommendations(db, current_user.id)
