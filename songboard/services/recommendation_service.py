# ============================================================================
# FILE: songboard/services/recommendation_service.py
# ============================================================================
from datetime import datetime
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from songboard.db.models.like import Like
from songboard.db.models.song import Song
from songboard.db.utils import utcnow
from songboard.services import ranking
from songboard.services.song_service import song_service, song_record
from songboard.config import settings
import logging

logger = logging.getLogger(__name__)

class RecommendationService:
    """Loads catalog and like history, then hands off to the ranking functions"""
    
    def get_recommendations(self, db: Session, user_id: int, now: Optional[datetime] = None) -> List[Dict]:
        songs = [song_record(song) for song in db.query(Song).order_by(Song.id).all()]
        liked_song_ids = [
            song_id for (song_id,) in
            db.query(Like.song_id).filter(Like.user_id == user_id).order_by(Like.id)
        ]
        counts = song_service.get_like_counts(db)
        
        results = ranking.recommend(
            songs,
            liked_song_ids,
            counts,
            now or utcnow(),
            limit=settings.RECOMMENDATION_LIMIT,
            top_genre_count=settings.TOP_GENRE_COUNT,
        )
        logger.debug(
            f"Recommendations for user {user_id}: {len(results)} songs "
            f"({'personalized' if liked_song_ids else 'cold start'})"
        )
        return results

# Create singleton instance
recommendation_service = RecommendationService()
