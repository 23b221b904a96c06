# ============================================================================
# FILE: songboard/services/like_service.py
# ============================================================================
from typing import Dict, List, Optional
from sqlalchemy.orm import Session
from songboard.db.models.like import Like
from songboard.db.models.song import Song
from songboard.db.session import write_lock
from songboard.db.utils import next_id, utcnow
from songboard.core.errors import NotFoundError
from songboard.services import ranking
from songboard.services.song_service import song_service, song_record
import logging

logger = logging.getLogger(__name__)

class LikeService:
    """Service layer for likes"""
    
    def get_like(self, db: Session, user_id: int, song_id: int):
        return db.query(Like).filter(
            Like.user_id == user_id,
            Like.song_id == song_id
        ).first()
    
    def count_likes(self, db: Session, song_id: int) -> int:
        return db.query(Like).filter(Like.song_id == song_id).count()
    
    def is_liked(self, db: Session, user_id: int, song_id: Optional[int]) -> bool:
        """Whether the user currently likes the song"""
        if song_id is None:
            return False
        return self.get_like(db, user_id, song_id) is not None
    
    def toggle_like(self, db: Session, user_id: int, song_id: Optional[int]) -> Dict:
        """
        Like the song if the user does not yet, otherwise remove the like.
        Returns {"liked": ..., "like_count": ...} after the change.
        """
        if song_id is None or not song_service.get_song(db, song_id):
            raise NotFoundError("Song not found", code="song_not_found")
        
        with write_lock:
            try:
                existing = self.get_like(db, user_id, song_id)
                if existing:
                    db.delete(existing)
                    liked = False
                else:
                    db.add(Like(
                        id=next_id(db, Like),
                        user_id=user_id,
                        song_id=song_id,
                        created_at=utcnow(),
                    ))
                    liked = True
                db.commit()
            except Exception as e:
                db.rollback()
                logger.error(f"Error toggling like: {e}")
                raise
        
        logger.info(f"User {user_id} {'liked' if liked else 'unliked'} song {song_id}")
        return {"liked": liked, "like_count": self.count_likes(db, song_id)}
    
    def get_liked_songs(self, db: Session, user_id: int) -> List[Dict]:
        """Songs the user likes with like_count and liked_at, most recent like first"""
        rows = (
            db.query(Like, Song)
            .join(Song, Song.id == Like.song_id)
            .filter(Like.user_id == user_id)
            .order_by(Like.id)
            .all()
        )
        counts = song_service.get_like_counts(db)
        
        result = []
        for like, song in rows:
            record = ranking.with_like_count(song_record(song), counts)
            record["liked_at"] = like.created_at
            result.append(record)
        
        result.sort(key=lambda r: r["liked_at"], reverse=True)
        return result

# Create singleton instance
like_service = LikeService()
