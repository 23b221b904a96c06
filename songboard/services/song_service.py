# ============================================================================
# FILE: songboard/services/song_service.py
# ============================================================================
from typing import Dict, List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from songboard.db.models.song import Song
from songboard.db.models.like import Like
from songboard.db.session import write_lock
from songboard.db.utils import next_id, utcnow
from songboard.core.cache import cache, GENRES_KEY
from songboard.core.errors import ValidationError
from songboard.core.validators import (
    sanitize_text,
    normalize_youtube_url,
    TITLE_MAX_LEN,
    ARTIST_MAX_LEN,
    GENRE_MAX_LEN,
)
from songboard.services import ranking
from songboard.config import settings
import logging

logger = logging.getLogger(__name__)


def parse_song_id(value: str) -> Optional[int]:
    """Song id from a path segment; None when it is not a plain integer"""
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def song_record(song: Song) -> Dict:
    """Plain dict of the canonical song fields"""
    return {field: getattr(song, field) for field in ranking.SONG_FIELDS}


class SongService:
    """Service layer for song submission and listing"""
    
    def get_song(self, db: Session, song_id: int) -> Optional[Song]:
        """Get song by id"""
        return db.get(Song, song_id)
    
    def get_like_counts(self, db: Session) -> Dict[int, int]:
        """Like count per song id; songs without likes are absent"""
        rows = db.query(Like.song_id, func.count(Like.id)).group_by(Like.song_id).all()
        return {song_id: count for song_id, count in rows}
    
    def create_song(
        self,
        db: Session,
        owner_id: int,
        title: Optional[str],
        artist: Optional[str],
        genre: Optional[str],
        youtube_url: Optional[str],
    ) -> Dict:
        """Validate a submission and store it; returns the song record"""
        safe_title = sanitize_text(title, TITLE_MAX_LEN)
        safe_artist = sanitize_text(artist, ARTIST_MAX_LEN)
        safe_genre = sanitize_text(genre, GENRE_MAX_LEN)
        safe_url = normalize_youtube_url(youtube_url)
        
        if not safe_title or not safe_artist or not safe_genre or not safe_url:
            raise ValidationError("Input values are not valid")
        if safe_genre not in settings.GENRE_OPTIONS:
            raise ValidationError(f"Unknown genre: {safe_genre}", code="invalid_genre")
        
        with write_lock:
            try:
                song = Song(
                    id=next_id(db, Song),
                    title=safe_title,
                    artist=safe_artist,
                    genre=safe_genre,
                    youtube_url=safe_url,
                    owner_id=owner_id,
                    created_at=utcnow(),
                )
                db.add(song)
                db.commit()
                db.refresh(song)
            except Exception as e:
                db.rollback()
                logger.error(f"Error creating song: {e}")
                raise
        
        cache.delete_cache(GENRES_KEY)
        logger.info(f"Song created: {song.id} by user {owner_id}")
        return song_record(song)
    
    def list_songs(self, db: Session, genre: Optional[str] = None, sort: str = "recent") -> List[Dict]:
        """
        All songs with their like_count.
        genre None or "all" means no filter; sort is "recent" or "popular".
        """
        query = db.query(Song)
        if genre and genre != "all":
            query = query.filter(Song.genre == genre)
        songs = query.order_by(Song.id).all()
        
        counts = self.get_like_counts(db)
        records = [ranking.with_like_count(song_record(song), counts) for song in songs]
        return ranking.sort_songs(records, sort)
    
    def list_genres(self, db: Session) -> List[str]:
        """Sorted distinct genres of the stored songs"""
        cached = cache.get_cache(GENRES_KEY)
        if cached is not None:
            return cached
        
        genres = sorted(genre for (genre,) in db.query(Song.genre).distinct())
        cache.set_cache(GENRES_KEY, genres, expire=settings.CACHE_EXPIRE_SECONDS)
        return genres

# Create singleton instance
song_service = SongService()
