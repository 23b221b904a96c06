# ============================================================================
# FILE: songboard/services/ranking.py
# Popularity / recency ordering and personalized song scoring
# ============================================================================
"""
Pure ranking functions.

Everything here works on plain song records (dicts with the canonical song
fields) plus a song_id -> like count mapping, so the same code serves the
listing endpoint and the recommendation endpoint and can be exercised
without a database. `now` is always passed in explicitly.

Sorting relies on Python's sort being stable (also with reverse=True), so
records that compare equal keep their input order.
"""
from collections import Counter
from datetime import datetime
from typing import Dict, Iterable, List, Mapping, Sequence

SONG_FIELDS = ("id", "title", "artist", "genre", "youtube_url", "owner_id", "created_at")

GENRE_MATCH_POINTS = 3
RECENT_DAYS = 3
FRESH_DAYS = 7
SECONDS_PER_DAY = 24 * 60 * 60

DEFAULT_LIMIT = 20
DEFAULT_TOP_GENRES = 2


def like_counts(song_ids: Iterable[int]) -> Dict[int, int]:
    """Count likes per song from the song_id of every like record"""
    return dict(Counter(song_ids))


def with_like_count(song: Mapping, counts: Mapping[int, int]) -> Dict:
    """Copy the canonical song fields and attach the computed like_count"""
    record = {field: song[field] for field in SONG_FIELDS}
    record["like_count"] = counts.get(song["id"], 0)
    return record


def sort_popular(records: Iterable[Mapping]) -> List:
    """like_count descending, newer first on ties"""
    return sorted(
        records,
        key=lambda r: (r["like_count"], r["created_at"]),
        reverse=True,
    )


def sort_recent(records: Iterable[Mapping]) -> List:
    """created_at descending"""
    return sorted(records, key=lambda r: r["created_at"], reverse=True)


def sort_songs(records: Iterable[Mapping], mode: str) -> List:
    """Listing order; anything other than 'popular' falls back to recent"""
    if mode == "popular":
        return sort_popular(records)
    return sort_recent(records)


def recency_bonus(created_at: datetime, now: datetime) -> int:
    """2 points under 3 days old, 1 point under 7 days, otherwise 0"""
    age_days = (now - created_at).total_seconds() / SECONDS_PER_DAY
    if age_days < RECENT_DAYS:
        return 2
    if age_days < FRESH_DAYS:
        return 1
    return 0


def top_genres(liked_songs: Iterable[Mapping], n: int = DEFAULT_TOP_GENRES) -> List[str]:
    """
    Most frequent genres among the liked songs.
    Equal frequencies keep the order in which the genre was first seen.
    """
    frequency = Counter(song["genre"] for song in liked_songs)
    return [genre for genre, _ in frequency.most_common(n)]


def score_song(record: Mapping, preferred_genres: Sequence[str], now: datetime) -> int:
    score = GENRE_MATCH_POINTS if record["genre"] in preferred_genres else 0
    score += record["like_count"]
    score += recency_bonus(record["created_at"], now)
    return score


def recommend(
    songs: Sequence[Mapping],
    liked_song_ids: Sequence[int],
    counts: Mapping[int, int],
    now: datetime,
    limit: int = DEFAULT_LIMIT,
    top_genre_count: int = DEFAULT_TOP_GENRES,
) -> List[Dict]:
    """
    Recommendation list for one user.

    Args:
        songs: whole catalog, in catalog (id) order
        liked_song_ids: songs the user liked, in the order the likes were made
        counts: like count per song id
        now: reference time for the recency bonus
        limit: maximum number of songs returned
        top_genre_count: how many favourite genres earn the genre bonus

    Returns:
        Without any usable like history, the most popular songs of the
        whole catalog (no score). Otherwise unliked songs ordered by score,
        each record carrying its score.
    """
    by_id = {song["id"]: song for song in songs}
    liked_songs = [by_id[song_id] for song_id in liked_song_ids if song_id in by_id]

    if not liked_songs:
        popular = sort_popular(with_like_count(song, counts) for song in songs)
        return popular[:limit]

    preferred = top_genres(liked_songs, top_genre_count)
    liked_ids = set(liked_song_ids)

    scored = []
    for song in songs:
        if song["id"] in liked_ids:
            continue
        record = with_like_count(song, counts)
        record["score"] = score_song(record, preferred, now)
        scored.append(record)

    scored.sort(key=lambda r: r["score"], reverse=True)
    return scored[:limit]
