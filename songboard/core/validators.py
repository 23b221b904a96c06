# ============================================================================
# FILE: songboard/core/validators.py
# Input sanitation for song submissions
# ============================================================================
from typing import Any, Optional
from urllib.parse import urlsplit, parse_qs
import re

TITLE_MAX_LEN = 100
ARTIST_MAX_LEN = 80
GENRE_MAX_LEN = 40

SHORT_LINK_HOST = "youtu.be"
ALLOWED_VIDEO_HOSTS = {
    "youtube.com",
    "www.youtube.com",
    "m.youtube.com",
    SHORT_LINK_HOST,
}
VIDEO_ID_PATTERN = re.compile(r"[A-Za-z0-9_-]{5,20}")
CANONICAL_VIDEO_URL = "https://www.youtube.com/watch?v={video_id}"


def sanitize_text(value: Any, max_len: int = TITLE_MAX_LEN) -> str:
    """
    Trim a free-text field and cut it to max_len characters.
    Returns "" for non-strings and blank input; callers treat "" as invalid.
    """
    if not isinstance(value, str):
        return ""
    trimmed = value.strip()
    if len(trimmed) > max_len:
        return trimmed[:max_len]
    return trimmed


def extract_video_id(raw: Any) -> Optional[str]:
    """Pull the video id out of an allow-listed YouTube link, or None"""
    if not isinstance(raw, str):
        return None
    trimmed = raw.strip()
    if not trimmed:
        return None

    try:
        parts = urlsplit(trimmed)
        hostname = (parts.hostname or "").lower()
        # raises ValueError for a non-numeric or out-of-range port
        parts.port
    except ValueError:
        return None

    if not parts.scheme or not hostname:
        return None
    if hostname not in ALLOWED_VIDEO_HOSTS:
        return None

    if hostname == SHORT_LINK_HOST:
        # https://youtu.be/VIDEOID
        video_id = parts.path[1:]
    else:
        # https://www.youtube.com/watch?v=VIDEOID
        values = parse_qs(parts.query).get("v")
        video_id = values[0] if values else None

    if not video_id or not VIDEO_ID_PATTERN.fullmatch(video_id):
        return None
    return video_id


def normalize_youtube_url(raw: Any) -> Optional[str]:
    """
    Rewrite a YouTube link to the canonical watch URL.
    Everything except the validated id (playlist, tracking, timestamps) is dropped.
    """
    video_id = extract_video_id(raw)
    if video_id is None:
        return None
    return CANONICAL_VIDEO_URL.format(video_id=video_id)
