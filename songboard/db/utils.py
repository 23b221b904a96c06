# ============================================================================
# FILE: songboard/db/utils.py
# ============================================================================
from datetime import datetime, timezone
from sqlalchemy import func, select
from sqlalchemy.orm import Session


def next_id(db: Session, model) -> int:
    """Ids are assigned as max existing + 1 (1 for an empty table)"""
    current = db.scalar(select(func.max(model.id)))
    return (current or 0) + 1


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every created_at column stores"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def parse_timestamp(value: str) -> datetime:
    """Read an ISO-8601 string (trailing 'Z' allowed) back into naive UTC"""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
