# ============================================================================
# FILE: songboard/db/snapshot.py
# Single-document import/export of the whole store
# ============================================================================
"""
The board used to keep everything in one JSON document:

    {"users": [...], "sessions": [...], "songs": [...], "likes": [...]}

export_snapshot() produces that document from the database and
import_snapshot() loads one into an empty database, keeping the ids.

Usage:
    python -m songboard.db.snapshot export backup.json
    python -m songboard.db.snapshot import db.json
"""
from typing import Any, Dict, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from songboard.db.base import Base, import_models
from songboard.db.models.user import User
from songboard.db.models.auth_session import AuthSession
from songboard.db.models.song import Song
from songboard.db.models.like import Like
from songboard.db.session import write_lock
from songboard.db.utils import parse_timestamp
from songboard.core.cache import cache, GENRES_KEY
from songboard.core.errors import ValidationError
import argparse
import json
import logging
import os

logger = logging.getLogger(__name__)

# Collection name -> (model, columns); order satisfies foreign keys on import
COLLECTIONS = {
    "users": (User, ("id", "nickname", "created_at")),
    "sessions": (AuthSession, ("id", "user_id", "token", "created_at")),
    "songs": (Song, ("id", "title", "artist", "genre", "youtube_url", "owner_id", "created_at")),
    "likes": (Like, ("id", "user_id", "song_id", "created_at")),
}


def _serialize(row, columns) -> Dict[str, Any]:
    record = {}
    for column in columns:
        value = getattr(row, column)
        record[column] = value.isoformat() if column == "created_at" else value
    return record


def export_snapshot(db: Session) -> Dict[str, List[Dict[str, Any]]]:
    """Every collection as an id-ordered list of records"""
    return {
        name: [_serialize(row, columns) for row in db.query(model).order_by(model.id)]
        for name, (model, columns) in COLLECTIONS.items()
    }


def is_empty(db: Session) -> bool:
    return all(db.query(model).first() is None for model, _ in COLLECTIONS.values())


def _build_rows(name: str, model, columns, records) -> list:
    if not isinstance(records, list):
        raise ValidationError(f"Collection '{name}' must be a list", code="invalid_snapshot")
    
    rows = []
    for record in records:
        if not isinstance(record, dict):
            raise ValidationError(f"Malformed record in '{name}'", code="invalid_snapshot")
        missing = [column for column in columns if column not in record]
        if missing:
            raise ValidationError(
                f"Record in '{name}' is missing {', '.join(missing)}",
                code="invalid_snapshot",
            )
        try:
            values = {column: record[column] for column in columns}
            values["created_at"] = parse_timestamp(values["created_at"])
        except (TypeError, ValueError, AttributeError) as e:
            raise ValidationError(f"Bad timestamp in '{name}': {e}", code="invalid_snapshot")
        rows.append(model(**values))
    return rows


def import_snapshot(db: Session, document: Dict[str, Any]) -> Dict[str, int]:
    """
    Load a snapshot document into an empty database.
    Missing collections are treated as empty. Returns rows imported per collection.
    """
    if not isinstance(document, dict):
        raise ValidationError("Snapshot must be a JSON object", code="invalid_snapshot")
    
    with write_lock:
        if not is_empty(db):
            raise ValidationError("Database is not empty", code="database_not_empty")
        
        imported = {}
        try:
            for name, (model, columns) in COLLECTIONS.items():
                rows = _build_rows(name, model, columns, document.get(name, []))
                db.add_all(rows)
                try:
                    db.flush()
                except IntegrityError as e:
                    raise ValidationError(
                        f"Conflicting records in '{name}': {e.orig}",
                        code="invalid_snapshot",
                    )
                imported[name] = len(rows)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Snapshot import failed: {e}")
            raise
    
    cache.delete_cache(GENRES_KEY)
    logger.info(f"Snapshot imported: {imported}")
    return imported


def load_seed_file(db: Session, path: str) -> bool:
    """Import the seed file on first start; False when skipped"""
    if not path or not os.path.exists(path):
        return False
    if not is_empty(db):
        logger.info(f"Database already populated, skipping seed file {path}")
        return False
    
    with open(path, "r", encoding="utf-8") as f:
        document = json.load(f)
    import_snapshot(db, document)
    return True


def main(argv=None) -> int:
    from songboard.core.logging import setup_logging
    from songboard.db.session import SessionLocal, engine
    
    parser = argparse.ArgumentParser(description="Export or import the songboard store")
    parser.add_argument("command", choices=["export", "import"])
    parser.add_argument("path", help="JSON document to write or read")
    args = parser.parse_args(argv)
    
    setup_logging()
    import_models()
    Base.metadata.create_all(bind=engine)
    
    db = SessionLocal()
    try:
        if args.command == "export":
            with open(args.path, "w", encoding="utf-8") as f:
                json.dump(export_snapshot(db), f, ensure_ascii=False, indent=2)
            logger.info(f"Snapshot written to {args.path}")
        else:
            with open(args.path, "r", encoding="utf-8") as f:
                import_snapshot(db, json.load(f))
    except ValidationError as e:
        logger.error(f"{e.code}: {e.message}")
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
