# ============================================================================
# FILE: songboard/db/session.py
# ============================================================================
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from songboard.config import settings
import threading

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Serializes every mutation of the shared store (id assignment, like toggling)
write_lock = threading.Lock()

def get_db():
    """FastAPI dependency yielding a database session per request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
