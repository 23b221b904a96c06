# ============================================================================
# FILE: songboard/db/base.py
# ============================================================================
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Import models so Base.metadata knows every table before create_all
def import_models() -> None:
    from songboard.db.models import user, auth_session, song, like  # noqa: F401
