from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker

from app.database.engine import engine

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    expire_on_commit=False,
    bind=engine,
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def transaction(db: Session):
    """Commit the work done in the block, or roll it back and re-raise."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
