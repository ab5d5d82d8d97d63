from app.database.base import Base
from app.database.engine import engine
from app.database.session import SessionLocal, get_db, transaction

__all__ = ["Base", "engine", "SessionLocal", "get_db", "transaction"]
