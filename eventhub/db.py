from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from eventhub.settings import DATABASE_URL, SQL_ECHO

# SQLite connections are handed between FastAPI's worker threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, future=True, echo=SQL_ECHO, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
