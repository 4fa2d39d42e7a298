import os
from contextlib import contextmanager
from sqlalchemy import create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from mycamp.config import DATABASE_URL


def _connect_args(url):
    if make_url(url).get_backend_name() == "sqlite":
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


@event.listens_for(engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, _):
    if engine.dialect.name == "sqlite":
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys = ON")
        cursor.close()


def init_database():
    database = make_url(DATABASE_URL).database
    if engine.dialect.name == "sqlite" and database and database != ":memory:":
        directory = os.path.dirname(database)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)
    Base.metadata.create_all(bind=engine)


def get_db():
    """Provide a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


class UnitOfWork:
    """Handle on the running transaction of a session."""

    def __init__(self, db: Session):
        self.db = db

    def cancel(self):
        """Discard everything done in this unit of work once it ends."""
        self.db.info["transaction_cancelled"] = True


@contextmanager
def transaction(db: Session):
    """
    Unit of work over ``db``.

    The outermost block commits when its body finishes and rolls back on any
    exception, which is then re-raised, or when the unit of work was
    cancelled. Blocks opened inside it join the same unit of work and leave
    commit/rollback to the outermost one.
    """
    depth = db.info.get("transaction_depth", 0)
    if depth == 0:
        db.info["transaction_cancelled"] = False
    db.info["transaction_depth"] = depth + 1
    try:
        yield UnitOfWork(db)
        if depth == 0:
            if db.info["transaction_cancelled"]:
                db.rollback()
            else:
                db.commit()
    except Exception:
        if depth == 0:
            db.rollback()
        raise
    finally:
        db.info["transaction_depth"] = depth
