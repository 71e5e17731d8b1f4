from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from inventory_app.config import settings

Base = declarative_base()


def create_db_engine(url: str) -> Engine:
    connect_args = {}
    if url.startswith("sqlite"):
        # pooled connections are shared between threads
        connect_args["check_same_thread"] = False
    return create_engine(url, future=True, echo=False, connect_args=connect_args)


def create_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)


DATABASE_URL = settings.DATABASE_URL
engine = create_db_engine(DATABASE_URL)
SessionLocal = create_session_factory(engine)


def init_db(bind: Engine = None, reset: bool = False):
    """
    Create the inventory schema on `bind` (the default engine when omitted).

    With reset=True the tables are dropped first so the database starts empty.
    Model modules are imported here so the metadata is populated.
    """
    import inventory_app.models.product  # noqa: F401

    bind = bind or engine
    if reset:
        Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
