from sqlalchemy import Engine, create_engine, event, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless the pragma is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def is_sqlite_memory(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_db_engine(database_url: str) -> Engine:
    """
    Build an engine for ``database_url``.

    Only in-memory SQLite shares a single connection (``StaticPool``), since a second connection
    would see an empty database; it is meant for tests. File SQLite and server databases use the
    default pool, one connection per session.
    """
    if make_url(database_url).get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    if is_sqlite_memory(database_url):
        db_engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        db_engine = create_engine(database_url, connect_args={"check_same_thread": False})

    event.listen(db_engine, "connect", _enable_sqlite_foreign_keys)
    return db_engine


def create_session_factory(db_engine: Engine) -> sessionmaker:
    return sessionmaker(bind=db_engine)
