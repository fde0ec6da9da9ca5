import logging
from contextlib import contextmanager

from sqlalchemy import Column, Insert, Integer, MetaData, Numeric, String, Table, create_engine, text

logger = logging.getLogger(__name__)

metadata = MetaData()

jobs_table = Table(
    'jobs',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('title', String(255), nullable=False),
    Column('company', String(255), nullable=False),
    Column('type', String(100), nullable=False),
    Column('experience_level', String(100), nullable=False),
    Column('salary', Numeric(12, 2, asdecimal=False), nullable=False),
)

users_table = Table(
    'users',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('username', String(255), unique=True, nullable=False),
    Column('password', String(255), nullable=False),
)


def _statement(query):
    return text(query) if isinstance(query, str) else query


class Database:
    """Process-wide handle on the connection pool.

    Built once by the application factory and handed to the repositories.
    Every helper borrows one connection for one statement and gives it back.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        self.engine = create_engine(url, pool_pre_ping=True, **engine_kwargs)

    @contextmanager
    def get_conn(self):
        conn = self.engine.connect()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def run(self, query, params: dict | None = None):  # returns {lastID, changes}
        with self.get_conn() as conn:
            result = conn.execute(_statement(query), params or {})
            last_id = None
            if isinstance(query, Insert) and result.inserted_primary_key:
                last_id = result.inserted_primary_key[0]
            changes = result.rowcount if result.rowcount is not None else 0
            return {"lastID": last_id, "changes": changes}

    def get(self, query, params: dict | None = None):  # returns single dict or None
        with self.get_conn() as conn:
            row = conn.execute(_statement(query), params or {}).mappings().first()
            return dict(row) if row else None

    def all(self, query, params: dict | None = None):  # returns list of dicts
        with self.get_conn() as conn:
            rows = conn.execute(_statement(query), params or {}).mappings().all()
            return [dict(r) for r in rows]

    def init_schema(self):
        metadata.create_all(self.engine)
        logger.info("Schema ready on %s", self.engine.url.render_as_string(hide_password=True))

    def dispose(self):
        self.engine.dispose()
