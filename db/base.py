from peewee import Model
from playhouse.db_url import connect

from core.settings import settings


def _build_database():
    """Create the peewee database from DATABASE_URL (pooled for +pool schemes)."""
    params = {}
    scheme = settings.database_url.split("://", 1)[0]
    if scheme.endswith("+pool"):
        params.update(
            max_connections=settings.db_max_connections,
            stale_timeout=settings.db_stale_timeout,
            timeout=settings.db_pool_timeout,
        )
    return connect(settings.database_url, **params)


db = _build_database()


class BaseModel(Model):
    class Meta:
        database = db


def init_db():
    """Connect and make sure the tournament tables exist."""
    db.connect(reuse_if_open=True)

    from db.models import MODELS

    db.create_tables(MODELS, safe=True)


def close_db():
    """Close database connection."""
    if not db.is_closed():
        db.close()
