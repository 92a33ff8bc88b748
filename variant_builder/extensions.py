import logging
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
import redis as _redis

logger = logging.getLogger(__name__)

db = SQLAlchemy()
migrate = Migrate()

# Initialized lazily in create_app
redis_client: _redis.Redis = None  # type: ignore
record_store = None


def init_record_store(app):
    """Pick the key-value backend that holds the persisted variant records."""
    global redis_client, record_store
    from variant_builder.services.record_store import (
        MemoryRecordStore,
        RedisRecordStore,
        SqlRecordStore,
    )

    backend = app.config.get("RECORD_STORE", "sql")
    if backend == "memory":
        record_store = MemoryRecordStore()
        return record_store
    if backend != "redis":
        record_store = SqlRecordStore()
        return record_store

    redis_url = app.config.get("REDIS_URL", "")
    if not redis_url:
        logger.warning("REDIS_URL not set, records kept in memory (dev mode)")
        record_store = MemoryRecordStore()
        return record_store

    try:
        redis_client = _redis.from_url(redis_url, decode_responses=True)
        redis_client.ping()
        record_store = RedisRecordStore(redis_client)
    except Exception as e:
        logger.warning("Redis connection failed (%s), records kept in memory", e)
        redis_client = None
        record_store = MemoryRecordStore()
    return record_store
