"""
Redis connection shared by the list cache
Supports both a REDIS_URL (managed Redis) and individual host settings
"""

import logging
from typing import Optional

import redis

from .config import (
    REDIS_DB,
    REDIS_HOST,
    REDIS_PASSWORD,
    REDIS_PORT,
    REDIS_SOCKET_TIMEOUT,
    REDIS_SSL,
    REDIS_URL,
)

logger = logging.getLogger(__name__)

redis_client: Optional[redis.Redis] = None


def mask_redis_url(redis_url: str) -> str:
    """Hide credentials before a URL reaches the logs"""
    if "@" in redis_url:
        url_parts = redis_url.split("@")
        protocol = url_parts[0].split(":")[0]
        return f"{protocol}:****@{url_parts[1]}"
    return "****"


def get_redis_client() -> redis.Redis:
    """Get or create the Redis client"""
    global redis_client

    if redis_client is None:
        logger.info("🔄 Initializing Redis connection for list cache...")

        if REDIS_URL:
            logger.info(f"📡 Using Redis URL connection: {mask_redis_url(REDIS_URL)}")
            client = redis.from_url(
                REDIS_URL,
                decode_responses=True,
                socket_connect_timeout=REDIS_SOCKET_TIMEOUT,
                socket_timeout=REDIS_SOCKET_TIMEOUT,
                health_check_interval=30,
                max_connections=20,
            )
        else:
            logger.info(
                f"📡 Using Redis at {REDIS_HOST}:{REDIS_PORT} db={REDIS_DB} "
                f"(SSL {'enabled' if REDIS_SSL else 'disabled'})"
            )
            client = redis.Redis(
                host=REDIS_HOST,
                port=REDIS_PORT,
                password=REDIS_PASSWORD,
                db=REDIS_DB,
                ssl=REDIS_SSL,
                decode_responses=True,
                socket_connect_timeout=REDIS_SOCKET_TIMEOUT,
                socket_timeout=REDIS_SOCKET_TIMEOUT,
                health_check_interval=30,
                max_connections=20,
            )

        try:
            client.ping()
        except Exception as e:
            logger.error(f"❌ Failed to connect to Redis: {str(e)}")
            raise
        redis_client = client
        logger.info("Redis connected successfully")

    return redis_client


def close_redis_client() -> None:
    """Drop the shared client; the next get_redis_client call reconnects"""
    global redis_client

    if redis_client is not None:
        try:
            redis_client.close()
        except Exception as e:
            logger.debug(f"Redis close failed (non-critical): {e}")
        redis_client = None
