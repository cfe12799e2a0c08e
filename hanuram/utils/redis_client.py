"""
Redis client
"""
import redis.asyncio as redis
from hanuram.config import get_settings

settings = get_settings()

# Lazily connected; nothing touches the network until the first command
redis_client = redis.from_url(
    settings.redis_url,
    encoding="utf-8",
    decode_responses=True,
    max_connections=50,
    socket_timeout=5,
    socket_connect_timeout=5,
    retry_on_timeout=True,
    health_check_interval=30,
)

