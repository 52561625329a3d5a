from redis.asyncio import Redis


def create_redis_client(url: str) -> Redis:
    """Build an asyncio Redis client from a URL such as ``redis://:secret@localhost:6379/1``.

    No connection is opened until the first command is sent.
    """
    return Redis.from_url(url, decode_responses=True)
