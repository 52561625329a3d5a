from collections.abc import Iterable

from redis.asyncio import Redis

from micro_obs.core.application.ports import CatalogStorePort
from micro_obs.core.domain.catalog import CatalogEntry
from micro_obs.core.domain.catalog.identifier_codec import IDENTIFIER_RE
from micro_obs.core.exceptions import ParseError
from micro_obs.infrastructure.observability.tracing_setup import trace_operation
from micro_obs.infrastructure.persistence.redis.redis_command import (
    REDIS_SPAN_ATTRIBUTES,
    run_command,
    scan_keys,
)

NAME_FIELD = "name"
DESCRIPTION_FIELD = "desc"
QUANTITY_FIELD = "qty"


class RedisCatalogStore(CatalogStorePort):
    """Catalog entries stored as Redis hashes keyed by the entry id."""

    def __init__(self, client: Redis, scan_count: int = 10) -> None:
        self._client = client
        self._scan_count = scan_count

    @trace_operation("redis.catalog.scan", REDIS_SPAN_ATTRIBUTES)
    async def scan_all_keys(self) -> list[str]:
        """Return the keys of catalog hashes only.

        The database may be shared with the order service, whose ``order:<id>``
        hashes and ``nextID`` counter are not catalog entries.
        """
        keys = await scan_keys(self._client, match=None, count=self._scan_count, key_type="hash")
        return [key for key in keys if IDENTIFIER_RE.fullmatch(key)]

    @trace_operation("redis.catalog.get", REDIS_SPAN_ATTRIBUTES)
    async def get(self, item_id: str) -> CatalogEntry | None:
        fields = await run_command("HGETALL", self._client.hgetall(item_id), key=item_id)
        if not fields:
            return None
        return _unmarshal(item_id, fields)

    @trace_operation("redis.catalog.set", REDIS_SPAN_ATTRIBUTES)
    async def set(self, entry: CatalogEntry) -> None:
        # One HSET with every field: the engine applies it whole or not at all.
        await run_command("HSET", self._client.hset(entry.id, mapping=_marshal(entry)), key=entry.id)

    @trace_operation("redis.catalog.delete", REDIS_SPAN_ATTRIBUTES)
    async def delete(self, item_id: str) -> None:
        await run_command("DEL", self._client.delete(item_id), key=item_id)

    @trace_operation("redis.catalog.delete_many", REDIS_SPAN_ATTRIBUTES)
    async def delete_many(self, item_ids: Iterable[str]) -> None:
        keys = list(item_ids)
        if not keys:
            return
        await run_command("DEL", self._client.delete(*keys))


def _marshal(entry: CatalogEntry) -> dict[str, str]:
    return {
        NAME_FIELD: entry.name,
        DESCRIPTION_FIELD: entry.description,
        QUANTITY_FIELD: str(entry.quantity),
    }


def _unmarshal(item_id: str, fields: dict[str, str]) -> CatalogEntry:
    try:
        return CatalogEntry(
            id=item_id,
            name=fields[NAME_FIELD],
            description=fields.get(DESCRIPTION_FIELD, ""),
            quantity=int(fields[QUANTITY_FIELD]),
        )
    except (KeyError, ValueError) as exc:
        raise ParseError(
            f"malformed catalog record at {item_id!r}: {exc}",
            context={"key": item_id},
        ) from exc
