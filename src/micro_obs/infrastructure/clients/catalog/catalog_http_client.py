import httpx
import structlog
from pydantic import ValidationError

from micro_obs.core.application.ports import CatalogEntrySnapshot, CatalogLookupPort
from micro_obs.core.exceptions import NotFoundError, ProtocolError, TransportError
from micro_obs.infrastructure.clients.catalog.catalog_envelope_dto import CatalogEnvelopeDTO
from micro_obs.infrastructure.observability.logger_factory_service import get_logger
from micro_obs.infrastructure.observability.metrics_service import CATALOG_FETCHES_TOTAL
from micro_obs.infrastructure.observability.tracing_setup import trace_operation

logger = get_logger("catalog_client")


class CatalogHttpClient(CatalogLookupPort):
    """Fetches catalog entries from the item service over HTTP.

    One ``httpx.AsyncClient`` is shared by every fetch so connections are pooled.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._client = http_client or httpx.AsyncClient()

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        request_id = structlog.contextvars.get_contextvars().get("request_id")
        if request_id:
            headers["X-Request-ID"] = request_id
        return headers

    @trace_operation("client.catalog.fetch")
    async def fetch(self, item_id: str) -> CatalogEntrySnapshot:
        try:
            snapshot = await self._fetch(item_id)
        except (NotFoundError, TransportError, ProtocolError) as exc:
            CATALOG_FETCHES_TOTAL.labels(outcome=type(exc).__name__).inc()
            raise
        CATALOG_FETCHES_TOTAL.labels(outcome="ok").inc()
        return snapshot

    async def _fetch(self, item_id: str) -> CatalogEntrySnapshot:
        url = f"{self.base_url}/items/{item_id}"
        try:
            response = await self._client.get(url, headers=self._get_headers(), timeout=self._timeout)
        except httpx.HTTPError as exc:
            logger.warning("Item service unreachable", item_id=item_id, error_details=str(exc))
            raise TransportError(f"item service request failed: {exc}") from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            raise NotFoundError(item_id=item_id)
        if response.status_code != httpx.codes.OK:
            raise TransportError("item service answered with an error", status_code=response.status_code)

        try:
            envelope = CatalogEnvelopeDTO.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise ProtocolError(
                f"item service returned an unreadable body: {exc}",
                context={"item_id": item_id},
            ) from exc

        if envelope.status == httpx.codes.NOT_FOUND or envelope.count == 0 or not envelope.data:
            raise NotFoundError(item_id=item_id)
        for item in envelope.data:
            if item.id == item_id:
                return CatalogEntrySnapshot(item_id=item.id, quantity=item.qty)
        raise NotFoundError(item_id=item_id)

    async def close(self) -> None:
        await self._client.aclose()
