from micro_obs.core.exceptions.application_error import ApplicationError
from micro_obs.core.exceptions.catalog_service_error import ProtocolError, TransportError
from micro_obs.core.exceptions.codec_error import CodecError
from micro_obs.core.exceptions.empty_order_error import EmptyOrderError
from micro_obs.core.exceptions.insufficient_stock_error import InsufficientStockError
from micro_obs.core.exceptions.not_found_error import NotFoundError
from micro_obs.core.exceptions.parse_error import ParseError
from micro_obs.core.exceptions.persistence_error import PersistenceError

__all__ = [
    "ApplicationError",
    "CodecError",
    "EmptyOrderError",
    "InsufficientStockError",
    "NotFoundError",
    "ParseError",
    "PersistenceError",
    "ProtocolError",
    "TransportError",
]
