"""Client session exports."""

from .catalog_client import CatalogFetchError, CatalogTransport, ClientCatalogCache
from .endpoint_transport import EndpointTransport

__all__ = [
    "CatalogFetchError",
    "CatalogTransport",
    "ClientCatalogCache",
    "EndpointTransport",
]
