"""Transport boundary exports."""

from .catalog_endpoint import (
    CATALOG_UNAVAILABLE_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    UNSUPPORTED_REQUEST_MESSAGE,
    CatalogEndpoint,
)
from .request_security import NonceIssuer
from .transport_contracts import CatalogRequest, CatalogResponse

__all__ = [
    "CATALOG_UNAVAILABLE_MESSAGE",
    "INVALID_TOKEN_MESSAGE",
    "UNAUTHORIZED_MESSAGE",
    "UNSUPPORTED_REQUEST_MESSAGE",
    "CatalogEndpoint",
    "CatalogRequest",
    "CatalogResponse",
    "NonceIssuer",
]
