"""Resource route groups."""

from .base import Endpoint, StripeAPIRoute
from .customers import CustomerRoutes
from .prices import PriceRoutes
from .products import ProductRoutes

__all__ = [
    "Endpoint",
    "StripeAPIRoute",
    "CustomerRoutes",
    "PriceRoutes",
    "ProductRoutes",
]
