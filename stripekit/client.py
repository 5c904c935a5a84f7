"""
StripeKit client.

Entry point that owns the transport and exposes one attribute per
resource route group.
"""

from typing import Any

import structlog

from .config import StripeKitConfig
from .exceptions import StripeConfigError
from .routes import CustomerRoutes, PriceRoutes, ProductRoutes
from .transport import StripeAPIHandler

logger = structlog.get_logger(__name__)


class StripeClient:
    """
    Async Stripe client.

    Example:
        ```python
        async with StripeClient(api_key="sk_test_...") as stripe:
            product = await stripe.products.create(
                name="T-shirt",
                metadata={"sku": "TS-42"},
            )
            await stripe.prices.create(
                currency="usd",
                product=product.id,
                unit_amount=2000,
            )
        ```
    """

    def __init__(
        self,
        config: StripeKitConfig | None = None,
        api_key: str | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            config: Client configuration
            api_key: Shortcut for StripeKitConfig(api_key=...) when no config is given

        Raises:
            StripeConfigError: If neither config nor api_key is provided
        """
        if config is None:
            if api_key is None:
                raise StripeConfigError("either config or api_key is required")
            config = StripeKitConfig(api_key=api_key)

        self.config = config
        self.api_handler = StripeAPIHandler(config)

        self.products = ProductRoutes(self.api_handler)
        self.customers = CustomerRoutes(self.api_handler)
        self.prices = PriceRoutes(self.api_handler)

        logger.info("stripe_client_initialized", is_test_mode=config.is_test_mode)

    async def __aenter__(self) -> "StripeClient":
        """Async context manager entry."""
        await self.api_handler.__aenter__()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.api_handler.close()
