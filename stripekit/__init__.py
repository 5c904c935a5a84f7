"""StripeKit - async Python client for the Stripe REST API.

Example:
    ```python
    from stripekit import StripeClient, StripeKitConfig, encode

    config = StripeKitConfig(api_key="sk_test_...")
    async with StripeClient(config) as stripe:
        product = await stripe.products.create(
            name="T-shirt",
            images=["https://example.com/shirt.png"],
            metadata={"sku": "TS-42"},
        )
        results = await stripe.products.search(query="active:'true'")

    encode({"metadata": {"sku": "TS-42"}, "active": True})
    # 'metadata[sku]=TS-42&active=true'
    ```
"""

from .client import StripeClient
from .config import StripeKitConfig
from .encoding import Encodable, encode, encode_pairs
from .exceptions import (
    APIConnectionError,
    APIError,
    APIStatusError,
    AuthenticationError,
    CardError,
    IdempotencyError,
    InvalidParamsError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
    StripeConfigError,
    StripeKitError,
    TransportError,
    UnsupportedValueKind,
)
from .models import (
    Address,
    BillingScheme,
    Customer,
    CustomerList,
    CustomerSearchResult,
    DeletedObject,
    PackageDimensions,
    Price,
    PriceList,
    PriceSearchResult,
    PriceType,
    Product,
    ProductList,
    ProductSearchResult,
    Recurring,
    RecurringInterval,
    SearchResult,
    Shipping,
    StripeList,
    TaxBehavior,
    TaxExempt,
    TiersMode,
)
from .routes import CustomerRoutes, Endpoint, PriceRoutes, ProductRoutes, StripeAPIRoute
from .transport import StripeAPIHandler
from .version import __version__

__all__ = [
    # Version
    "__version__",
    # Client
    "StripeClient",
    "StripeAPIHandler",
    # Config
    "StripeKitConfig",
    # Encoding
    "Encodable",
    "encode",
    "encode_pairs",
    # Routes
    "Endpoint",
    "StripeAPIRoute",
    "ProductRoutes",
    "CustomerRoutes",
    "PriceRoutes",
    # Exceptions
    "StripeKitError",
    "StripeConfigError",
    "InvalidParamsError",
    "UnsupportedValueKind",
    "TransportError",
    "APIConnectionError",
    "APIStatusError",
    "InvalidRequestError",
    "AuthenticationError",
    "CardError",
    "PermissionDeniedError",
    "ResourceNotFoundError",
    "IdempotencyError",
    "RateLimitError",
    "APIError",
    # Enums
    "BillingScheme",
    "PriceType",
    "RecurringInterval",
    "TaxBehavior",
    "TaxExempt",
    "TiersMode",
    # Models
    "Address",
    "Shipping",
    "PackageDimensions",
    "Recurring",
    "Product",
    "Customer",
    "Price",
    "DeletedObject",
    "StripeList",
    "SearchResult",
    "ProductList",
    "ProductSearchResult",
    "CustomerList",
    "CustomerSearchResult",
    "PriceList",
    "PriceSearchResult",
]
