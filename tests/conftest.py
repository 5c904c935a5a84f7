"""Pytest configuration for StripeKit tests."""

import pytest


@pytest.fixture(autouse=True)
def configure_structlog():
    """Configure structlog for testing."""
    import structlog

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@pytest.fixture
def product_payload():
    """Product as returned by the API."""
    return {
        "id": "prod_123",
        "object": "product",
        "active": True,
        "created": 1700000000,
        "default_price": None,
        "description": "Comfortable cotton t-shirt",
        "images": ["https://example.com/shirt.png"],
        "livemode": False,
        "metadata": {"sku": "TS-42"},
        "name": "T-shirt",
        "package_dimensions": None,
        "shippable": True,
        "statement_descriptor": None,
        "tax_code": None,
        "unit_label": None,
        "updated": 1700000000,
        "url": None,
    }


@pytest.fixture
def customer_payload():
    """Customer as returned by the API."""
    return {
        "id": "cus_123",
        "object": "customer",
        "address": {"city": "Paris", "country": "FR"},
        "balance": 0,
        "created": 1700000000,
        "email": "jenny@example.com",
        "livemode": False,
        "metadata": {},
        "name": "Jenny Rosen",
        "preferred_locales": ["fr"],
        "tax_exempt": "none",
    }


@pytest.fixture
def price_payload():
    """Recurring price as returned by the API."""
    return {
        "id": "price_123",
        "object": "price",
        "active": True,
        "billing_scheme": "per_unit",
        "created": 1700000000,
        "currency": "usd",
        "livemode": False,
        "metadata": {},
        "product": "prod_123",
        "recurring": {"interval": "month", "interval_count": 1, "usage_type": "licensed"},
        "tax_behavior": "exclusive",
        "type": "recurring",
        "unit_amount": 2000,
        "unit_amount_decimal": "2000",
    }
