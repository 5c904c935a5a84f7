"""Response models for StripeKit."""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Enums
# =============================================================================


class BillingScheme(str, Enum):
    """How a price computes the amount to charge."""

    per_unit = "per_unit"
    tiered = "tiered"


class TaxBehavior(str, Enum):
    """Whether a price is tax inclusive or exclusive."""

    inclusive = "inclusive"
    exclusive = "exclusive"
    unspecified = "unspecified"


class TiersMode(str, Enum):
    """Tiered pricing modes."""

    graduated = "graduated"
    volume = "volume"


class RecurringInterval(str, Enum):
    """Billing frequency for recurring prices."""

    day = "day"
    week = "week"
    month = "month"
    year = "year"


class TaxExempt(str, Enum):
    """Customer tax exemption status."""

    none = "none"
    exempt = "exempt"
    reverse = "reverse"


class PriceType(str, Enum):
    """One-time or recurring price."""

    one_time = "one_time"
    recurring = "recurring"


# =============================================================================
# Base
# =============================================================================


class StripeObject(BaseModel):
    """Base for every decoded Stripe resource.

    Unknown fields are kept so newer API versions do not break decoding.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    object: str
    livemode: bool = False


class DeletedObject(BaseModel):
    """Returned by DELETE endpoints."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str
    deleted: bool


# =============================================================================
# Shared structures
# =============================================================================


class Address(BaseModel):
    """Postal address."""

    city: str | None = None
    country: str | None = None
    line1: str | None = None
    line2: str | None = None
    postal_code: str | None = None
    state: str | None = None


class PackageDimensions(BaseModel):
    """Shipping dimensions of a product, in inches and ounces."""

    height: float
    length: float
    weight: float
    width: float


class Shipping(BaseModel):
    """Customer shipping information."""

    address: Address | None = None
    name: str | None = None
    phone: str | None = None


class Recurring(BaseModel):
    """Recurring components of a price."""

    model_config = ConfigDict(extra="allow")

    interval: RecurringInterval
    interval_count: int = 1
    usage_type: str = "licensed"
    aggregate_usage: str | None = None


class PriceTier(BaseModel):
    """One tier of a tiered price. `up_to` is None for the last tier."""

    flat_amount: int | None = None
    flat_amount_decimal: str | None = None
    unit_amount: int | None = None
    unit_amount_decimal: str | None = None
    up_to: int | None = None


# =============================================================================
# Resources
# =============================================================================


class Product(StripeObject):
    """A product offered to customers."""

    object: str = "product"
    active: bool = True
    created: int | None = None
    default_price: str | dict[str, Any] | None = None
    description: str | None = None
    images: list[str] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)
    name: str
    package_dimensions: PackageDimensions | None = None
    shippable: bool | None = None
    statement_descriptor: str | None = None
    tax_code: str | dict[str, Any] | None = None
    unit_label: str | None = None
    updated: int | None = None
    url: str | None = None


class Customer(StripeObject):
    """A customer of the account."""

    object: str = "customer"
    address: Address | None = None
    balance: int = 0
    created: int | None = None
    currency: str | None = None
    default_source: str | dict[str, Any] | None = None
    delinquent: bool | None = None
    description: str | None = None
    email: str | None = None
    invoice_prefix: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    name: str | None = None
    phone: str | None = None
    preferred_locales: list[str] = Field(default_factory=list)
    shipping: Shipping | None = None
    tax_exempt: TaxExempt | None = None


class Price(StripeObject):
    """Unit cost, currency and billing cycle for a product."""

    object: str = "price"
    active: bool = True
    billing_scheme: BillingScheme = BillingScheme.per_unit
    created: int | None = None
    currency: str
    lookup_key: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    nickname: str | None = None
    product: str | dict[str, Any]
    recurring: Recurring | None = None
    tax_behavior: TaxBehavior | None = None
    tiers: list[PriceTier] | None = None
    tiers_mode: TiersMode | None = None
    type: PriceType = PriceType.one_time
    unit_amount: int | None = None
    unit_amount_decimal: str | None = None


# =============================================================================
# List & search wrappers
# =============================================================================

T = TypeVar("T", bound=BaseModel)


class StripeList(BaseModel, Generic[T]):
    """A page of a list endpoint."""

    object: str = "list"
    data: list[T] = Field(default_factory=list)
    has_more: bool = False
    url: str | None = None


class SearchResult(BaseModel, Generic[T]):
    """A page of a search endpoint. Follow `next_page` for the next page."""

    object: str = "search_result"
    data: list[T] = Field(default_factory=list)
    has_more: bool = False
    next_page: str | None = None
    total_count: int | None = None
    url: str | None = None


ProductList = StripeList[Product]
ProductSearchResult = SearchResult[Product]
CustomerList = StripeList[Customer]
CustomerSearchResult = SearchResult[Customer]
PriceList = StripeList[Price]
PriceSearchResult = SearchResult[Price]
