"""
Request parameter schemas.

Each route method fills one of these models from its keyword arguments.
Fields left as None are dropped when the model is turned into a value bag,
so absent optionals never reach the wire. An explicit empty value ("" or
{}) is kept and tells Stripe to unset the field.
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError

from .exceptions import InvalidParamsError
from .models import (
    Address,
    BillingScheme,
    PackageDimensions,
    RecurringInterval,
    Shipping,
    TaxBehavior,
    TaxExempt,
    TiersMode,
)


def _empty_map_as_unset(value: Any) -> Any:
    if isinstance(value, Mapping) and not value:
        return ""
    return value


# Nested objects that an update may clear by posting "" (or {})
UnsettablePackageDimensions = Annotated[
    PackageDimensions | Literal[""] | None, BeforeValidator(_empty_map_as_unset)
]
UnsettableAddress = Annotated[Address | Literal[""] | None, BeforeValidator(_empty_map_as_unset)]
UnsettableShipping = Annotated[Shipping | Literal[""] | None, BeforeValidator(_empty_map_as_unset)]


class StripeParams(BaseModel):
    """Base for all parameter schemas.

    Arguments that do not fit the schema raise InvalidParamsError.
    """

    model_config = ConfigDict(extra="forbid")

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
            fields = ", ".join(err["field"] for err in errors)
            raise InvalidParamsError(
                f"Invalid parameters for {type(self).__name__}: {fields}",
                details={"errors": errors},
                original_error=e,
            ) from e

    def to_params(self) -> dict[str, Any]:
        """Dump to an encodable value bag, omitting unset fields."""
        return self.model_dump(exclude_none=True)


class ExpandParams(StripeParams):
    """Parameters accepted by every retrieve endpoint."""

    expand: list[str] | None = None


class SearchParams(StripeParams):
    """Parameters for `/search` endpoints."""

    query: str
    limit: int | None = None
    page: str | None = None
    expand: list[str] | None = None


# =============================================================================
# Products
# =============================================================================


class ProductCreateParams(StripeParams):
    name: str
    id: str | None = None
    active: bool | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None
    default_price_data: dict[str, Any] | None = None
    images: list[str] | None = None
    package_dimensions: PackageDimensions | None = None
    shippable: bool | None = None
    statement_descriptor: str | None = None
    tax_code: str | None = None
    unit_label: str | None = None
    url: str | None = None
    expand: list[str] | None = None


class ProductUpdateParams(StripeParams):
    active: bool | None = None
    default_price: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    images: list[str] | None = None
    package_dimensions: UnsettablePackageDimensions = None
    shippable: bool | None = None
    statement_descriptor: str | None = None
    tax_code: str | None = None
    unit_label: str | None = None
    url: str | None = None
    expand: list[str] | None = None


# =============================================================================
# Customers
# =============================================================================


class CustomerCreateParams(StripeParams):
    address: UnsettableAddress = None
    description: str | None = None
    email: str | None = None
    metadata: dict[str, str] | None = None
    name: str | None = None
    payment_method: str | None = None
    phone: str | None = None
    preferred_locales: list[str] | None = None
    shipping: UnsettableShipping = None
    tax_exempt: TaxExempt | None = None
    invoice_settings: dict[str, Any] | None = None
    expand: list[str] | None = None


class CustomerUpdateParams(CustomerCreateParams):
    default_source: str | None = None


# =============================================================================
# Prices
# =============================================================================


class RecurringParams(StripeParams):
    """Recurring components of a new price."""

    interval: RecurringInterval
    interval_count: int | None = None
    usage_type: str | None = None
    aggregate_usage: str | None = None


class PriceCreateParams(StripeParams):
    currency: str
    product: str | None = None
    unit_amount: int | None = None
    unit_amount_decimal: str | None = None
    active: bool | None = None
    billing_scheme: BillingScheme | None = None
    lookup_key: str | None = None
    metadata: dict[str, str] | None = None
    nickname: str | None = None
    product_data: dict[str, Any] | None = None
    recurring: RecurringParams | None = None
    tax_behavior: TaxBehavior | None = None
    tiers: list[dict[str, Any]] | None = None
    tiers_mode: TiersMode | None = None
    transfer_lookup_key: bool | None = None
    expand: list[str] | None = None


class PriceUpdateParams(StripeParams):
    active: bool | None = None
    lookup_key: str | None = None
    metadata: dict[str, str] | None = None
    nickname: str | None = None
    tax_behavior: TaxBehavior | None = None
    transfer_lookup_key: bool | None = None
    expand: list[str] | None = None
