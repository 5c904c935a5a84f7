"""Price routes: /v1/prices and /v1/prices/search.

Prices cannot be deleted through the API; archive one with
update(price, active=False) instead.
"""

from collections.abc import AsyncIterator, Mapping
from typing import Any

from ..models import (
    BillingScheme,
    Price,
    PriceList,
    PriceSearchResult,
    TaxBehavior,
    TiersMode,
)
from ..params import (
    ExpandParams,
    PriceCreateParams,
    PriceUpdateParams,
    RecurringParams,
    SearchParams,
)
from .base import Endpoint, StripeAPIRoute

CREATE = Endpoint("POST", "prices", Price)
RETRIEVE = Endpoint("GET", "prices/{id}", Price)
UPDATE = Endpoint("POST", "prices/{id}", Price)
LIST = Endpoint("GET", "prices", PriceList)
SEARCH = Endpoint("GET", "prices/search", PriceSearchResult)


class PriceRoutes(StripeAPIRoute):
    """Create, retrieve, update, list and search prices."""

    async def create(
        self,
        currency: str,
        product: str | None = None,
        unit_amount: int | None = None,
        unit_amount_decimal: str | None = None,
        active: bool | None = None,
        billing_scheme: BillingScheme | str | None = None,
        lookup_key: str | None = None,
        metadata: dict[str, str] | None = None,
        nickname: str | None = None,
        product_data: dict[str, Any] | None = None,
        recurring: RecurringParams | dict[str, Any] | None = None,
        tax_behavior: TaxBehavior | str | None = None,
        tiers: list[dict[str, Any]] | None = None,
        tiers_mode: TiersMode | str | None = None,
        transfer_lookup_key: bool | None = None,
        expand: list[str] | None = None,
    ) -> Price:
        """
        Create a price for an existing product, or for a new one via `product_data`.

        Args:
            currency: Three-letter ISO currency code, lowercase
            product: ID of the product this price belongs to
            unit_amount: Amount in the smallest currency unit (e.g. cents)
            unit_amount_decimal: Same as unit_amount but accepts decimals, as a string
            active: Whether the price can be used for new purchases
            billing_scheme: "per_unit" or "tiered"
            lookup_key: Key to retrieve the price dynamically from a static string
            metadata: Key-value pairs to attach to the price
            nickname: Brief description, hidden from customers
            product_data: Inline definition of a new product
            recurring: Recurring components, e.g. {"interval": "month"}
            tax_behavior: "inclusive", "exclusive" or "unspecified"
            tiers: Pricing tiers when billing_scheme is "tiered"
            tiers_mode: "graduated" or "volume"
            transfer_lookup_key: Move lookup_key from an existing price to this one
            expand: Response fields to expand

        Returns:
            The created Price
        """
        params = PriceCreateParams(
            currency=currency,
            product=product,
            unit_amount=unit_amount,
            unit_amount_decimal=unit_amount_decimal,
            active=active,
            billing_scheme=billing_scheme,
            lookup_key=lookup_key,
            metadata=metadata,
            nickname=nickname,
            product_data=product_data,
            recurring=recurring,
            tax_behavior=tax_behavior,
            tiers=tiers,
            tiers_mode=tiers_mode,
            transfer_lookup_key=transfer_lookup_key,
            expand=expand,
        )
        return await self._request(CREATE, params)

    async def retrieve(self, id: str, expand: list[str] | None = None) -> Price:
        """Retrieve a price by ID."""
        return await self._request(RETRIEVE, ExpandParams(expand=expand), id=id)

    async def update(
        self,
        price: str,
        active: bool | None = None,
        lookup_key: str | None = None,
        metadata: dict[str, str] | None = None,
        nickname: str | None = None,
        tax_behavior: TaxBehavior | str | None = None,
        transfer_lookup_key: bool | None = None,
        expand: list[str] | None = None,
    ) -> Price:
        """Update a price. Amounts and currency cannot be changed."""
        params = PriceUpdateParams(
            active=active,
            lookup_key=lookup_key,
            metadata=metadata,
            nickname=nickname,
            tax_behavior=tax_behavior,
            transfer_lookup_key=transfer_lookup_key,
            expand=expand,
        )
        return await self._request(UPDATE, params, id=price)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> PriceList:
        """List prices, e.g. filter={"product": "prod_...", "active": True}."""
        return await self._request(LIST, filter)

    def iter_all(self, filter: Mapping[str, Any] | None = None) -> AsyncIterator[Price]:
        """Iterate over every price matching `filter`, across pages."""
        return self._auto_paging(LIST, filter)

    async def search(
        self,
        query: str,
        limit: int | None = None,
        page: str | None = None,
        expand: list[str] | None = None,
    ) -> PriceSearchResult:
        """Search prices, e.g. query="product:'prod_123' AND active:'true'"."""
        params = SearchParams(query=query, limit=limit, page=page, expand=expand)
        return await self._request(SEARCH, params)
