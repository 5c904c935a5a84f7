"""Customer routes: /v1/customers and /v1/customers/search."""

from collections.abc import AsyncIterator, Mapping
from typing import Any, Literal

from ..models import (
    Address,
    Customer,
    CustomerList,
    CustomerSearchResult,
    DeletedObject,
    Shipping,
    TaxExempt,
)
from ..params import (
    CustomerCreateParams,
    CustomerUpdateParams,
    ExpandParams,
    SearchParams,
)
from .base import Endpoint, StripeAPIRoute

CREATE = Endpoint("POST", "customers", Customer)
RETRIEVE = Endpoint("GET", "customers/{id}", Customer)
UPDATE = Endpoint("POST", "customers/{id}", Customer)
LIST = Endpoint("GET", "customers", CustomerList)
DELETE = Endpoint("DELETE", "customers/{id}", DeletedObject)
SEARCH = Endpoint("GET", "customers/search", CustomerSearchResult)


class CustomerRoutes(StripeAPIRoute):
    """Create, retrieve, update, list, delete and search customers."""

    async def create(
        self,
        address: Address | dict[str, str] | None = None,
        description: str | None = None,
        email: str | None = None,
        metadata: dict[str, str] | None = None,
        name: str | None = None,
        payment_method: str | None = None,
        phone: str | None = None,
        preferred_locales: list[str] | None = None,
        shipping: Shipping | dict[str, Any] | None = None,
        tax_exempt: TaxExempt | str | None = None,
        invoice_settings: dict[str, Any] | None = None,
        expand: list[str] | None = None,
    ) -> Customer:
        """
        Create a new customer.

        Args:
            address: Billing address
            description: Arbitrary description shown in the dashboard
            email: Customer email address
            metadata: Key-value pairs to attach to the customer
            name: Full name or business name
            payment_method: ID of a PaymentMethod to attach
            phone: Phone number
            preferred_locales: Preferred languages, ordered by preference
            shipping: Shipping name, phone and address
            tax_exempt: "none", "exempt" or "reverse"
            invoice_settings: Default invoice settings
                (e.g. {"default_payment_method": "pm_..."})
            expand: Response fields to expand

        Returns:
            The created Customer
        """
        params = CustomerCreateParams(
            address=address,
            description=description,
            email=email,
            metadata=metadata,
            name=name,
            payment_method=payment_method,
            phone=phone,
            preferred_locales=preferred_locales,
            shipping=shipping,
            tax_exempt=tax_exempt,
            invoice_settings=invoice_settings,
            expand=expand,
        )
        return await self._request(CREATE, params)

    async def retrieve(self, id: str, expand: list[str] | None = None) -> Customer:
        """Retrieve a customer by ID."""
        return await self._request(RETRIEVE, ExpandParams(expand=expand), id=id)

    async def update(
        self,
        customer: str,
        address: Address | dict[str, str] | Literal[""] | None = None,
        default_source: str | None = None,
        description: str | None = None,
        email: str | None = None,
        metadata: dict[str, str] | None = None,
        name: str | None = None,
        phone: str | None = None,
        preferred_locales: list[str] | None = None,
        shipping: Shipping | dict[str, Any] | Literal[""] | None = None,
        tax_exempt: TaxExempt | str | None = None,
        invoice_settings: dict[str, Any] | None = None,
        expand: list[str] | None = None,
    ) -> Customer:
        """Update a customer. Parameters left as None are not changed.

        Pass an empty string as `address` or `shipping` to clear it.
        """
        params = CustomerUpdateParams(
            address=address,
            default_source=default_source,
            description=description,
            email=email,
            metadata=metadata,
            name=name,
            phone=phone,
            preferred_locales=preferred_locales,
            shipping=shipping,
            tax_exempt=tax_exempt,
            invoice_settings=invoice_settings,
            expand=expand,
        )
        return await self._request(UPDATE, params, id=customer)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> CustomerList:
        """List customers, most recently created first."""
        return await self._request(LIST, filter)

    def iter_all(self, filter: Mapping[str, Any] | None = None) -> AsyncIterator[Customer]:
        """Iterate over every customer matching `filter`, across pages."""
        return self._auto_paging(LIST, filter)

    async def delete(self, id: str) -> DeletedObject:
        """Permanently delete a customer and cancel their subscriptions."""
        return await self._request(DELETE, id=id)

    async def search(
        self,
        query: str,
        limit: int | None = None,
        page: str | None = None,
        expand: list[str] | None = None,
    ) -> CustomerSearchResult:
        """Search customers, e.g. query="email:'jenny@example.com'"."""
        params = SearchParams(query=query, limit=limit, page=page, expand=expand)
        return await self._request(SEARCH, params)
