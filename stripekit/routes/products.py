"""Product routes: /v1/products and /v1/products/search."""

from collections.abc import AsyncIterator, Mapping
from typing import Any, Literal

from ..models import DeletedObject, PackageDimensions, Product, ProductList, ProductSearchResult
from ..params import (
    ExpandParams,
    ProductCreateParams,
    ProductUpdateParams,
    SearchParams,
)
from .base import Endpoint, StripeAPIRoute

CREATE = Endpoint("POST", "products", Product)
RETRIEVE = Endpoint("GET", "products/{id}", Product)
UPDATE = Endpoint("POST", "products/{id}", Product)
LIST = Endpoint("GET", "products", ProductList)
DELETE = Endpoint("DELETE", "products/{id}", DeletedObject)
SEARCH = Endpoint("GET", "products/search", ProductSearchResult)


class ProductRoutes(StripeAPIRoute):
    """Create, retrieve, update, list, delete and search products."""

    async def create(
        self,
        name: str,
        id: str | None = None,
        active: bool | None = None,
        description: str | None = None,
        metadata: dict[str, str] | None = None,
        default_price_data: dict[str, Any] | None = None,
        images: list[str] | None = None,
        package_dimensions: PackageDimensions | dict[str, float] | None = None,
        shippable: bool | None = None,
        statement_descriptor: str | None = None,
        tax_code: str | None = None,
        unit_label: str | None = None,
        url: str | None = None,
        expand: list[str] | None = None,
    ) -> Product:
        """
        Create a new product.

        Args:
            name: The product's name, displayable to the customer
            id: Custom product ID; Stripe generates one if omitted
            active: Whether the product is available for purchase
            description: Long form description of the product
            metadata: Key-value pairs to attach to the product
            default_price_data: Data for a Price to create as the default price
            images: Up to 8 image URLs
            package_dimensions: Shipping dimensions (height, length, weight, width)
            shippable: Whether the product is a physical good
            statement_descriptor: Text shown on card statements (max 22 chars)
            tax_code: A tax code ID
            unit_label: Label for units of this product on receipts and invoices
            url: Publicly accessible webpage for the product
            expand: Response fields to expand

        Returns:
            The created Product
        """
        params = ProductCreateParams(
            name=name,
            id=id,
            active=active,
            description=description,
            metadata=metadata,
            default_price_data=default_price_data,
            images=images,
            package_dimensions=package_dimensions,
            shippable=shippable,
            statement_descriptor=statement_descriptor,
            tax_code=tax_code,
            unit_label=unit_label,
            url=url,
            expand=expand,
        )
        return await self._request(CREATE, params)

    async def retrieve(self, id: str, expand: list[str] | None = None) -> Product:
        """Retrieve a product by ID."""
        return await self._request(RETRIEVE, ExpandParams(expand=expand), id=id)

    async def update(
        self,
        product: str,
        active: bool | None = None,
        default_price: str | None = None,
        description: str | None = None,
        metadata: dict[str, str] | None = None,
        name: str | None = None,
        images: list[str] | None = None,
        package_dimensions: PackageDimensions | dict[str, float] | Literal[""] | None = None,
        shippable: bool | None = None,
        statement_descriptor: str | None = None,
        tax_code: str | None = None,
        unit_label: str | None = None,
        url: str | None = None,
        expand: list[str] | None = None,
    ) -> Product:
        """
        Update a product. Parameters left as None are not changed.

        Pass an empty string to unset a field (including
        `package_dimensions`), or an empty dict as `metadata` to remove all
        metadata keys.

        Args:
            product: ID of the product to update
            default_price: ID of the Price to use as the default price

        Returns:
            The updated Product
        """
        params = ProductUpdateParams(
            active=active,
            default_price=default_price,
            description=description,
            metadata=metadata,
            name=name,
            images=images,
            package_dimensions=package_dimensions,
            shippable=shippable,
            statement_descriptor=statement_descriptor,
            tax_code=tax_code,
            unit_label=unit_label,
            url=url,
            expand=expand,
        )
        return await self._request(UPDATE, params, id=product)

    async def list_all(self, filter: Mapping[str, Any] | None = None) -> ProductList:
        """
        List products, most recently created first.

        Args:
            filter: Query filters, e.g. {"active": True, "limit": 10,
                "created": {"gte": 1700000000}}
        """
        return await self._request(LIST, filter)

    def iter_all(self, filter: Mapping[str, Any] | None = None) -> AsyncIterator[Product]:
        """Iterate over every product matching `filter`, across pages."""
        return self._auto_paging(LIST, filter)

    async def delete(self, id: str) -> DeletedObject:
        """Delete a product. Only possible if it has no prices attached."""
        return await self._request(DELETE, id=id)

    async def search(
        self,
        query: str,
        limit: int | None = None,
        page: str | None = None,
        expand: list[str] | None = None,
    ) -> ProductSearchResult:
        """
        Search products with Stripe's Search Query Language.

        Args:
            query: Search query, e.g. "active:'true' AND metadata['sku']:'42'"
            limit: Number of results, 1 to 100 (default 10)
            page: Cursor from a previous result's `next_page`
            expand: Response fields to expand
        """
        params = SearchParams(query=query, limit=limit, page=page, expand=expand)
        return await self._request(SEARCH, params)
