"""Unit tests for ProductRoutes."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from stripekit import (
    DeletedObject,
    InvalidParamsError,
    Product,
    ProductList,
    ProductRoutes,
    ProductSearchResult,
    StripeAPIHandler,
    UnsupportedValueKind,
)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def api_handler():
    """Transport double recording every send() call."""
    handler = MagicMock(spec=StripeAPIHandler)
    handler.send = AsyncMock()
    return handler


@pytest.fixture
def routes(api_handler):
    return ProductRoutes(api_handler)


@pytest.fixture
def product(product_payload):
    return Product(**product_payload)


def sent(api_handler):
    """Return (method, path, kwargs) of the last send() call."""
    call = api_handler.send.call_args
    return call[0][0], call[0][1], call[1]


# =============================================================================
# Create
# =============================================================================


class TestCreate:
    """Tests for ProductRoutes.create."""

    @pytest.mark.asyncio
    async def test_create_minimal(self, routes, api_handler, product):
        api_handler.send.return_value = product

        result = await routes.create(name="T-shirt")

        assert result is product
        method, path, kwargs = sent(api_handler)
        assert method == "POST"
        assert path == "products"
        assert kwargs["body"] == "name=T-shirt"
        assert kwargs["query"] is None
        assert kwargs["response_model"] is Product

    @pytest.mark.asyncio
    async def test_create_with_nested_params(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.create(
            name="T-shirt",
            active=True,
            metadata={"sku": "TS-42"},
            images=["https://example.com/1.png", "https://example.com/2.png"],
            default_price_data={"currency": "usd", "unit_amount": 2000},
            package_dimensions={"height": 1.0, "length": 2.0, "weight": 3.5, "width": 4.0},
            expand=["default_price"],
        )

        _, _, kwargs = sent(api_handler)
        assert kwargs["body"] == (
            "name=T-shirt"
            "&active=true"
            "&metadata[sku]=TS-42"
            "&default_price_data[currency]=usd"
            "&default_price_data[unit_amount]=2000"
            "&images[0]=https%3A%2F%2Fexample.com%2F1.png"
            "&images[1]=https%3A%2F%2Fexample.com%2F2.png"
            "&package_dimensions[height]=1.0"
            "&package_dimensions[length]=2.0"
            "&package_dimensions[weight]=3.5"
            "&package_dimensions[width]=4.0"
            "&expand[0]=default_price"
        )

    @pytest.mark.asyncio
    async def test_omitted_optionals_never_appear(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.create(name="T-shirt", description="Cotton")

        _, _, kwargs = sent(api_handler)
        body = kwargs["body"]
        for key in ("id", "active", "metadata", "images", "shippable", "url", "expand"):
            assert f"{key}=" not in body
            assert f"{key}[" not in body

    @pytest.mark.asyncio
    async def test_unencodable_default_price_data(self, routes, api_handler):
        with pytest.raises(UnsupportedValueKind) as exc_info:
            await routes.create(name="T-shirt", default_price_data={"currency": {"x": object()}})

        assert exc_info.value.key_path == "default_price_data[currency][x]"
        api_handler.send.assert_not_awaited()


# =============================================================================
# Retrieve / Update / Delete
# =============================================================================


class TestRetrieve:
    """Tests for ProductRoutes.retrieve."""

    @pytest.mark.asyncio
    async def test_retrieve(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.retrieve("prod_123")

        method, path, kwargs = sent(api_handler)
        assert method == "GET"
        assert path == "products/prod_123"
        assert kwargs["query"] is None
        assert kwargs["body"] is None

    @pytest.mark.asyncio
    async def test_retrieve_with_expand_uses_query(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.retrieve("prod_123", expand=["default_price"])

        _, _, kwargs = sent(api_handler)
        assert kwargs["query"] == "expand[0]=default_price"
        assert kwargs["body"] is None

    @pytest.mark.asyncio
    async def test_path_identifier_is_escaped(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.retrieve("prod/../balance")

        _, path, _ = sent(api_handler)
        assert path == "products/prod%2F..%2Fbalance"


class TestUpdate:
    """Tests for ProductRoutes.update."""

    @pytest.mark.asyncio
    async def test_update(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.update("prod_123", active=False, name="Shirt")

        method, path, kwargs = sent(api_handler)
        assert method == "POST"
        assert path == "products/prod_123"
        assert kwargs["body"] == "active=false&name=Shirt"

    @pytest.mark.asyncio
    async def test_update_with_empty_values_unsets(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.update("prod_123", description="", metadata={})

        _, _, kwargs = sent(api_handler)
        assert kwargs["body"] == "description=&metadata="

    @pytest.mark.asyncio
    @pytest.mark.parametrize("cleared", ["", {}])
    async def test_update_clears_package_dimensions(self, routes, api_handler, product, cleared):
        api_handler.send.return_value = product

        await routes.update("prod_123", package_dimensions=cleared)

        _, _, kwargs = sent(api_handler)
        assert kwargs["body"] == "package_dimensions="

    @pytest.mark.asyncio
    async def test_update_rejects_partial_package_dimensions(self, routes, api_handler):
        with pytest.raises(InvalidParamsError) as exc_info:
            await routes.update("prod_123", package_dimensions={"height": 1.0})

        assert "package_dimensions" in exc_info.value.message
        api_handler.send.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_update_without_changes_sends_no_body(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.update("prod_123")

        _, _, kwargs = sent(api_handler)
        assert kwargs["body"] is None


class TestDelete:
    """Tests for ProductRoutes.delete."""

    @pytest.mark.asyncio
    async def test_delete(self, routes, api_handler):
        api_handler.send.return_value = DeletedObject(id="prod_123", object="product", deleted=True)

        result = await routes.delete("prod_123")

        assert result.deleted is True
        method, path, kwargs = sent(api_handler)
        assert method == "DELETE"
        assert path == "products/prod_123"
        assert kwargs["query"] is None
        assert kwargs["response_model"] is DeletedObject


# =============================================================================
# List / Search
# =============================================================================


class TestList:
    """Tests for ProductRoutes.list_all and iter_all."""

    @pytest.mark.asyncio
    async def test_list_all_with_filter(self, routes, api_handler):
        api_handler.send.return_value = ProductList(data=[])

        await routes.list_all({"limit": 3, "active": True, "created": {"gte": 1700000000}})

        method, path, kwargs = sent(api_handler)
        assert method == "GET"
        assert path == "products"
        assert kwargs["query"] == "limit=3&active=true&created[gte]=1700000000"
        assert kwargs["response_model"] is ProductList

    @pytest.mark.asyncio
    async def test_list_all_without_filter(self, routes, api_handler):
        api_handler.send.return_value = ProductList(data=[])

        await routes.list_all()

        _, _, kwargs = sent(api_handler)
        assert kwargs["query"] is None

    @pytest.mark.asyncio
    async def test_iter_all_follows_pages(self, routes, api_handler, product_payload):
        def page(ids, has_more):
            return ProductList(
                data=[Product(**{**product_payload, "id": i}) for i in ids],
                has_more=has_more,
            )

        api_handler.send.side_effect = [
            page(["prod_1", "prod_2"], True),
            page(["prod_3"], False),
        ]

        ids = [p.id async for p in routes.iter_all({"limit": 2})]

        assert ids == ["prod_1", "prod_2", "prod_3"]
        assert api_handler.send.await_count == 2
        second_query = api_handler.send.call_args_list[1][1]["query"]
        assert second_query == "limit=2&starting_after=prod_2"

    @pytest.mark.asyncio
    async def test_iter_all_backwards(self, routes, api_handler, product_payload):
        def page(ids, has_more):
            return ProductList(
                data=[Product(**{**product_payload, "id": i}) for i in ids],
                has_more=has_more,
            )

        api_handler.send.side_effect = [
            page(["prod_5", "prod_4"], True),
            page(["prod_3"], False),
        ]

        ids = [p.id async for p in routes.iter_all({"ending_before": "prod_6"})]

        assert ids == ["prod_4", "prod_5", "prod_3"]
        second_query = api_handler.send.call_args_list[1][1]["query"]
        assert second_query == "ending_before=prod_5"


class TestSearch:
    """Tests for ProductRoutes.search."""

    @pytest.mark.asyncio
    async def test_search(self, routes, api_handler):
        api_handler.send.return_value = ProductSearchResult(data=[])

        await routes.search("active:'true'", limit=5)

        method, path, kwargs = sent(api_handler)
        assert method == "GET"
        assert path == "products/search"
        assert kwargs["query"] == "query=active%3A%27true%27&limit=5"
        assert kwargs["body"] is None

    @pytest.mark.asyncio
    async def test_search_with_page_and_expand(self, routes, api_handler):
        api_handler.send.return_value = ProductSearchResult(data=[])

        await routes.search("name:'shirt'", page="cursor_1", expand=["data.default_price"])

        _, _, kwargs = sent(api_handler)
        assert kwargs["query"] == (
            "query=name%3A%27shirt%27&page=cursor_1&expand[0]=data.default_price"
        )


class TestHeaders:
    """Tests for per-group headers."""

    @pytest.mark.asyncio
    async def test_group_headers_are_forwarded(self, api_handler, product):
        api_handler.send.return_value = product
        routes = ProductRoutes(api_handler, headers={"Stripe-Account": "acct_1"})

        await routes.retrieve("prod_123")

        _, _, kwargs = sent(api_handler)
        assert kwargs["headers"] == {"Stripe-Account": "acct_1"}

    @pytest.mark.asyncio
    async def test_no_group_headers(self, routes, api_handler, product):
        api_handler.send.return_value = product

        await routes.retrieve("prod_123")

        _, _, kwargs = sent(api_handler)
        assert kwargs["headers"] is None
