"""
Generic request builder shared by every route group.

A route group declares its operations as Endpoint values and implements
typed wrappers that fill a parameter schema and call _request(). Encoding,
placement of the encoded string (query vs body) and dispatch live here.
"""

from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import structlog
from pydantic import BaseModel

from ..encoding import encode
from ..params import StripeParams
from ..transport import StripeAPIHandler

logger = structlog.get_logger(__name__)

BODY_METHODS = frozenset({"POST"})


@dataclass(frozen=True)
class Endpoint:
    """One remote operation: HTTP verb, path template and response type.

    `path` is relative to the API version prefix and may embed identifiers,
    e.g. "products/{id}".
    """

    method: str
    path: str
    response_model: type[BaseModel]

    def format_path(self, **path_params: str) -> str:
        """Substitute path identifiers, percent-encoding each one."""
        return self.path.format(
            **{name: quote(str(value), safe="") for name, value in path_params.items()}
        )

    @property
    def sends_body(self) -> bool:
        return self.method in BODY_METHODS


class StripeAPIRoute:
    """Base class for resource route groups.

    Attributes:
        api_handler: Transport used for every request
        headers: Extra headers sent with each request of this group
            (e.g. {"Stripe-Account": "acct_..."})
    """

    def __init__(self, api_handler: StripeAPIHandler, headers: dict[str, str] | None = None):
        self.api_handler = api_handler
        self.headers: dict[str, str] = dict(headers or {})

    async def _request(
        self,
        endpoint: Endpoint,
        params: StripeParams | Mapping[str, Any] | None = None,
        **path_params: str,
    ) -> Any:
        """Encode params, place them per the endpoint's verb and dispatch."""
        if isinstance(params, StripeParams):
            value_bag: Mapping[str, Any] = params.to_params()
        else:
            value_bag = params or {}

        encoded = encode(value_bag)
        path = endpoint.format_path(**path_params)

        query = body = None
        if encoded:
            if endpoint.sends_body:
                body = encoded
            else:
                query = encoded

        logger.debug("stripe_route_dispatch", method=endpoint.method, path=path)
        return await self.api_handler.send(
            endpoint.method,
            path,
            query=query,
            body=body,
            headers=self.headers or None,
            response_model=endpoint.response_model,
        )

    async def _auto_paging(
        self, endpoint: Endpoint, params: Mapping[str, Any] | None = None
    ) -> AsyncIterator[Any]:
        """Yield every object of a list endpoint, fetching pages as needed.

        Pages forward with `starting_after`, or backward with `ending_before`
        when the caller started from an `ending_before` cursor.
        """
        filters = dict(params or {})
        backwards = "ending_before" in filters

        while True:
            page = await self._request(endpoint, filters)
            items = list(reversed(page.data)) if backwards else page.data
            for item in items:
                yield item

            if not page.has_more or not page.data:
                return

            if backwards:
                filters["ending_before"] = page.data[0].id
            else:
                filters["starting_after"] = page.data[-1].id
