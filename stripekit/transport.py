"""
HTTP transport for the Stripe API.

StripeAPIHandler owns the httpx client, authentication headers, network
retries and error mapping. Route groups hand it an already-encoded query
string or body and get back a decoded response.
"""

import uuid
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import StripeKitConfig
from .exceptions import (
    APIConnectionError,
    APIError,
    APIStatusError,
    AuthenticationError,
    CardError,
    IdempotencyError,
    InvalidRequestError,
    PermissionDeniedError,
    RateLimitError,
    ResourceNotFoundError,
)
from .version import __version__

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

_STATUS_ERRORS: dict[int, type[APIStatusError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    402: CardError,
    403: PermissionDeniedError,
    404: ResourceNotFoundError,
    409: IdempotencyError,
    429: RateLimitError,
}


class StripeAPIHandler:
    """
    Async transport for Stripe REST calls.

    Example:
        ```python
        config = StripeKitConfig(api_key="sk_test_...")
        async with StripeAPIHandler(config) as handler:
            product = await handler.send(
                "POST",
                "products",
                body="name=T-shirt",
                response_model=Product,
            )
        ```
    """

    def __init__(self, config: StripeKitConfig) -> None:
        """
        Initialize the handler.

        Args:
            config: Client configuration
        """
        self.config = config
        self._client: httpx.AsyncClient | None = None
        logger.info(
            "stripe_api_handler_initialized",
            api_base=config.api_base,
            is_test_mode=config.is_test_mode,
        )

    async def __aenter__(self) -> "StripeAPIHandler":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.api_base,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        return self._client

    def _get_headers(self, method: str, headers: dict[str, str] | None = None) -> dict[str, str]:
        """
        Build request headers.

        Per-call headers override the defaults. POST requests get an
        Idempotency-Key when retries are enabled so a retried write is
        never applied twice.
        """
        result = {
            "Authorization": f"Bearer {self.config.api_key}",
            "Content-Type": FORM_CONTENT_TYPE,
            "User-Agent": f"stripekit-python/{__version__}",
        }
        if self.config.stripe_version:
            result["Stripe-Version"] = self.config.stripe_version
        if self.config.stripe_account:
            result["Stripe-Account"] = self.config.stripe_account
        if method == "POST" and self.config.max_retries > 0:
            result["Idempotency-Key"] = str(uuid.uuid4())
        if headers:
            result.update(headers)
        return result

    def _build_url(self, path: str, query: str | None) -> str:
        url = f"/{self.config.api_version}/{path.lstrip('/')}"
        if query:
            url = f"{url}?{query}"
        return url

    def _handle_error(self, response: httpx.Response) -> None:
        """
        Map a non-2xx response onto the TransportError tree.

        Raises:
            InvalidRequestError: For 400 responses
            AuthenticationError: For 401 responses
            CardError: For 402 responses
            PermissionDeniedError: For 403 responses
            ResourceNotFoundError: For 404 responses
            IdempotencyError: For 409 responses
            RateLimitError: For 429 responses
            APIError: For anything else
        """
        status_code = response.status_code
        request_id = response.headers.get("Request-Id")

        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict):
            message = error.get("message") or response.text
            error_type = error.get("type")
            code = error.get("code")
            param = error.get("param")
        else:
            message = response.text or f"HTTP {status_code}"
            error_type = code = param = None

        logger.warning(
            "stripe_request_failed",
            status_code=status_code,
            error_type=error_type,
            code=code,
            request_id=request_id,
        )

        error_class = _STATUS_ERRORS.get(status_code, APIError)
        raise error_class(
            message,
            status_code=status_code,
            error_type=error_type,
            code=code,
            param=param,
            request_id=request_id,
            body=body,
        )

    async def close(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("stripe_api_handler_closed")

    async def send(
        self,
        method: str,
        path: str,
        query: str | None = None,
        body: str | None = None,
        headers: dict[str, str] | None = None,
        response_model: type[M] | None = None,
    ) -> M | dict[str, Any]:
        """
        Perform one API request.

        Args:
            method: HTTP verb
            path: Path relative to the API version prefix (e.g. "products/prod_123")
            query: Already-encoded query string
            body: Already-encoded form body
            headers: Extra headers, overriding the defaults
            response_model: pydantic model to validate the JSON response into

        Returns:
            The decoded response model, or the raw JSON dict if no model is given

        Raises:
            APIConnectionError: If the API cannot be reached after retries
            APIStatusError: For any non-2xx response (see _handle_error)
            APIError: If a 2xx response body cannot be decoded
        """
        method = method.upper()
        client = self._get_client()
        url = self._build_url(path, query)
        request_headers = self._get_headers(method, headers)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(self.config.max_retries + 1),
            wait=wait_exponential(
                multiplier=1,
                min=self.config.retry_min_wait,
                max=self.config.retry_max_wait,
            ),
            retry=retry_if_exception_type(httpx.RequestError),
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    response = await client.request(
                        method,
                        url,
                        content=body,
                        headers=request_headers,
                    )
        except httpx.RequestError as e:
            logger.error("stripe_request_connection_failed", method=method, path=path, error=str(e))
            raise APIConnectionError(f"Stripe API unavailable: {e}", original_error=e)

        if not 200 <= response.status_code < 300:
            self._handle_error(response)

        request_id = response.headers.get("Request-Id")
        try:
            data = response.json()
        except ValueError as e:
            raise APIError(
                "Malformed JSON in Stripe response",
                status_code=response.status_code,
                request_id=request_id,
                body=response.text,
                original_error=e,
            )

        logger.info(
            "stripe_request_completed",
            method=method,
            path=path,
            status_code=response.status_code,
            request_id=request_id,
        )

        if response_model is None:
            return data

        try:
            return response_model.model_validate(data)
        except PydanticValidationError as e:
            raise APIError(
                f"Unexpected response shape for {response_model.__name__}",
                status_code=response.status_code,
                request_id=request_id,
                body=data,
                original_error=e,
            )
