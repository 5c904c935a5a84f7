"""
StripeKit client configuration.

Standalone configuration with no app-specific dependencies.
"""

import os
from dataclasses import dataclass

from .exceptions import StripeConfigError

DEFAULT_API_BASE = "https://api.stripe.com"
DEFAULT_API_VERSION = "v1"


@dataclass
class StripeKitConfig:
    """Configuration for the StripeKit client.

    Attributes:
        api_key: Stripe secret key (sk_live_* or sk_test_*) or restricted key (rk_*)
        api_base: Base URL of the Stripe API (default: https://api.stripe.com)
        api_version: Path prefix for every route (default: "v1")
        stripe_version: Pinned API version sent as the Stripe-Version header
        stripe_account: Connected account ID sent as the Stripe-Account header
        timeout: Request timeout in seconds (default: 30.0)
        max_retries: Retry attempts for network failures (default: 3)
        retry_min_wait: Minimum wait between retries in seconds (default: 1)
        retry_max_wait: Maximum wait between retries in seconds (default: 10)
        verify_ssl: Whether to verify SSL certificates (default: True)

    Example:
        ```python
        config = StripeKitConfig(
            api_key="sk_test_...",
            stripe_version="2024-06-20",
            timeout=10.0,
        )
        ```
    """

    api_key: str
    api_base: str = DEFAULT_API_BASE
    api_version: str = DEFAULT_API_VERSION
    stripe_version: str | None = None
    stripe_account: str | None = None
    timeout: float = 30.0
    max_retries: int = 3
    retry_min_wait: int = 1
    retry_max_wait: int = 10
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.api_key:
            raise StripeConfigError("api_key is required")

        if not self.api_key.startswith(("sk_live_", "sk_test_", "rk_live_", "rk_test_")):
            raise StripeConfigError(
                "api_key must be a valid Stripe secret key (sk_*) or restricted key (rk_*)"
            )

        self.api_base = self.api_base.rstrip("/")
        self.api_version = self.api_version.strip("/")

        if self.timeout <= 0:
            raise StripeConfigError("timeout must be positive")

        if self.max_retries < 0:
            raise StripeConfigError("max_retries must be non-negative")

        if self.retry_min_wait < 0:
            raise StripeConfigError("retry_min_wait must be non-negative")

        if self.retry_max_wait < self.retry_min_wait:
            raise StripeConfigError("retry_max_wait must be >= retry_min_wait")

    @classmethod
    def from_env(cls) -> "StripeKitConfig":
        """Build a configuration from STRIPE_* environment variables."""
        try:
            timeout = float(os.getenv("STRIPE_TIMEOUT", "30.0"))
            max_retries = int(os.getenv("STRIPE_MAX_RETRIES", "3"))
        except ValueError as e:
            raise StripeConfigError(f"invalid numeric setting: {e}", original_error=e)

        return cls(
            api_key=os.getenv("STRIPE_API_KEY", ""),
            api_base=os.getenv("STRIPE_API_BASE", DEFAULT_API_BASE),
            stripe_version=os.getenv("STRIPE_VERSION") or None,
            stripe_account=os.getenv("STRIPE_ACCOUNT") or None,
            timeout=timeout,
            max_retries=max_retries,
        )

    @property
    def is_test_mode(self) -> bool:
        """Check if using test mode API key."""
        return "_test_" in self.api_key

    @property
    def is_live_mode(self) -> bool:
        """Check if using live mode API key."""
        return "_live_" in self.api_key
