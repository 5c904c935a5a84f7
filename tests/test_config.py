"""Tests for StripeKitConfig."""

import pytest

from stripekit import StripeKitConfig
from stripekit.exceptions import StripeConfigError


class TestStripeKitConfig:
    """Tests for StripeKitConfig validation."""

    def test_defaults(self):
        """Test default configuration values."""
        config = StripeKitConfig(api_key="sk_test_123")
        assert config.api_base == "https://api.stripe.com"
        assert config.api_version == "v1"
        assert config.stripe_version is None
        assert config.stripe_account is None
        assert config.timeout == 30.0
        assert config.max_retries == 3
        assert config.verify_ssl is True

    def test_valid_test_key(self):
        config = StripeKitConfig(api_key="sk_test_123456789")
        assert config.is_test_mode is True
        assert config.is_live_mode is False

    def test_valid_live_key(self):
        config = StripeKitConfig(api_key="sk_live_123456789")
        assert config.is_test_mode is False
        assert config.is_live_mode is True

    def test_valid_restricted_key(self):
        config = StripeKitConfig(api_key="rk_test_123456789")
        assert config.is_test_mode is True

    def test_empty_api_key_raises(self):
        with pytest.raises(StripeConfigError, match="api_key is required"):
            StripeKitConfig(api_key="")

    def test_invalid_api_key_raises(self):
        with pytest.raises(StripeConfigError, match="must be a valid Stripe"):
            StripeKitConfig(api_key="pk_test_123")

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            StripeKitConfig(api_key="invalid_key_123")

    def test_removes_trailing_slash(self):
        config = StripeKitConfig(api_key="sk_test_123", api_base="http://localhost:12111/")
        assert config.api_base == "http://localhost:12111"

    def test_negative_timeout_raises(self):
        with pytest.raises(StripeConfigError, match="timeout must be positive"):
            StripeKitConfig(api_key="sk_test_123", timeout=-1)

    def test_negative_retries_raises(self):
        with pytest.raises(StripeConfigError, match="max_retries must be non-negative"):
            StripeKitConfig(api_key="sk_test_123", max_retries=-1)

    def test_retry_wait_bounds(self):
        with pytest.raises(StripeConfigError, match="retry_max_wait must be >= retry_min_wait"):
            StripeKitConfig(api_key="sk_test_123", retry_min_wait=5, retry_max_wait=1)


class TestFromEnv:
    """Tests for StripeKitConfig.from_env."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
        monkeypatch.setenv("STRIPE_VERSION", "2024-06-20")
        monkeypatch.setenv("STRIPE_ACCOUNT", "acct_123")
        monkeypatch.setenv("STRIPE_TIMEOUT", "12.5")
        monkeypatch.setenv("STRIPE_MAX_RETRIES", "0")
        monkeypatch.delenv("STRIPE_API_BASE", raising=False)

        config = StripeKitConfig.from_env()

        assert config.api_key == "sk_test_env"
        assert config.api_base == "https://api.stripe.com"
        assert config.stripe_version == "2024-06-20"
        assert config.stripe_account == "acct_123"
        assert config.timeout == 12.5
        assert config.max_retries == 0

    def test_missing_key_raises(self, monkeypatch):
        monkeypatch.delenv("STRIPE_API_KEY", raising=False)
        with pytest.raises(StripeConfigError, match="api_key is required"):
            StripeKitConfig.from_env()

    def test_bad_number_raises(self, monkeypatch):
        monkeypatch.setenv("STRIPE_API_KEY", "sk_test_env")
        monkeypatch.setenv("STRIPE_TIMEOUT", "soon")
        with pytest.raises(StripeConfigError, match="invalid numeric setting"):
            StripeKitConfig.from_env()
