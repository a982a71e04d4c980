from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from gocardless_pro.config import (
    Environment,
    GoCardlessClientConfig,
    PaginationConfig,
    TransportConfig,
)


def test_config_defaults_to_live_environment():
    cfg = GoCardlessClientConfig()
    assert cfg.resolved_base_url == "https://api.gocardless.com"


def test_config_base_url_overrides_environment():
    cfg = GoCardlessClientConfig(environment=Environment.SANDBOX, base_url="http://localhost:8080")
    assert cfg.resolved_base_url == "http://localhost:8080"
    assert GoCardlessClientConfig(environment=Environment.SANDBOX).resolved_base_url == (
        "https://api-sandbox.gocardless.com"
    )


def test_config_validate_rejects_empty_base_url():
    cfg = GoCardlessClientConfig(base_url="")
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_is_immutable():
    cfg = GoCardlessClientConfig()
    with pytest.raises(FrozenInstanceError):
        cfg.pagination = PaginationConfig(max_pages=10)


def test_config_repr_hides_credentials():
    cfg = GoCardlessClientConfig(api_key="AK1", api_secret="s3cret")
    assert "s3cret" not in repr(cfg)


@pytest.mark.parametrize(
    ("api_key", "api_secret"),
    [("AK1", None), (None, "secret")],
)
def test_config_requires_key_and_secret_together(api_key, api_secret):
    cfg = GoCardlessClientConfig(api_key=api_key, api_secret=api_secret)
    with pytest.raises(ValueError, match="api_key and api_secret"):
        cfg.validate()


@pytest.mark.parametrize(
    ("section", "field", "value"),
    [
        ("pagination", "max_pages", 0),
        ("transport", "timeout_connect_seconds", 0.0),
        ("transport", "timeout_read_seconds", 0.0),
        ("transport", "timeout_write_seconds", 0.0),
        ("transport", "timeout_pool_seconds", 0.0),
    ],
)
def test_config_validate_rejects_invalid_numeric_values(section, field, value):
    kwargs = {field: value}
    cfg = GoCardlessClientConfig(
        pagination=PaginationConfig(**kwargs) if section == "pagination" else PaginationConfig(),
        transport=TransportConfig(**kwargs) if section == "transport" else TransportConfig(),
    )
    with pytest.raises(ValueError):
        cfg.validate()


def test_config_validate_rejects_non_int_max_pages():
    cfg = GoCardlessClientConfig(pagination=PaginationConfig(max_pages=True))  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="pagination.max_pages must be int"):
        cfg.validate()
