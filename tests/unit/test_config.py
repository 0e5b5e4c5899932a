from __future__ import annotations

import dataclasses

import pytest

from victorops import AsyncVictorOps, VictorOps
from victorops.config import DEFAULT_BASE_URL, ClientConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("VICTOROPS_API_ID", "VICTOROPS_API_KEY", "VICTOROPS_BASE_URL", "VICTOROPS_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_from_env_reads_credentials_and_defaults(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("VICTOROPS_API_ID", " test-api-id ")
    clean_env.setenv("VICTOROPS_API_KEY", "test-api-key")

    cfg = ClientConfig.from_env()

    assert cfg.api_id == "test-api-id"
    assert cfg.api_key == "test-api-key"
    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout_seconds == 30.0


def test_from_env_reads_base_url_and_timeout(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("VICTOROPS_API_ID", "id")
    clean_env.setenv("VICTOROPS_API_KEY", "key")
    clean_env.setenv("VICTOROPS_BASE_URL", "http://localhost:8080")
    clean_env.setenv("VICTOROPS_TIMEOUT_MS", "45000")

    cfg = ClientConfig.from_env()

    assert cfg.base_url == "http://localhost:8080"
    assert cfg.timeout_seconds == 45.0


@pytest.mark.parametrize("raw", ["", "abc", "0", "-5"])
def test_unusable_timeout_falls_back_to_default(clean_env: pytest.MonkeyPatch, raw: str) -> None:
    clean_env.setenv("VICTOROPS_API_ID", "id")
    clean_env.setenv("VICTOROPS_API_KEY", "key")
    clean_env.setenv("VICTOROPS_TIMEOUT_MS", raw)

    assert ClientConfig.from_env().timeout_seconds == 30.0


@pytest.mark.parametrize("present", ["VICTOROPS_API_ID", "VICTOROPS_API_KEY"])
def test_missing_credentials_are_rejected(clean_env: pytest.MonkeyPatch, present: str) -> None:
    clean_env.setenv(present, "value")

    with pytest.raises(ValueError):
        ClientConfig.from_env()


def test_config_is_frozen_and_masks_key() -> None:
    cfg = ClientConfig(api_id="test-api-id", api_key="super-secret")

    assert "super-secret" not in repr(cfg)
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.api_key = "other"  # type: ignore[misc]


def test_clients_build_from_env(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("VICTOROPS_API_ID", "id")
    clean_env.setenv("VICTOROPS_API_KEY", "key")
    clean_env.setenv("VICTOROPS_BASE_URL", "https://example.test")

    client = VictorOps.from_env()
    try:
        assert str(client) == "VictorOps Client: publicBaseURL: https://example.test"
    finally:
        client.close()


@pytest.mark.asyncio
async def test_async_client_from_config() -> None:
    cfg = ClientConfig(api_id="id", api_key="key", timeout_seconds=5.0)

    client = AsyncVictorOps.from_config(cfg)
    try:
        assert client.client_config == cfg
        assert str(client) == f"VictorOps Client: publicBaseURL: {DEFAULT_BASE_URL}"
    finally:
        await client.close()
