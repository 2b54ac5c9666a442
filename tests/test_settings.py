"""Tests for environment settings validation."""

from __future__ import annotations

import pytest

from semantic_query.config.settings import Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CONTRACT_PATH", "CONTRACT_CACHE_TTL_S", "RESOLUTION_POLICY", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)
    assert settings.contract_path == "datacontract.yml"
    assert settings.contract_cache_ttl_s == 3600.0
    assert settings.resolution_policy == "first"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CONTRACT_PATH", "/srv/contract.yml")
    monkeypatch.setenv("CONTRACT_CACHE_TTL_S", "60")
    monkeypatch.setenv("RESOLUTION_POLICY", " Specific ")

    settings = load_settings()
    assert settings.contract_path == "/srv/contract.yml"
    assert settings.contract_cache_ttl_s == 60.0
    assert settings.resolution_policy == "specific"


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CONTRACT_CACHE_TTL_S", "0"),
        ("CONTRACT_CACHE_TTL_S", "-5"),
        ("RESOLUTION_POLICY", "longest"),
    ],
)
def test_invalid_environment_is_rejected(
        monkeypatch: pytest.MonkeyPatch,
        name: str,
        value: str,
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError, match="Invalid environment configuration"):
        load_settings()
