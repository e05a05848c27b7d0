from __future__ import annotations

import pytest
from pydantic import ValidationError

from lwapi.config.settings import AppConfig


def test_defaults():
    cfg = AppConfig()
    assert cfg.account is None
    assert cfg.api_token is None
    assert cfg.org_access is False
    assert cfg.timeout_seconds == 60.0
    assert cfg.token_expiry_seconds == 3600
    assert cfg.max_search_window_days == 7
    assert cfg.max_search_history_days == 92


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("LW_ACCOUNT", "acme")
    monkeypatch.setenv("LW_API_KEY", "ACME_ABCDEF")
    monkeypatch.setenv("LW_ORG_ACCESS", "true")
    monkeypatch.setenv("LW_MAX_SEARCH_WINDOW_DAYS", "3")

    cfg = AppConfig()

    assert cfg.account == "acme"
    assert cfg.api_key == "ACME_ABCDEF"
    assert cfg.org_access is True
    assert cfg.max_search_window_days == 3


def test_explicit_values_win_over_env(monkeypatch):
    monkeypatch.setenv("LW_ACCOUNT", "from-env")
    assert AppConfig(account="explicit").account == "explicit"


def test_window_larger_than_history_is_rejected():
    with pytest.raises(ValidationError, match="window size cannot be greater than max history"):
        AppConfig(max_search_window_days=10, max_search_history_days=5)


def test_window_equal_to_history_is_allowed():
    cfg = AppConfig(max_search_window_days=5, max_search_history_days=5)
    assert cfg.max_search_window_days == cfg.max_search_history_days


def test_unknown_field_is_rejected():
    with pytest.raises(ValidationError):
        AppConfig(region="us-east-1")


def test_non_positive_window_is_rejected():
    with pytest.raises(ValidationError):
        AppConfig(max_search_window_days=0)
