from __future__ import annotations

import pytest

from comment_analyzer.attribute_types import AttributeType
from comment_analyzer.settings import load_settings

_ENV = (
    "PERSPECTIVE_API_KEY",
    "PERSPECTIVE_DO_NOT_STORE",
    "PERSPECTIVE_TIMEOUT_SEC",
    "PERSPECTIVE_REQUESTED_ATTRIBUTES",
    "PERSPECTIVE_USER_AGENT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the test
    monkeypatch.chdir(tmp_path)


def test_defaults():
    s = load_settings()
    assert s.api_key == ""
    assert s.do_not_store is True
    assert s.timeout_sec == 10.0
    assert s.requested_attribute_types() == frozenset({AttributeType.TOXICITY})


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PERSPECTIVE_API_KEY", "abc")
    monkeypatch.setenv("PERSPECTIVE_DO_NOT_STORE", "false")
    monkeypatch.setenv("PERSPECTIVE_TIMEOUT_SEC", "2.5")
    monkeypatch.setenv("PERSPECTIVE_REQUESTED_ATTRIBUTES", "toxicity, spam ,")

    s = load_settings()
    cfg = s.to_client_config()
    assert cfg.api_key == "abc"
    assert cfg.do_not_store is False
    assert cfg.timeout_sec == 2.5
    assert s.requested_attribute_types() == frozenset({AttributeType.TOXICITY, AttributeType.SPAM})


def test_empty_timeout_means_no_timeout(monkeypatch):
    monkeypatch.setenv("PERSPECTIVE_TIMEOUT_SEC", "")
    assert load_settings().timeout_sec is None


def test_unknown_requested_attribute(monkeypatch):
    monkeypatch.setenv("PERSPECTIVE_REQUESTED_ATTRIBUTES", "TOXICITY,SARCASM")
    with pytest.raises(ValueError, match="SARCASM"):
        load_settings().requested_attribute_types()
