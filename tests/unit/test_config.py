"""Unit tests for strseq.config."""

import pytest

from strseq import config


def test_policy_name_defaults_to_lenient(monkeypatch: pytest.MonkeyPatch):
    """With STRSEQ_COERCION_POLICY unset the lenient policy is selected."""
    monkeypatch.delenv(config.COERCION_POLICY_ENV, raising=False)
    assert config.get_coercion_policy_name() == "lenient"


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_policy_name_uses_default(monkeypatch: pytest.MonkeyPatch, value):
    """A blank value counts as unset."""
    monkeypatch.setenv(config.COERCION_POLICY_ENV, value)
    assert config.get_coercion_policy_name() == config.DEFAULT_COERCION_POLICY


def test_policy_name_from_environment(monkeypatch: pytest.MonkeyPatch):
    """The environment value is returned stripped but otherwise untouched."""
    monkeypatch.setenv(config.COERCION_POLICY_ENV, " Strict ")
    assert config.get_coercion_policy_name() == "Strict"
