from __future__ import annotations

import pytest

from turbot_provider.config import (
    MissingConfigurationError,
    read_env_vars,
    require_env_var,
    require_env_vars,
)


def test_require_env_vars_returns_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "value")

    result = require_env_vars(["EXAMPLE_VAR"])

    assert result["EXAMPLE_VAR"] == "value"


def test_require_env_vars_raises_when_any_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PRESENT_VAR", "value")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    with pytest.raises(MissingConfigurationError) as exc:
        require_env_vars(["PRESENT_VAR", "MISSING_VAR"])

    assert "MISSING_VAR" in str(exc.value)
    assert "PRESENT_VAR" not in str(exc.value)


def test_require_env_var_handles_blank_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "   ")

    with pytest.raises(MissingConfigurationError):
        require_env_var("EXAMPLE_VAR")


def test_read_env_vars_skips_unset_and_strips(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PADDED_VAR", "  padded  ")
    monkeypatch.delenv("UNSET_VAR", raising=False)

    assert read_env_vars(["PADDED_VAR", "UNSET_VAR"]) == {"PADDED_VAR": "padded"}
