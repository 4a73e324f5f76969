from __future__ import annotations

import pytest

from repo_lens.infrastructure.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PORT", "HOST", "LOG_LEVEL", "ANALYZER", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 3000
    assert settings.analyzer == ""
    assert settings.github_token is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ANALYZER", "metrics:analyze_repository")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_secret")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.analyzer == "metrics:analyze_repository"
    assert settings.github_token is not None
    assert settings.github_token.get_secret_value() == "ghp_secret"
