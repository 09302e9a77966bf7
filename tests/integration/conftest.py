"""Integration-test fixtures isolating CLI runs from the host environment."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_safetext_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove `SAFETEXT_*` variables so CLI defaults are deterministic."""

    for key in ("SAFETEXT_PASSES", "SAFETEXT_USE_ENTITIES", "SAFETEXT_REJECT_UTF8"):
        monkeypatch.delenv(key, raising=False)
