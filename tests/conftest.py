from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _clear_distform_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("DISTFORM_"):
            monkeypatch.delenv(name)
