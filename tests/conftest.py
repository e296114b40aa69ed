"""Root test configuration: isolate tests from MDHTML_* env vars and a local config.yaml"""

import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Strip MDHTML_* env vars and run from an empty working directory."""
    for name in list(os.environ):
        if name.startswith("MDHTML_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
