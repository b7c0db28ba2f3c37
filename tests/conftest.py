import pytest

from MarkDoc.config import ENV_PREFIX


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep MARKDOC_* variables from the outer environment out of tests."""
    for name in ("AUTHOR", "TITLE"):
        monkeypatch.delenv(f"{ENV_PREFIX}{name}", raising=False)
