import os
import sys

# Ensure the repository root is importable so test modules can resolve the
# ``colorwalk`` package and the ``run`` module without ``PYTHONPATH`` tweaks.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

import pytest


@pytest.fixture(autouse=True)
def _keyword_classifier(monkeypatch):
    # Tests never hit the network unless they opt in explicitly
    monkeypatch.setenv("COLOR_WALK_CLASSIFIER", "keyword")
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.delenv("LLM_PROVIDER", raising=False)
    monkeypatch.delenv("LLM_BASE_URL", raising=False)
    monkeypatch.delenv("COLOR_WALK_AUTO_BREATH", raising=False)
