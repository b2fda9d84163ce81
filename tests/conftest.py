"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest
from loguru import logger

from llm_code_review.git import DiffSource


class FakeDiffSource(DiffSource):
    """DiffSource returning canned diffs and recording every call."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def get_diff(self, args):
        self.calls.append(list(args))
        response = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by the CLI so they don't outlive the test."""
    yield
    logger.remove()
    logger.disable("llm_code_review")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_diff():
    """Small unified diff."""
    return """diff --git a/app.py b/app.py
index 1234567..abcdefg 100644
--- a/app.py
+++ b/app.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""


@pytest.fixture
def make_source():
    """Factory for FakeDiffSource with a sequence of responses."""
    return FakeDiffSource
