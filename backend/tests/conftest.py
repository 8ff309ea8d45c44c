"""Root conftest — shared test configuration."""

import os

# Tests never load mock responses from the developer's environment
os.environ.pop("MOCK_RESPONSES_FILE", None)
os.environ.setdefault("LOG_FORMAT", "text")
