"""Global pytest configuration."""

import os

# Tests always use the deterministic mock generator, set before any imports
os.environ.setdefault("USE_MOCK_GENERATOR", "true")
os.environ.setdefault("OPENAI_API_KEY", "")
