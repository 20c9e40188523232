import random

import pytest


class FakeMCP:
    """Collects the functions registered with ``@mcp.tool()``."""

    def __init__(self):
        self.tools = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn
        return decorator


@pytest.fixture
def rng():
    """Seeded so generated identifiers are reproducible across runs."""
    return random.Random(20240601)


@pytest.fixture
def fake_mcp():
    return FakeMCP()


@pytest.fixture
def write_csv(tmp_path):
    def _write(content, name="data.csv", encoding="utf-8"):
        path = tmp_path / name
        path.write_bytes(content.encode(encoding))
        return path
    return _write
