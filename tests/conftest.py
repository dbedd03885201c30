"""Pytest fixtures for all tests."""

import pytest
from httpx import AsyncClient, ASGITransport

from ulidkit.api.app import create_app
from ulidkit.config import Config, GeneratorConfig
from ulidkit.core.generator import MonotonicGenerator


class FakeClock:
    """Settable millisecond clock."""

    def __init__(self, ms=1469918176385):
        self.ms = ms

    def __call__(self):
        return self.ms


def fixed_bytes(value):
    """Random source that always returns `value` repeated."""
    def source(n):
        return bytes([value]) * n
    return source


@pytest.fixture
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def generator(clock):
    """Create a generator with zero randomness and a fake clock."""
    return MonotonicGenerator(random_bytes=fixed_bytes(0x00), clock=clock)


@pytest.fixture
def app_config():
    """Create test app config."""
    return Config(generator=GeneratorConfig(max_batch=10))


@pytest.fixture
async def app(app_config):
    """Create test FastAPI app with its own generator."""
    return create_app(app_config, generator=MonotonicGenerator())


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
