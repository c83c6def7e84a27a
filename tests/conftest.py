"""Shared fixtures: backend clients wired to an in-memory httpx transport."""

import asyncio

import httpx
import pytest

from services.dispatch_client import DispatchClient
from services.summarization_client import SummarizationClient
from tests.fakes import FakeBackend, TEST_BASE_URL, session_controller


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def http_client(fake_backend):
    client = httpx.AsyncClient(transport=fake_backend.transport())
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def summarization_client(fake_backend):
    client = SummarizationClient(base_url=TEST_BASE_URL, transport=fake_backend.transport())
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def dispatch_client(fake_backend):
    client = DispatchClient(base_url=TEST_BASE_URL, transport=fake_backend.transport())
    yield client
    asyncio.run(client.aclose())


@pytest.fixture
def controller(fake_backend):
    with session_controller(fake_backend) as controller:
        yield controller
