from typing import Callable

import httpx
import pytest

from reqlayer.clients.http_client import TransportAdapter
from reqlayer.services.dispatch.dispatcher import RequestDispatcher
from reqlayer.services.orchestration.orchestrator import AsyncOrchestrator
from tests.fakes.fake_notifier import FakeNotifier

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def make_adapter(notifier: FakeNotifier):
    def _make(handler: Handler, token: str | None = None) -> TransportAdapter:
        return TransportAdapter.configure(
            "https://api.example.com",
            10,
            lambda: token,
            notifier,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def make_dispatcher(make_adapter, notifier: FakeNotifier):
    def _make(handler: Handler) -> RequestDispatcher:
        return RequestDispatcher(make_adapter(handler), notifier)

    return _make


@pytest.fixture
def make_orchestrator(make_dispatcher, notifier: FakeNotifier):
    def _make(handler: Handler) -> AsyncOrchestrator:
        return AsyncOrchestrator(make_dispatcher(handler), notifier)

    return _make
