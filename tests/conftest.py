import os

# Pas de Redis en tests: le lifespan ne tente pas d'initialiser fastapi-limiter
os.environ.setdefault("DISABLE_FASTAPI_LIMITER_INIT_FOR_TESTS", "1")

import pytest
from typing import Generator, List, Dict, Any, Optional
from fastapi.testclient import TestClient

from storefront.app_setup.factory import create_app
from storefront.config import Settings

FAKE_SESSION_URL = "https://checkout.stripe.test/c/pay/cs_test_123"

# Marquage automatique selon le dossier
def pytest_collection_modifyitems(config, items):
    for item in items:
        nodeid = item.nodeid.replace("\\", "/")
        if "/unit/" in nodeid:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in nodeid:
            item.add_marker(pytest.mark.integration)
        elif "/functional/" in nodeid:
            item.add_marker(pytest.mark.functional)


class FakeGateway:
    """Passerelle en mémoire: enregistre les appels, renvoie une URL ou lève `error`."""

    def __init__(self, url: str = FAKE_SESSION_URL, error: Optional[Exception] = None):
        self.url = url
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def create_checkout_session(self, *, line_items, success_url, cancel_url):
        self.calls.append({"line_items": line_items, "success_url": success_url, "cancel_url": cancel_url})
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture
def settings() -> Settings:
    return Settings(stripe_secret_key="sk_test_dummy")

@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()

@pytest.fixture
def app(settings, gateway):
    return create_app(settings, gateway=gateway)

@pytest.fixture()
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as c:
        yield c

@pytest.fixture
def make_gateway():
    """Fabrique de FakeGateway pour les tests qui ont besoin d'un comportement précis."""
    return FakeGateway
