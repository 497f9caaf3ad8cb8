import pytest
from fastapi.testclient import TestClient

from apps.bfhl import create_app
from lib.config.service_loader import ServiceConfig

from tests.fakes import EMAIL, FakeGemini


@pytest.fixture
def config():
    return ServiceConfig(official_email=EMAIL, gemini_api_key="test-key")


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def client(config, gemini):
    app = create_app(config, forwarder=gemini.forwarder(config))
    with TestClient(app) as c:
        yield c
