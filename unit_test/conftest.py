from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from main import create_app
from provider import ProviderReply
from settings import Settings


@pytest.fixture
def settings():
    return Settings(GEMINI_API_KEY="test-key", CORS_ALLOW_ORIGINS="*")


@pytest.fixture
def provider():
    mock_provider = Mock()
    mock_provider.send = AsyncMock(return_value=ProviderReply("Estou aqui com você."))
    return mock_provider


@pytest.fixture
def app(settings, provider):
    return create_app(settings, provider)


@pytest.fixture
def client(app):
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")
