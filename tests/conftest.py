import pytest
from fastapi.testclient import TestClient

from fakes import InMemoryStore, RecordingNotifier
from langbridge.api.friends.service import FriendshipService
from langbridge.api.preferences.store import InMemoryThemeBackend, ThemeStore
from langbridge.core.accesstoken import create_access_token
from langbridge.core.dependencies import get_friendship_service, get_theme_store
from main import app


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def service(store, notifier):
    return FriendshipService(store, notifier=notifier)


@pytest.fixture
def theme_store():
    return ThemeStore(InMemoryThemeBackend())


@pytest.fixture
def client(service, theme_store):
    app.dependency_overrides[get_friendship_service] = lambda: service
    app.dependency_overrides[get_theme_store] = lambda: theme_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth():
    def headers_for(user_id):
        token = create_access_token({"sub": str(user_id)})
        return {"Authorization": f"Bearer {token}"}

    return headers_for
