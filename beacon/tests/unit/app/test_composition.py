import logging

from beacon.adapters.event_repository_memory import InMemoryEventRepository
from beacon.adapters.event_rest import EventRestAdapter
from beacon.app.composition import build_app
from beacon.app.config import AppConfig


def test_without_url_uses_in_memory_repository(monkeypatch):
    monkeypatch.delenv("BEACON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BEACON_DEBUG", raising=False)

    app = build_app(AppConfig(debug_logging=True))

    assert isinstance(app.repository, InMemoryEventRepository)
    assert logging.getLogger().level == logging.DEBUG
    assert app.navigator.back_stack == ["CONCERT_PLANNER"]


def test_with_url_uses_rest_adapter(monkeypatch):
    monkeypatch.delenv("BEACON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BEACON_DEBUG", raising=False)

    app = build_app(AppConfig(api_base_url="http://api.local", api_key="k", retries=5))

    assert isinstance(app.repository, EventRestAdapter)
    assert app.repository.base_url == "http://api.local"
    assert app.repository.session.api_key == "k"
    assert app.repository.session.cfg.retries == 5
    assert logging.getLogger().level == logging.INFO


def test_explicit_repository_is_shared_with_editor():
    repo = InMemoryEventRepository()

    app = build_app(AppConfig(), repository=repo)

    assert app.repository is repo
    app.artist_creator.launch_creator(app.navigator, on_save=lambda artist: None)
    assert app.navigator.current_route == "CREATE_ARTIST"


def test_build_app_installs_root_handler(monkeypatch):
    monkeypatch.delenv("BEACON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BEACON_DEBUG", raising=False)
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])

    build_app(AppConfig())

    assert len(root.handlers) == 1
    assert root.level == logging.INFO
