from fastapi.testclient import TestClient

from bookstore.config import Settings
from bookstore import main
from bookstore.main import create_app


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "127.0.0.1"
    assert settings.id_strategy == "length"


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("BOOKSTORE_PORT", "8080")
    monkeypatch.setenv("BOOKSTORE_ID_STRATEGY", "next")
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.id_strategy == "next"


def test_app_uses_configured_id_strategy():
    app = create_app(settings=Settings(_env_file=None, id_strategy="next"))
    with TestClient(app) as client:
        assert client.delete("/api/books/1").status_code == 200
        created = client.post("/api/books", json={"title": "New"}).json()
    assert created["id"] == 4


def test_create_app_leaves_logging_alone(monkeypatch):
    calls = []
    monkeypatch.setattr(main.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    create_app(settings=Settings(_env_file=None))
    assert calls == []


def test_run_configures_logging_and_serves(monkeypatch):
    calls = []
    served = {}
    monkeypatch.setattr(main.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kwargs: served.update(kwargs))
    main.run()
    assert calls == [{"level": main.get_settings().log_level.upper()}]
    assert served["port"] == main.get_settings().port
