import pytest

from gotify_relay.config import read_config
from gotify_relay.exceptions import StartupConfigError
from gotify_relay.main import run

REQUIRED = {"GOTIFY_URL": "http://gotify.test/message", "GOTIFY_TOKEN": "pytest-token"}


@pytest.mark.component
def test_read_config_defaults():
    config = read_config(REQUIRED)

    assert config.gotify_url == "http://gotify.test/message"
    assert config.gotify_token == "pytest-token"
    assert config.title == "Prometheus Alert"
    assert config.priority == 5
    assert config.host == "0.0.0.0"
    assert config.port == 9110
    assert config.log_level == "INFO"


@pytest.mark.component
def test_read_config_overrides():
    environ = {
        **REQUIRED,
        "GOTIFY_TITLE": "Staging",
        "GOTIFY_PRIORITY": "8",
        "RELAY_HOST": "127.0.0.1",
        "RELAY_PORT": "8080",
        "RELAY_LOG_LEVEL": "debug",
    }

    config = read_config(environ)

    assert (config.title, config.priority, config.host, config.port, config.log_level) == (
        "Staging",
        8,
        "127.0.0.1",
        8080,
        "DEBUG",
    )


@pytest.mark.component
@pytest.mark.parametrize(
    ("environ", "missing"),
    [
        ({}, "GOTIFY_URL and GOTIFY_TOKEN"),
        ({"GOTIFY_URL": "http://gotify.test/message"}, "GOTIFY_TOKEN"),
        ({"GOTIFY_URL": "", "GOTIFY_TOKEN": "pytest-token"}, "GOTIFY_URL"),
    ],
)
def test_read_config_requires_gotify_settings(environ, missing):
    with pytest.raises(StartupConfigError) as exc_info:
        read_config(environ)

    assert exc_info.value.message == f"{missing} must be set in environment variables"


@pytest.mark.component
@pytest.mark.parametrize(
    ("name", "value"), [("RELAY_PORT", "http"), ("GOTIFY_PRIORITY", "high"), ("RELAY_LOG_LEVEL", "loud")]
)
def test_read_config_rejects_invalid_values(name, value):
    with pytest.raises(StartupConfigError) as exc_info:
        read_config({**REQUIRED, name: value})

    assert name in exc_info.value.message


@pytest.mark.component
def test_run_exits_without_gotify_settings(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("GOTIFY_URL", raising=False)
    monkeypatch.delenv("GOTIFY_TOKEN", raising=False)
    monkeypatch.setattr("gotify_relay.main.uvicorn.run", lambda *args, **kwargs: pytest.fail("server started"))

    with pytest.raises(SystemExit) as exc_info:
        run()

    assert exc_info.value.code == 1


@pytest.mark.component
def test_run_serves_with_config(monkeypatch: pytest.MonkeyPatch):
    for name in ("RELAY_HOST", "RELAY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    for name, value in REQUIRED.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("RELAY_PORT", "9999")
    calls = []
    monkeypatch.setattr("gotify_relay.main.uvicorn.run", lambda app, **kwargs: calls.append((app, kwargs)))

    run()

    app, kwargs = calls[0]
    assert app.state.config.port == 9999
    assert kwargs == {"host": "0.0.0.0", "port": 9999, "log_level": "info"}
