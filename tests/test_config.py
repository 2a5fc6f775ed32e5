"""Tests for settings loading and gateway wiring."""

import logging

import pytest

from dialer import bootstrap
from dialer import config as dialer_config
from dialer.bootstrap import build_gateway, open_gateway
from dialer.config import LOG_FORMAT, Settings, configure_logging, load_env
from dialer.domain import Capability
from dialer.infrastructure import RecordingNavigator, StaticCapabilities

_ENV_VARS = (
    "DIALER_BACKEND",
    "NEO4J_URI",
    "NEO4J_USER",
    "NEO4J_PASSWORD",
    "DIALER_DEFAULT_REGION",
    "DIALER_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        # registers the original value for teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setattr(dialer_config, "_REPO_ROOT", tmp_path / "no-repo")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_defaults(clean_env):
    settings = Settings.from_env()
    assert settings == Settings()
    assert settings.backend == "memory"
    assert settings.default_region is None


def test_from_env_reads_variables(clean_env, monkeypatch):
    monkeypatch.setenv("DIALER_BACKEND", " Neo4j ")
    monkeypatch.setenv("NEO4J_URI", "bolt://db:7687")
    monkeypatch.setenv("DIALER_DEFAULT_REGION", "us")
    monkeypatch.setenv("DIALER_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings.backend == "neo4j"
    assert settings.neo4j_uri == "bolt://db:7687"
    assert settings.default_region == "US"
    assert settings.log_level == "DEBUG"


def test_dotenv_file_in_cwd_is_loaded(clean_env, monkeypatch):
    env_file = clean_env / ".env"
    env_file.write_text("DIALER_DEFAULT_REGION=IT\n")
    assert load_env() == env_file
    assert Settings.from_env().default_region == "IT"


def test_unknown_backend_rejected(clean_env, monkeypatch):
    monkeypatch.setenv("DIALER_BACKEND", "sqlite")
    with pytest.raises(ValueError):
        Settings.from_env()


def test_configure_logging_uses_level_and_format(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(log_level="WARNING"))
    assert calls == [{"format": LOG_FORMAT, "level": "WARNING"}]


@pytest.mark.asyncio
async def test_build_memory_gateway():
    navigator = RecordingNavigator()
    gateway = build_gateway(
        Settings(default_region="US"),
        navigator=navigator,
        capabilities=StaticCapabilities([Capability.MODIFY_DIRECTORY]),
    )
    assert await gateway.list_contacts() == []
    assert await gateway.get_is_contact_blocked(1) is False
    gateway.open_contact_view(1, ui_surface=True)
    assert navigator.last.new_task is False


class _Session:
    def __init__(self, driver: "_Driver") -> None:
        self._driver = driver

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def run(self, query, **params):
        self._driver.queries.append(query)
        return iter([])


class _Driver:
    def __init__(self) -> None:
        self.queries: list[str] = []
        self.closed = False

    def session(self):
        return _Session(self)

    def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_build_neo4j_gateway_with_given_driver():
    driver = _Driver()
    gateway = build_gateway(
        Settings(backend="neo4j"),
        navigator=RecordingNavigator(),
        capabilities=StaticCapabilities(),
        driver=driver,
    )
    assert len(driver.queries) == 2  # constraints
    assert await gateway.list_contacts() == []
    assert driver.closed is False


def test_build_neo4j_gateway_requires_driver():
    with pytest.raises(ValueError):
        build_gateway(
            Settings(backend="neo4j"),
            navigator=RecordingNavigator(),
            capabilities=StaticCapabilities(),
        )


@pytest.mark.asyncio
async def test_open_gateway_closes_driver_on_exit(monkeypatch):
    driver = _Driver()
    monkeypatch.setattr(bootstrap, "get_driver", lambda settings: driver)
    with open_gateway(
        Settings(backend="neo4j"),
        navigator=RecordingNavigator(),
        capabilities=StaticCapabilities(),
    ) as gateway:
        assert await gateway.list_contacts() == []
        assert driver.closed is False
    assert driver.closed is True


def test_open_gateway_closes_driver_on_error(monkeypatch):
    driver = _Driver()
    monkeypatch.setattr(bootstrap, "get_driver", lambda settings: driver)
    with pytest.raises(RuntimeError):
        with open_gateway(
            Settings(backend="neo4j"),
            navigator=RecordingNavigator(),
            capabilities=StaticCapabilities(),
        ):
            raise RuntimeError("boom")
    assert driver.closed is True


def test_open_gateway_memory_backend_creates_no_driver(monkeypatch):
    def _no_driver(settings):
        raise AssertionError("memory backend must not connect")

    monkeypatch.setattr(bootstrap, "get_driver", _no_driver)
    navigator = RecordingNavigator()
    with open_gateway(
        Settings(), navigator=navigator, capabilities=StaticCapabilities()
    ) as gateway:
        gateway.open_edit_contact_view(3)
    assert navigator.last.target.endswith("/contacts/3")
