import logging

import pytest

from trip_sorter import monitoring
from trip_sorter.config import (
    AppConfig,
    CardsConfig,
    ObservabilityConfig,
    RenderingConfig,
    get_config,
    reset_config,
)
from trip_sorter.domain.errors import ConfigurationError


@pytest.fixture(autouse=True)
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_defaults():
    config = AppConfig()

    assert config.rendering.default_renderer == "text"
    assert config.rendering.taxi_service == "Yandex.Taxi"
    assert config.cards.cards_path == config.project_root / "data" / "cards.json"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TSR_RENDER_DEFAULT_RENDERER", "html")
    monkeypatch.setenv("TSR_CARDS_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TSR_CARDS_CARDS_FILE", "trip.json")

    config = get_config()

    assert config.rendering.default_renderer == "html"
    assert config.cards.cards_path == tmp_path / "trip.json"


def test_invalid_renderer_rejected(monkeypatch):
    monkeypatch.setenv("TSR_RENDER_DEFAULT_RENDERER", "pdf")

    with pytest.raises(ValueError):
        RenderingConfig()


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_cards_path_joins_dir_and_file(tmp_path):
    config = CardsConfig(data_dir=tmp_path, cards_file="cards.json")

    assert config.cards_path == tmp_path / "cards.json"


def test_configure_logging_applies_level(monkeypatch):
    calls = []
    monkeypatch.setattr(
        monitoring.logging, "basicConfig", lambda **kwargs: calls.append(kwargs)
    )

    monitoring.configure_logging(ObservabilityConfig(level="debug"))

    assert calls[0]["level"] == logging.DEBUG
    assert calls[0]["force"] is True


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as exc_info:
        monitoring.configure_logging(ObservabilityConfig(level="LOUD"))

    assert exc_info.value.setting_name == "TSR_LOG_LEVEL"


def test_monitoring_logger_is_module_scoped():
    assert monitoring.logger.name == "trip_sorter.monitoring"
    assert monitoring.__doc__
