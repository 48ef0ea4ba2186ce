"""Tests for runtime settings loading, logging setup and mapper bootstrap."""

import logging

import pytest

from entrymapper.bootstrap import bootstrap_create_entry_mapper
from entrymapper.config import EntryMapperSettings, SettingsLoadError, config_configure_logging, config_load_settings
from entrymapper.mapping import EntryMapperPort


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without inherited settings or a local dotenv file."""

    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ENTRYMAPPER_ENUMERATION_ORDER", raising=False)
    monkeypatch.delenv("ENTRYMAPPER_LOG_LEVEL", raising=False)


def test_config_load_settings_uses_defaults() -> None:
    """Load host enumeration order and WARNING level by default.

    Returns:
        None: Assertions validate default settings.

    Raises:
        AssertionError: Raised when defaults differ.
    """

    settings = config_load_settings()

    assert settings.enumeration_order == "host"
    assert settings.log_level == "WARNING"


def test_config_load_settings_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read and normalize prefixed environment variables.

    Returns:
        None: Assertions validate environment overrides.

    Raises:
        AssertionError: Raised when overrides are ignored.
    """

    monkeypatch.setenv("ENTRYMAPPER_ENUMERATION_ORDER", " Insertion ")
    monkeypatch.setenv("ENTRYMAPPER_LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.enumeration_order == "insertion"
    assert settings.log_level == "DEBUG"


def test_config_load_settings_reads_dotenv_file(tmp_path) -> None:
    """Read settings from a `.env` file in the working directory.

    Returns:
        None: Assertions validate dotenv loading.

    Raises:
        AssertionError: Raised when dotenv values are ignored.
    """

    (tmp_path / ".env").write_text("ENTRYMAPPER_ENUMERATION_ORDER=insertion\n", encoding="utf-8")

    assert config_load_settings().enumeration_order == "insertion"


@pytest.mark.parametrize(
    ("variable_name", "value"),
    [
        ("ENTRYMAPPER_ENUMERATION_ORDER", "sorted"),
        ("ENTRYMAPPER_LOG_LEVEL", "LOUD"),
    ],
)
def test_config_load_settings_wraps_validation_errors(
    monkeypatch: pytest.MonkeyPatch,
    variable_name: str,
    value: str,
) -> None:
    """Raise SettingsLoadError for invalid setting values.

    Returns:
        None: Assertions validate error wrapping.

    Raises:
        AssertionError: Raised when invalid settings load successfully.
    """

    monkeypatch.setenv(variable_name, value)

    with pytest.raises(SettingsLoadError, match="configuration validation failed"):
        config_load_settings()


def test_config_configure_logging_sets_package_level() -> None:
    """Apply the configured level to the package logger.

    Returns:
        None: Assertions validate logger configuration.

    Raises:
        AssertionError: Raised when the level is not applied.
    """

    package_logger = config_configure_logging(EntryMapperSettings(log_level="ERROR"))

    assert package_logger.name == "entrymapper"
    assert package_logger.level == logging.ERROR
    package_logger.setLevel(logging.NOTSET)


def test_bootstrap_create_entry_mapper_applies_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Build a mapper whose enumeration order comes from settings.

    Returns:
        None: Assertions validate bootstrap wiring.

    Raises:
        AssertionError: Raised when settings are not applied.
    """

    monkeypatch.setenv("ENTRYMAPPER_ENUMERATION_ORDER", "insertion")

    mapper: EntryMapperPort = bootstrap_create_entry_mapper()
    result = mapper.mapping_map_entries({"b": 1, "1": 2}, lambda entry: entry)

    assert mapper.mapping_enumeration_order() == "insertion"
    assert list(result) == ["b", "1"]
    logging.getLogger("entrymapper").setLevel(logging.NOTSET)
