"""Bootstrap wiring for settings validation and entry mapper assembly."""

from entrymapper.config import config_configure_logging, config_load_settings
from entrymapper.mapping import EntryMapper, EntryMapperConfig, EntryMapperPort


def bootstrap_create_entry_mapper() -> EntryMapperPort:
    """Assemble an entry mapper after validating runtime settings.

    Returns:
        EntryMapperPort: Entry mapper configured from environment and dotenv.

    Raises:
        SettingsLoadError: Raised when settings validation fails.
    """

    settings = config_load_settings()
    config_configure_logging(settings)
    return EntryMapper(
        config=EntryMapperConfig(enumeration_order=settings.enumeration_order),
    )
