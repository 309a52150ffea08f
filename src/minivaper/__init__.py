from .exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    NoValidDirectoriesError,
    ParseError,
    SettingsError,
    UnsupportedFormatError,
)
from .formats import (
    FILE_EXTENSIONS,
    ConfigFormat,
    FormatRegistry,
    create_default_registry,
    default_registry,
)
from .locator import locate_config_file
from .manager import ConfigManager, flatten_sections
from .readers import DEFAULT_SECTION, ConfigReader, IniReader, Section, YamlReader
from .settings import ManagerSettings, load_settings_from_path

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "NoValidDirectoriesError",
    "ParseError",
    "SettingsError",
    "UnsupportedFormatError",
    "FILE_EXTENSIONS",
    "ConfigFormat",
    "FormatRegistry",
    "create_default_registry",
    "default_registry",
    "locate_config_file",
    "ConfigManager",
    "flatten_sections",
    "DEFAULT_SECTION",
    "ConfigReader",
    "IniReader",
    "Section",
    "YamlReader",
    "ManagerSettings",
    "load_settings_from_path",
]
