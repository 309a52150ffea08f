from .protocols import DEFAULT_SECTION, ConfigReader, Section
from .ini_reader import IniReader
from .yaml_reader import YamlReader

__all__ = ["DEFAULT_SECTION", "ConfigReader", "Section", "IniReader", "YamlReader"]
