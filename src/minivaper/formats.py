from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .exceptions import UnsupportedFormatError
from .readers import ConfigReader, IniReader, YamlReader


@dataclass(frozen=True)
class ConfigFormat:
    name: str
    # Tried in this order when locating a file.
    extensions: Tuple[str, ...]
    reader: ConfigReader


class FormatRegistry:
    """
    Binds each format tag to its file extensions and its reader.

    A format is loadable exactly when it is registered, so the extension
    table and the set of supported formats stay in step.
    """

    def __init__(self, formats: Optional[List[ConfigFormat]] = None):
        self._formats: Dict[str, ConfigFormat] = {}
        for fmt in formats or []:
            self.register(fmt)

    def register(self, fmt: ConfigFormat) -> None:
        if not fmt.extensions:
            raise ValueError(f"Format '{fmt.name}' must declare at least one extension.")
        self._formats[fmt.name] = fmt

    def is_supported(self, name: str) -> bool:
        return name in self._formats

    def supported_formats(self) -> List[str]:
        return list(self._formats)

    def get(self, name: str) -> ConfigFormat:
        try:
            return self._formats[name]
        except KeyError:
            raise UnsupportedFormatError(name, self.supported_formats()) from None

    def extensions_for(self, name: str) -> Tuple[str, ...]:
        return self.get(name).extensions

    def extension_table(self) -> Mapping[str, Tuple[str, ...]]:
        return MappingProxyType(
            {name: fmt.extensions for name, fmt in self._formats.items()}
        )


def create_default_registry() -> FormatRegistry:
    return FormatRegistry(
        [
            ConfigFormat("ini", ("ini",), IniReader()),
            ConfigFormat("yaml", ("yml", "yaml"), YamlReader()),
        ]
    )


default_registry = create_default_registry()

FILE_EXTENSIONS = default_registry.extension_table()
