import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .formats import FormatRegistry, default_registry
from .locator import PathLike, locate_config_file
from .readers import Section
from .settings import DEFAULT_CONFIG_FORMAT, DEFAULT_CONFIG_NAME, ManagerSettings

log = logging.getLogger(__name__)


def flatten_sections(sections: Iterable[Section]) -> Dict[str, str]:
    """
    Folds sections into a single-level map.

    Every entry is stored as `<section>.<key>`. Entries of the default
    section are additionally stored under their bare key.
    """
    flat: Dict[str, str] = {}
    for section in sections:
        if section.is_default:
            for key, value in section.entries:
                flat[key] = value
        for key, value in section.entries:
            flat[f"{section.name}.{key}"] = value
    return flat


class ConfigManager:
    def __init__(
        self,
        config_name: str = DEFAULT_CONFIG_NAME,
        config_format: str = DEFAULT_CONFIG_FORMAT,
        search_paths: Optional[Iterable[PathLike]] = None,
        clear_on_load: bool = False,
        registry: Optional[FormatRegistry] = None,
    ):
        self.config_name = config_name
        self.config_format = config_format
        self.search_paths: List[PathLike] = list(search_paths or [])
        self.clear_on_load = clear_on_load
        self.registry = registry or default_registry
        self._flat_config: Dict[str, str] = {}

    @classmethod
    def from_settings(
        cls, settings: ManagerSettings, registry: Optional[FormatRegistry] = None
    ) -> "ConfigManager":
        return cls(
            config_name=settings.config_name,
            config_format=settings.config_format,
            search_paths=settings.search_paths,
            clear_on_load=settings.clear_on_load,
            registry=registry,
        )

    # --- Configuration ---

    def add_search_path(self, path: PathLike) -> None:
        self.search_paths.append(path)

    def set_config_name(self, name: str) -> None:
        self.config_name = name

    def set_config_format(self, config_format: str) -> None:
        self.config_format = config_format

    def set_clear_on_load(self, clear_on_load: bool) -> None:
        self.clear_on_load = clear_on_load

    # --- Loading ---

    def locate(self) -> Path:
        extensions = self.registry.extensions_for(self.config_format)
        return locate_config_file(self.search_paths, self.config_name, extensions)

    def load(self) -> None:
        """
        Locates, parses and flattens the configured file.

        Raises UnsupportedFormatError before touching the disk if the format
        is not registered. Locator and reader errors propagate unchanged.
        The stored values are only modified once the file parsed successfully.
        """
        fmt = self.registry.get(self.config_format)
        path = locate_config_file(self.search_paths, self.config_name, fmt.extensions)
        flat = flatten_sections(fmt.reader.read(path))

        if self.clear_on_load:
            self._flat_config = flat
        else:
            # Keys missing from the new file keep their previous values.
            self._flat_config.update(flat)

        log.debug(f"Loaded {len(flat)} keys from {path}")

    # --- Access ---

    def get(self, key: str, default: str = "") -> str:
        return self._flat_config.get(key, default)

    @property
    def flat_config(self) -> Dict[str, str]:
        return dict(self._flat_config)
