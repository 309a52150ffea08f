from pathlib import Path
from typing import Sequence, Union


class ConfigError(Exception):
    pass


class UnsupportedFormatError(ConfigError):
    def __init__(self, config_format: str, supported: Sequence[str]):
        self.config_format = config_format
        self.supported = list(supported)
        super().__init__(
            f"Config format '{config_format}' is not supported. "
            f"Supported formats: {self.supported}"
        )


class NoValidDirectoriesError(ConfigError):
    def __init__(self, search_paths: Sequence[Union[str, Path]]):
        self.search_paths = [str(p) for p in search_paths]
        super().__init__(
            f"Cannot find any config directories: {self.search_paths}"
        )


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    def __init__(
        self,
        config_name: str,
        extensions: Sequence[str],
        directories: Sequence[Union[str, Path]],
    ):
        self.config_name = config_name
        self.extensions = list(extensions)
        self.directories = [str(d) for d in directories]
        # FileNotFoundError's own __init__ would reinterpret positional args as errno.
        ConfigError.__init__(
            self,
            f"Cannot find config file '{config_name}' with extensions "
            f"{self.extensions} in {self.directories}",
        )


class ParseError(ConfigError):
    def __init__(self, path: Union[str, Path], message: str):
        self.path = Path(path)
        self.message = message
        super().__init__(f"Failed to parse config file '{self.path}': {message}")


class SettingsError(ConfigError):
    def __init__(self, pyproject_path: Union[str, Path], key: str, message: str):
        self.pyproject_path = Path(pyproject_path)
        self.key = key
        super().__init__(
            f"Invalid [tool.minivaper] {key} in '{self.pyproject_path}': {message}"
        )
