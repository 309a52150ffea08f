import logging
import os
from pathlib import Path
from typing import List, Sequence, Union

from .exceptions import ConfigFileNotFoundError, NoValidDirectoriesError

log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def _valid_directories(search_paths: Sequence[PathLike]) -> List[Path]:
    directories: List[Path] = []
    for raw_path in search_paths:
        # Path("") would silently become the current directory.
        if os.fspath(raw_path) and os.path.isdir(raw_path):
            directories.append(Path(os.path.abspath(raw_path)))
        else:
            log.debug(f"Skipping search path {raw_path}: not an existing directory")
    return directories


def strip_extension(config_name: str) -> str:
    base, _ = os.path.splitext(config_name)
    return base


def locate_config_file(
    search_paths: Sequence[PathLike],
    config_name: str,
    extensions: Sequence[str],
) -> Path:
    """
    Finds the first existing `<dir>/<name>.<ext>` file.

    Extensions are the outer loop and directories the inner one, so every
    directory is tried with the first extension before the second extension
    is considered. Search paths are checked against the disk on every call.

    Raises:
        NoValidDirectoriesError: No search path is an existing directory.
        ConfigFileNotFoundError: No name/extension combination exists.
    """
    directories = _valid_directories(search_paths)
    if not directories:
        raise NoValidDirectoriesError(search_paths)

    base_name = strip_extension(config_name)
    stems = [directory / base_name for directory in directories]

    for ext in extensions:
        for stem in stems:
            candidate = Path(f"{stem}.{ext}")
            if candidate.exists():
                log.debug(f"Located config file {candidate}")
                return candidate

    raise ConfigFileNotFoundError(base_name, extensions, directories)
