import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from .exceptions import SettingsError

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

DEFAULT_CONFIG_NAME = "sso_config"
DEFAULT_CONFIG_FORMAT = "ini"


@dataclass
class ManagerSettings:
    search_paths: List[str] = field(default_factory=list)
    config_name: str = DEFAULT_CONFIG_NAME
    config_format: str = DEFAULT_CONFIG_FORMAT
    clear_on_load: bool = False


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_settings_from_path(search_path: Path) -> ManagerSettings:
    """
    Reads the [tool.minivaper] table of the nearest pyproject.toml.

    Relative search paths are anchored at the directory holding the
    pyproject.toml, not at the current working directory.
    """
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return ManagerSettings()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    tool_data: Dict[str, Any] = data.get("tool", {}).get("minivaper", {})

    clear_on_load = tool_data.get("clear_on_load", False)
    if not isinstance(clear_on_load, bool):
        raise SettingsError(
            config_path,
            "clear_on_load",
            f"expected a boolean, got {type(clear_on_load).__name__}",
        )

    project_root = config_path.parent
    search_paths = [
        str(project_root / p) if not Path(p).is_absolute() else str(p)
        for p in tool_data.get("search_paths", [])
    ]

    return ManagerSettings(
        search_paths=search_paths,
        config_name=tool_data.get("config_name", DEFAULT_CONFIG_NAME),
        config_format=tool_data.get("config_format", DEFAULT_CONFIG_FORMAT),
        clear_on_load=clear_on_load,
    )
