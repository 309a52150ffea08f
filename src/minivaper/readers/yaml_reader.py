from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from minivaper.exceptions import ParseError
from .protocols import DEFAULT_SECTION, Section


def _render(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_render(v) for v in value)
    return str(value)


def _flatten_mapping(prefix: str, data: Dict[Any, Any]) -> List[Tuple[str, str]]:
    entries: List[Tuple[str, str]] = []
    for key, value in data.items():
        composite_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            entries.extend(_flatten_mapping(composite_key, value))
        else:
            entries.append((composite_key, _render(value)))
    return entries


class YamlReader:
    """
    Reads a YAML mapping as sections.

    Top-level scalars and lists form the DEFAULT section. Each top-level
    mapping becomes a named section; deeper mappings are folded into
    dotted keys within that section.
    """

    def read(self, path: Path) -> List[Section]:
        try:
            with path.open("r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            raise ParseError(path, str(e)) from e

        if content is None:
            return []
        if not isinstance(content, dict):
            raise ParseError(
                path, f"expected a mapping at the top level, got {type(content).__name__}"
            )

        default = Section(name=DEFAULT_SECTION)
        named: List[Section] = []
        for key, value in content.items():
            if isinstance(value, dict):
                named.append(Section(name=str(key), entries=_flatten_mapping("", value)))
            else:
                default.entries.append((str(key), _render(value)))

        return [default] + named
