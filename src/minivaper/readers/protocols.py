from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol, Tuple

DEFAULT_SECTION = "DEFAULT"


@dataclass
class Section:
    name: str
    entries: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_default(self) -> bool:
        return self.name == DEFAULT_SECTION


class ConfigReader(Protocol):
    """
    Protocol for config file readers.

    A reader turns one file on disk into an ordered list of sections.
    """

    def read(self, path: Path) -> List[Section]:
        """
        Parses the file at the given path.

        Args:
            path: The located config file.

        Returns:
            Sections in file order. Keys that appear before any section
            header belong to the section named DEFAULT_SECTION.

        Raises:
            ParseError: The file could not be read or parsed.
        """
        ...
