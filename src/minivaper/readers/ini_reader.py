import configparser
from pathlib import Path
from typing import List

from minivaper.exceptions import ParseError
from .protocols import DEFAULT_SECTION, Section

# configparser copies its default section into every other section.
# Pointing it at a name no file uses keeps [DEFAULT] an ordinary section.
_NO_INHERITANCE = "\x00minivaper-no-inheritance"

_QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def _describe_parsing_error(error: configparser.ParsingError) -> str:
    # Line numbers count the synthetic DEFAULT header; shift them back.
    # configparser stores each offending line already repr()'d.
    errors = getattr(error, "errors", None)
    if not errors:
        return str(error)
    details = ", ".join(f"[line {lineno - 1}]: {line}" for lineno, line in errors)
    return f"invalid lines {details}"


class IniReader:
    def read(self, path: Path) -> List[Section]:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(path, str(e)) from e

        parser = configparser.ConfigParser(
            default_section=_NO_INHERITANCE,
            interpolation=None,
            strict=False,
            inline_comment_prefixes=("#", ";"),
        )
        parser.optionxform = str  # type: ignore[assignment]

        # Keys above the first header go to DEFAULT; a later explicit
        # [DEFAULT] header merges into it because strict is off.
        try:
            parser.read_string(f"[{DEFAULT_SECTION}]\n{text}", source=str(path))
        except configparser.ParsingError as e:
            raise ParseError(path, _describe_parsing_error(e)) from e
        except configparser.Error as e:
            raise ParseError(path, str(e)) from e

        return [
            Section(
                name=name,
                entries=[(key, _unquote(value)) for key, value in parser.items(name)],
            )
            for name in parser.sections()
        ]
