import pytest
from pathlib import Path
from textwrap import dedent

from minivaper import DEFAULT_SECTION, ParseError, YamlReader


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "cfg.yml"
    path.write_text(dedent(content).lstrip(), encoding="utf-8")
    return path


def test_top_level_scalars_form_default_section(tmp_path: Path):
    path = _write(
        tmp_path,
        """
        name: demo
        db:
          host: localhost
          port: 5432
        debug: true
        """,
    )

    sections = YamlReader().read(path)

    assert [s.name for s in sections] == [DEFAULT_SECTION, "db"]
    assert sections[0].entries == [("name", "demo"), ("debug", "true")]
    assert sections[1].entries == [("host", "localhost"), ("port", "5432")]


def test_nested_mappings_become_dotted_keys(tmp_path: Path):
    path = _write(
        tmp_path,
        """
        db:
          primary:
            host: a
          replica:
            host: b
        """,
    )

    db = YamlReader().read(path)[1]

    assert db.entries == [("primary.host", "a"), ("replica.host", "b")]


def test_null_and_list_values_are_rendered_as_strings(tmp_path: Path):
    path = _write(
        tmp_path,
        """
        empty:
        hosts: [a, b, 3]
        """,
    )

    default = YamlReader().read(path)[0]

    assert default.entries == [("empty", ""), ("hosts", "a,b,3")]


def test_empty_document_has_no_sections(tmp_path: Path):
    assert YamlReader().read(_write(tmp_path, "")) == []


def test_non_mapping_document_raises(tmp_path: Path):
    path = _write(tmp_path, "- a\n- b\n")

    with pytest.raises(ParseError) as exc_info:
        YamlReader().read(path)

    assert exc_info.value.path == path


def test_invalid_yaml_raises_parse_error(tmp_path: Path):
    path = _write(tmp_path, "a: [unclosed\n")

    with pytest.raises(ParseError):
        YamlReader().read(path)
