"""Tests for rule database sources."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from address_formatter import AddressFormatter
from address_formatter.data import DictConfigSource, YAMLConfigSource
from address_formatter.data.constants import CONF_DIR_ENV
from address_formatter.models import ConfigurationError
from address_formatter.protocols import ConfigSourceProtocol

COMPONENTS_YAML = textwrap.dedent(
    """\
    name: road
    aliases:
      - street
    ---
    name: city
    ---
    name: country
    """
)

WORLDWIDE_YAML = textwrap.dedent(
    """\
    default:
        address_template: |
            {{{road}}}
            {{{city}}}
            {{{country}}}
        fallback_template: |
            {{{country}}}
    "NO":
        address_template: |
            {{{city}}}
            {{{road}}}
            {{{country}}}
    """
)


def write_conf(
    directory: Path,
    components: str = COMPONENTS_YAML,
    worldwide: str = WORLDWIDE_YAML,
) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / "components.yaml").write_text(components, encoding="utf-8")
    (directory / "worldwide.yaml").write_text(worldwide, encoding="utf-8")
    return directory


@pytest.fixture(autouse=True)
def no_conf_dir_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONF_DIR_ENV, raising=False)


class TestBundledYAML:
    """Test the bundled rule database."""

    def test_implements_protocol(self) -> None:
        source = YAMLConfigSource()
        assert isinstance(source, ConfigSourceProtocol)
        assert source.conf_dir is None

    def test_components(self) -> None:
        components = YAMLConfigSource().load_components()
        names = [component["name"] for component in components]

        assert "road" in names
        assert "country_code" in names
        assert len(names) == len(set(names))

    def test_countries(self) -> None:
        countries = YAMLConfigSource().load_countries()

        assert "default" in countries
        assert "FR" in countries
        # Quoted in the file, so not read as a boolean
        assert "NO" in countries
        assert False not in countries

    def test_loaded_once(self) -> None:
        source = YAMLConfigSource()
        assert source.load_countries() is source.load_countries()
        assert source.load_components() is source.load_components()


class TestCustomDirectory:
    """Test loading a rule database from a directory."""

    def test_explicit_directory(self, tmp_path: Path) -> None:
        source = YAMLConfigSource(write_conf(tmp_path))

        assert source.conf_dir == tmp_path
        assert [c["name"] for c in source.load_components()] == ["road", "city", "country"]
        assert set(source.load_countries()) == {"default", "NO"}

    def test_directory_from_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv(CONF_DIR_ENV, str(write_conf(tmp_path)))

        source = YAMLConfigSource()

        assert source.conf_dir == tmp_path
        assert set(source.load_countries()) == {"default", "NO"}

    def test_formatter_from_directory(self, tmp_path: Path) -> None:
        formatter = AddressFormatter(config_source=YAMLConfigSource(write_conf(tmp_path)))
        address = {"street": "Karl Johans gate", "city": "Oslo", "country_code": "no"}

        assert formatter.supported_countries() == ["NO"]
        assert formatter.format(address) == "Oslo\nKarl Johans gate\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        source = YAMLConfigSource(tmp_path / "nowhere")

        with pytest.raises(ConfigurationError) as exc_info:
            source.load_components()
        assert exc_info.value.context["file"] == "components.yaml"
        assert "cannot read configuration file" in str(exc_info.value)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        source = YAMLConfigSource(write_conf(tmp_path, worldwide="default: [unclosed\n"))

        with pytest.raises(ConfigurationError) as exc_info:
            source.load_countries()
        assert "invalid YAML in worldwide.yaml" in str(exc_info.value)

    def test_countries_must_be_a_mapping(self, tmp_path: Path) -> None:
        source = YAMLConfigSource(write_conf(tmp_path, worldwide="- FR\n- DE\n"))

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            source.load_countries()

    def test_empty_documents_are_ignored(self, tmp_path: Path) -> None:
        source = YAMLConfigSource(write_conf(tmp_path, components="---\nname: city\n---\n"))
        assert source.load_components() == [{"name": "city"}]


class TestDictConfigSource:
    """Test the in-memory config source."""

    def test_defaults_are_empty(self) -> None:
        source = DictConfigSource()
        assert source.load_components() == []
        assert source.load_countries() == {}

    def test_serves_given_trees(self, small_components, small_countries) -> None:
        source = DictConfigSource(small_components, small_countries)

        assert source.load_components() == small_components
        assert source.load_countries()["AA"] == small_countries["AA"]

    def test_empty_configuration_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            AddressFormatter(config_source=DictConfigSource())
