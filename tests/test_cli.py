"""Tests for the command-line interface."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from typer.testing import CliRunner

from address_formatter.cli import app
from address_formatter.data.constants import CONF_DIR_ENV

runner = CliRunner()

TOULOUSE_ARGS = [
    "house_number=17",
    "road=Rue du Taur",
    "postcode=31000",
    "town=Toulouse",
    "country=France",
    "country_code=FR",
]


@pytest.fixture(autouse=True)
def no_conf_dir_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONF_DIR_ENV, raising=False)


@pytest.fixture
def broken_conf(tmp_path: Path) -> Path:
    (tmp_path / "components.yaml").write_text("name: city\n", encoding="utf-8")
    (tmp_path / "worldwide.yaml").write_text(
        textwrap.dedent(
            """\
            default:
                address_template: "{{{city}}}"
                fallback_template: "{{{city}}}"
            EE:
                address_template: "{{#first}} {{{city}}} {{/other}}"
            """
        ),
        encoding="utf-8",
    )
    return tmp_path


def test_format_multi_line() -> None:
    result = runner.invoke(app, ["format", *TOULOUSE_ARGS])

    assert result.exit_code == 0
    assert result.output == "17 Rue du Taur\n31000 Toulouse\nFrance\n"


def test_format_one_line() -> None:
    result = runner.invoke(app, ["format", *TOULOUSE_ARGS, "--one-line"])

    assert result.exit_code == 0
    assert result.output == "17 Rue du Taur, 31000 Toulouse, France\n"


def test_format_country_override() -> None:
    result = runner.invoke(app, ["format", *TOULOUSE_ARGS, "-c", "DE"])

    assert result.exit_code == 0
    assert result.output.startswith("Rue du Taur 17\n")


def test_value_may_contain_equals() -> None:
    result = runner.invoke(app, ["format", "road=A=B", "city=C", "--country", "ZZ"])

    assert result.exit_code == 0
    assert result.output.startswith("A=B\n")


def test_malformed_pair_is_a_usage_error() -> None:
    result = runner.invoke(app, ["format", "road"])
    assert result.exit_code == 2


def test_invalid_configuration_directory(tmp_path: Path) -> None:
    result = runner.invoke(
        app, ["format", "city=Oslo", "--conf-dir", str(tmp_path / "nowhere")]
    )

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_render_failure(broken_conf: Path) -> None:
    result = runner.invoke(
        app, ["format", "city=Tallinn", "country_code=EE", "--conf-dir", str(broken_conf)]
    )

    assert result.exit_code == 1
    assert "Formatting failed" in result.output


def test_countries() -> None:
    result = runner.invoke(app, ["countries"])

    assert result.exit_code == 0
    codes = result.output.splitlines()
    assert codes == sorted(codes)
    assert {"FR", "NO", "US"} <= set(codes)


def test_countries_of_custom_directory(broken_conf: Path) -> None:
    result = runner.invoke(app, ["countries", "--conf-dir", str(broken_conf)])

    assert result.exit_code == 0
    assert result.output == "EE\n"
