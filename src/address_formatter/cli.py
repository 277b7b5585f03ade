from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from address_formatter.data import YAMLConfigSource
from address_formatter.models import ConfigurationError, FormatterConfig, TemplateRenderError
from address_formatter.service import AddressFormatter, get_default_formatter

app = typer.Typer(help="Format postal addresses the way each country writes them.")


def _parse_pairs(values: list[str]) -> list[tuple[str, str]]:
    """Split KEY=VALUE arguments, keeping their order."""
    pairs: list[tuple[str, str]] = []
    for value in values:
        name, sep, text = value.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected KEY=VALUE, got {value!r}", param_hint="FIELDS")
        pairs.append((name.strip(), text))
    return pairs


def _load_formatter(conf_dir: Optional[Path]) -> AddressFormatter:
    try:
        if conf_dir is None:
            return get_default_formatter()
        return AddressFormatter(config_source=YAMLConfigSource(conf_dir))
    except ConfigurationError as exc:
        typer.echo(f"Invalid configuration: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("format")
def format_command(
    fields: list[str] = typer.Argument(  # noqa: B008
        ...,
        metavar="KEY=VALUE...",
        help="Address components, e.g. road='Rue du Taur' city=Toulouse country_code=FR.",
    ),
    country: Optional[str] = typer.Option(  # noqa: B008
        None,
        "--country",
        "-c",
        help="Country code overriding the one of the address.",
    ),
    one_line: bool = typer.Option(  # noqa: B008
        False,
        "--one-line",
        help="Print the address on a single line.",
    ),
    conf_dir: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--conf-dir",
        help="Directory holding components.yaml and worldwide.yaml.",
    ),
) -> None:
    """Format one address given as KEY=VALUE pairs."""
    pairs = _parse_pairs(fields)
    formatter = _load_formatter(conf_dir)
    config = FormatterConfig(country_code=country)

    try:
        if one_line:
            typer.echo(formatter.format_one_line(pairs, config))
        else:
            typer.echo(formatter.format_with_config(pairs, config), nl=False)
    except TemplateRenderError as exc:
        typer.echo(f"Formatting failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("countries")
def countries_command(
    conf_dir: Optional[Path] = typer.Option(  # noqa: B008
        None,
        "--conf-dir",
        help="Directory holding components.yaml and worldwide.yaml.",
    ),
) -> None:
    """List the country codes having their own template."""
    for code in _load_formatter(conf_dir).supported_countries():
        typer.echo(code)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
