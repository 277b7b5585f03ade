from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from importlib import resources
from pathlib import Path
from typing import IO, Any

import yaml

from address_formatter.data.base import BaseConfigSource
from address_formatter.data.constants import (
    COMPONENTS_FILE,
    CONF_DIR_ENV,
    CONF_DIRNAME,
    CONF_PACKAGE,
    COUNTRIES_FILE,
)
from address_formatter.models.errors import ConfigurationError

logger = logging.getLogger(__name__)


class YAMLConfigSource(BaseConfigSource):
    """Config source that loads the rule database from YAML files.

    By default, loads the bundled ``components.yaml`` and ``worldwide.yaml``.
    A different directory holding files with the same names can be given
    explicitly or through the ``ADDRESS_FORMATTER_CONF_DIR`` environment
    variable.
    """

    def __init__(self, conf_dir: str | Path | None = None) -> None:
        """Initialize YAML config source.

        Args:
            conf_dir: Directory holding the YAML files. If None, uses
                ``$ADDRESS_FORMATTER_CONF_DIR`` or the bundled files.
        """
        super().__init__()
        conf_dir = conf_dir or os.environ.get(CONF_DIR_ENV) or None
        self._conf_dir = Path(conf_dir) if conf_dir else None

    @property
    def conf_dir(self) -> Path | None:
        """Custom configuration directory, or None for the bundled files."""
        return self._conf_dir

    @contextmanager
    def _open(self, filename: str) -> Iterator[IO[str]]:
        """Open one of the configuration files for reading.

        Raises:
            ConfigurationError: If the file cannot be opened.
        """
        try:
            if self._conf_dir is not None:
                handle = open(self._conf_dir / filename, encoding="utf-8")  # noqa: SIM115
            else:
                # Bundled file - use importlib.resources
                data_file = resources.files(CONF_PACKAGE).joinpath(CONF_DIRNAME).joinpath(filename)
                handle = data_file.open("r", encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError.from_exception(
                "configuration_error",
                "cannot read configuration file {file}: {reason}",
                exc,
                {"file": filename},
            ) from exc

        logger.debug("Loading %s from %s", filename, self._conf_dir or "bundled data")
        with handle:
            yield handle

    def _load_components(self) -> Sequence[Mapping[str, Any]]:
        """Load component definitions, one YAML document per component."""
        with self._open(COMPONENTS_FILE) as f:
            try:
                documents = [doc for doc in yaml.safe_load_all(f) if doc is not None]
            except yaml.YAMLError as exc:
                raise ConfigurationError.from_exception(
                    "configuration_error",
                    "invalid YAML in {file}: {reason}",
                    exc,
                    {"file": COMPONENTS_FILE},
                ) from exc
        return documents

    def _load_countries(self) -> Mapping[Any, Any]:
        """Load the per-country rule blocks."""
        with self._open(COUNTRIES_FILE) as f:
            try:
                countries = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ConfigurationError.from_exception(
                    "configuration_error",
                    "invalid YAML in {file}: {reason}",
                    exc,
                    {"file": COUNTRIES_FILE},
                ) from exc

        if not isinstance(countries, Mapping):
            raise ConfigurationError.create(
                "{file} must contain a mapping of country rules", file=COUNTRIES_FILE
            )
        return countries
